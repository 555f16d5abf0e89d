"""Access control documents, WebID profiles and basic resource operation handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

_DEFAULT_CONTENT_TYPE = "text/turtle"


@dataclass
class Access:
    """An access control entry."""

    agent: str = ""
    group: str = ""
    origin: str = ""
    mode: list[str] = field(default_factory=list)
    resource: str = ""
    inherited: bool = False


@dataclass
class ACL:
    """An access control list for a path."""

    path: str = ""
    access_to: list[str] = field(default_factory=list)
    default: list[str] = field(default_factory=list)
    access: list[Access] = field(default_factory=list)
    default_for: list[Access] = field(default_factory=list)


@dataclass
class Account:
    """An account linked to a WebID profile."""

    provider: str
    uri: str


@dataclass
class WebID:
    """A WebID profile."""

    uri: str
    name: str = ""
    email: str = ""
    picture: str = ""
    accounts: list[Account] = field(default_factory=list)


class WebIDStore:
    """Keeps WebID profiles in memory, keyed by URI."""

    def __init__(self) -> None:
        self._profiles: dict[str, WebID] = {}

    def get(self, uri: str) -> WebID | None:
        """The profile with the URI, or None."""
        return self._profiles.get(uri)

    def put(self, profile: WebID) -> None:
        """Store the profile, replacing any with the same URI."""
        self._profiles[profile.uri] = profile

    def delete(self, uri: str) -> None:
        """Remove the profile with the URI, if there is one."""
        self._profiles.pop(uri, None)


@dataclass(frozen=True)
class ResourceIdentifier:
    """Identifies a resource by its path."""

    path: str


@dataclass
class Operation:
    """An operation on a target resource."""

    target: str
    body: bytes = b""


@dataclass
class Representation:
    """The data and metadata returned by an operation."""

    data: bytes = b""
    metadata: dict[str, str] = field(default_factory=dict)


class ResourceStorage(Protocol):
    """Stores resource data by path."""

    def get(self, path: str) -> bytes:
        """The data at the path; raises when it cannot be read."""
        ...

    def put(self, path: str, data: bytes) -> None:
        """Store the data at the path."""
        ...

    def delete(self, path: str) -> None:
        """Remove the data at the path."""
        ...


class GetOperationHandler:
    """Returns the stored data of the target as Turtle."""

    def __init__(self, storage: ResourceStorage) -> None:
        self.storage = storage

    def handle(self, operation: Operation) -> Representation:
        data = self.storage.get(operation.target)
        return Representation(data=data, metadata={"Content-Type": _DEFAULT_CONTENT_TYPE})


class PutOperationHandler:
    """Stores the operation body at the target."""

    def __init__(self, storage: ResourceStorage) -> None:
        self.storage = storage

    def handle(self, operation: Operation) -> Representation:
        self.storage.put(operation.target, operation.body)
        return Representation(metadata={"Content-Type": _DEFAULT_CONTENT_TYPE})


class DeleteOperationHandler:
    """Removes the target from storage."""

    def __init__(self, storage: ResourceStorage) -> None:
        self.storage = storage

    def handle(self, operation: Operation) -> Representation:
        self.storage.delete(operation.target)
        return Representation()