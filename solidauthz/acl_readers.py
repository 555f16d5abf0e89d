"""Permission readers backed by WebACL and Access Control Policy documents."""

from __future__ import annotations

import json
import posixpath
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol

from .acp_util import acp_path, acp_resource_path, is_acp_path
from .permissions import AccessMode, PermissionSet

_MODE_NAMES = {
    "Read": AccessMode.READ,
    "Write": AccessMode.WRITE,
    "Append": AccessMode.APPEND,
    "Control": AccessMode.CONTROL,
}


class DocumentStorage(Protocol):
    """Storage that returns the raw contents of a document."""

    def get(self, path: str) -> bytes:
        """The data stored at the path; raises when it cannot be read."""
        ...


def _acl_path(resource: str) -> str:
    directory = resource[: resource.rfind("/") + 1]
    if not directory:
        return ".acl"
    cleaned = posixpath.normpath(directory + "/.acl")
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _strings(document: dict[str, Any], key: str) -> list[str]:
    value = document.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of strings")
    return list(value)


def _objects(document: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = document.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ValueError(f"{key} must be a list of objects")
    return value


def _load_object(data: bytes | str) -> dict[str, Any]:
    document = json.loads(data)
    if not isinstance(document, dict):
        raise ValueError("document must be a JSON object")
    return document


def _known_modes(names: Iterable[str]) -> list[AccessMode]:
    return [_MODE_NAMES[name] for name in names if name in _MODE_NAMES]


@dataclass
class WebACL:
    """A WebACL authorization document."""

    access_to: list[str] = field(default_factory=list)
    default: list[str] = field(default_factory=list)
    access_to_class: list[str] = field(default_factory=list)
    mode: list[str] = field(default_factory=list)
    agent: list[str] = field(default_factory=list)
    agent_class: list[str] = field(default_factory=list)
    agent_group: list[str] = field(default_factory=list)

    _KEYS = (
        ("access_to", "accessTo", False),
        ("default", "default", True),
        ("access_to_class", "accessToClass", True),
        ("mode", "mode", False),
        ("agent", "agent", True),
        ("agent_class", "agentClass", True),
        ("agent_group", "agentGroup", True),
    )

    @classmethod
    def from_json(cls, data: bytes | str) -> WebACL:
        """Parse a JSON document; raises ValueError when it is malformed."""
        document = _load_object(data)
        return cls(**{attr: _strings(document, key) for attr, key, _ in cls._KEYS})

    def to_json(self) -> str:
        """Serialise to JSON, leaving out empty optional fields."""
        document = {
            key: list(getattr(self, attr))
            for attr, key, optional in self._KEYS
            if not optional or getattr(self, attr)
        }
        return json.dumps(document)

    def permissions(self) -> PermissionSet:
        """The Read, Write, Append and Control modes the document grants."""
        return PermissionSet(_known_modes(self.mode))


class WebACLReader:
    """Reads permissions from the ``.acl`` document next to a resource.

    Storage failures and malformed documents are raised to the caller.
    """

    def __init__(self, storage: DocumentStorage) -> None:
        self.storage = storage

    def _load(self, resource: str) -> WebACL:
        return WebACL.from_json(self.storage.get(_acl_path(resource)))

    def read(self, resource: str) -> PermissionSet:
        """The modes granted by the resource's ACL document."""
        return self._load(resource).permissions()

    def permissions_for(self, resource: str, agent: str) -> PermissionSet:
        """The modes granted to the agent; empty when the document does not name it."""
        acl = self._load(resource)
        if agent not in acl.agent:
            return PermissionSet()
        return acl.permissions()


class ACPReader:
    """Reads permissions from the ``.acp`` policy document next to a resource.

    Within each policy, allowed modes are granted and then denied modes removed.
    Storage failures and malformed documents are raised to the caller.
    """

    def __init__(self, storage: DocumentStorage) -> None:
        self.storage = storage

    def read(self, resource: str) -> PermissionSet:
        """The modes the resource's policies leave granted."""
        document = _load_object(self.storage.get(self.acp_path(resource)))
        perms = PermissionSet()
        for policy in _objects(document, "policy"):
            for rule in _objects(policy, "allow"):
                for mode in _known_modes(_strings(rule, "mode")):
                    perms.add(mode)
            for rule in _objects(policy, "deny"):
                for mode in _known_modes(_strings(rule, "mode")):
                    perms.remove(mode)
        return perms

    def acp_path(self, path: str) -> str:
        """The ``.acp`` file in the directory of the path."""
        return acp_path(path)

    def is_acp(self, path: str) -> bool:
        """Whether the path names an ``.acp`` file."""
        return is_acp_path(path)

    def acp_resource(self, path: str) -> str:
        """The ``acp`` resource in the directory of the path."""
        return acp_resource_path(path)