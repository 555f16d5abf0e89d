"""Access modes, permission sets and the interfaces that produce or consult them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Protocol


class AccessMode(str, Enum):
    """A mode of access that requires permission."""

    READ = "read"
    WRITE = "write"
    APPEND = "append"
    CREATE = "create"
    DELETE = "delete"
    CONTROL = "control"


AccessMap = dict[str, set[AccessMode]]
"""Maps resource identifiers to the access modes required on them."""


class PermissionSet(dict):
    """Maps access modes to whether they are granted.

    A mode that is absent is undecided; a mode mapped to False is explicitly denied.
    """

    def __init__(self, modes: Mapping[Any, bool] | Iterable[Any] = ()) -> None:
        super().__init__()
        if isinstance(modes, Mapping):
            for mode, allowed in modes.items():
                self[AccessMode(mode)] = bool(allowed)
        else:
            for mode in modes:
                self[AccessMode(mode)] = True

    def has(self, mode: AccessMode) -> bool:
        """Whether the mode is granted."""
        return bool(self.get(mode, False))

    def add(self, mode: AccessMode) -> None:
        """Grant the mode."""
        self[AccessMode(mode)] = True

    def remove(self, mode: AccessMode) -> None:
        """Forget any decision about the mode."""
        self.pop(mode, None)

    def clear(self) -> None:
        """Forget every decision."""
        super().clear()

    def granted(self) -> list[AccessMode]:
        """The granted modes, in the order they were set."""
        return [mode for mode, allowed in self.items() if allowed]

    def intersect(self, other: PermissionSet) -> PermissionSet:
        """A new set granting the modes of this set that the other grants."""
        return PermissionSet(mode for mode in self if other.has(mode))

    def union(self, other: PermissionSet) -> PermissionSet:
        """A new set granting every mode that either set holds."""
        return PermissionSet([*self, *other])

    def difference(self, other: PermissionSet) -> PermissionSet:
        """A new set granting the modes of this set that the other does not grant."""
        return PermissionSet(mode for mode in self if not other.has(mode))


class ModesExtractor(Protocol):
    """Determines the access modes needed to execute a request."""

    def extract(self, request: Any) -> AccessMap:
        """Return the access modes the request requires per resource."""
        ...


class ResourceSet(Protocol):
    """Tells whether a resource exists."""

    def has_resource(self, path: str) -> bool:
        """Whether a resource exists at the path."""
        ...


class ExistenceStorage(Protocol):
    """Storage that can tell whether something is stored at a path."""

    def exists(self, path: str) -> bool:
        """Whether data exists at the path."""
        ...


class IdentifierStrategy(Protocol):
    """Knows how resource identifiers relate to their containers."""

    def is_root_container(self, path: str) -> bool:
        """Whether the path is a root container."""
        ...

    def get_parent_container(self, path: str) -> str:
        """The container holding the path."""
        ...