"""Permission readers: the reader interface and readers that combine or fix permissions."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from .credentials import Credentials
from .permissions import AccessMode, PermissionSet

PermissionMap = dict[str, PermissionSet]
"""Maps resource identifiers to their permission sets."""

_ALL_STATIC_MODES = (
    AccessMode.READ,
    AccessMode.WRITE,
    AccessMode.APPEND,
    AccessMode.CREATE,
    AccessMode.DELETE,
)


@dataclass
class PermissionReaderInput:
    """What a permission reader is asked: who is asking, and which modes on which resources."""

    credentials: Credentials | None = None
    requested_modes: dict[str, PermissionSet] = field(default_factory=dict)


class PermissionReader(Protocol):
    """Determines which permissions are available on resources.

    Readers raise an exception when they cannot answer.
    """

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        """Return the permission set of each resource the reader knows about."""
        ...


def _clean(path: str) -> str:
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dirname(path: str) -> str:
    return _clean(path[: path.rfind("/") + 1])


def _basename(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped[stripped.rfind("/") + 1 :]


def _join(*elements: str) -> str:
    joined = "/".join(element for element in elements if element)
    return _clean(joined) if joined else ""


class DefaultPermissionReader:
    """Grants exactly the modes that were requested on each resource."""

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        return {
            resource: PermissionSet(list(modes))
            for resource, modes in request.requested_modes.items()
        }


class AllStaticReader:
    """Grants all modes, or none, whatever the resource and requested modes."""

    def __init__(self, allow: bool) -> None:
        self.permissions = PermissionSet(_ALL_STATIC_MODES if allow else ())

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        return {resource: PermissionSet(self.permissions) for resource in request.requested_modes}

    def add_permission(self, mode: AccessMode) -> None:
        """Grant the mode on every resource."""
        self.permissions.add(mode)

    def remove_permission(self, mode: AccessMode) -> None:
        """Stop granting the mode."""
        self.permissions.remove(mode)

    def has_permission(self, mode: AccessMode) -> bool:
        """Whether the mode is granted."""
        return self.permissions.has(mode)

    def clear_permissions(self) -> None:
        """Grant nothing."""
        self.permissions.clear()


class AuxiliaryReader:
    """Grants on a resource the modes found on its ``.meta`` and ``.acl`` auxiliary resources."""

    def __init__(self, reader: PermissionReader) -> None:
        self.reader = reader

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        result: PermissionMap = {}
        for resource in request.requested_modes:
            perms = PermissionSet()
            for path in self._auxiliary_paths(resource):
                aux_input = PermissionReaderInput(
                    credentials=request.credentials,
                    requested_modes={path: PermissionSet()},
                )
                try:
                    aux_result = self.reader.read(aux_input)
                except Exception:
                    continue
                for mode in (aux_result or {}).get(path, ()):
                    perms.add(mode)
            result[resource] = perms
        return result

    @staticmethod
    def _auxiliary_paths(resource: str) -> list[str]:
        directory = _dirname(resource)
        base = _basename(resource)
        return [
            _join(directory, f".{base}.meta"),
            _join(directory, f".{base}.acl"),
        ]

    def auxiliary_path(self, path: str) -> str:
        """The ``.aux`` resource next to the path."""
        return _join(_dirname(path), ".aux")

    def is_auxiliary(self, path: str) -> bool:
        """Whether the path names an ``.aux`` resource."""
        return _basename(path) == ".aux"


class UnionPermissionReader:
    """Combines several readers; per mode, an explicit denial beats a grant beats no answer.

    Readers that fail are skipped.
    """

    def __init__(self, *readers: PermissionReader) -> None:
        self._readers: list[PermissionReader] = list(readers)

    @property
    def readers(self) -> tuple[PermissionReader, ...]:
        """The combined readers, in the order they are consulted."""
        return tuple(self._readers)

    def __len__(self) -> int:
        return len(self._readers)

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        result: PermissionMap = {}
        for reader in self._readers:
            try:
                reader_result = reader.read(request)
            except Exception:
                continue
            for identifier, perms in (reader_result or {}).items():
                self._merge(perms, result.setdefault(identifier, PermissionSet()))
        return result

    @staticmethod
    def _merge(perms: PermissionSet, result: PermissionSet) -> None:
        for mode, allowed in perms.items():
            if result.get(mode) is not False:
                result[mode] = allowed

    def add_reader(self, reader: PermissionReader) -> None:
        """Consult the reader after the others."""
        self._readers.append(reader)

    def remove_reader(self, reader: PermissionReader) -> None:
        """Stop consulting the reader; unknown readers are ignored."""
        for index, existing in enumerate(self._readers):
            if existing is reader:
                del self._readers[index]
                return

    def clear_readers(self) -> None:
        """Stop consulting any reader."""
        self._readers.clear()

    def has_reader(self, reader: PermissionReader) -> bool:
        """Whether the reader is consulted."""
        return any(existing is reader for existing in self._readers)

    @staticmethod
    def _as_list(readers: Iterable[PermissionReader]) -> list[PermissionReader]:
        return list(readers)