"""A reader collecting permissions from authentication-related auxiliary resources."""

from __future__ import annotations

import posixpath
from typing import Protocol

from .permissions import AccessMode, PermissionSet

_COLLECTED_MODES = (AccessMode.READ, AccessMode.WRITE, AccessMode.APPEND, AccessMode.CONTROL)


class _ResourcePermissionReader(Protocol):
    def read(self, resource: str) -> PermissionSet: ...


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


class AuthAuxiliaryReader:
    """Grants on a resource the modes found on its ``.auth`` and ``.webid`` auxiliaries.

    Auxiliary resources whose permissions cannot be read are skipped.
    """

    def __init__(self, reader: _ResourcePermissionReader) -> None:
        self.reader = reader

    def read(self, resource: str) -> PermissionSet:
        perms = PermissionSet()
        for path in self._auxiliary_paths(resource):
            try:
                aux_perms = self.reader.read(path)
            except Exception:
                continue
            for mode in _COLLECTED_MODES:
                if aux_perms.has(mode):
                    perms.add(mode)
        return perms

    @staticmethod
    def _auxiliary_paths(resource: str) -> list[str]:
        directory = _dirname(resource)
        base = _basename(resource)
        return [_join(directory, f".{base}.auth"), _join(directory, f".{base}.webid")]

    def auth_auxiliary_path(self, path: str) -> str:
        """The ``.auth`` resource in the directory of the path."""
        return _join(_dirname(path), ".auth")

    def is_auth_auxiliary(self, path: str) -> bool:
        """Whether the path names an ``.auth`` resource."""
        return _basename(path) == ".auth"

    def auth_resource(self, path: str) -> str:
        """The ``auth`` resource in the directory of the path."""
        return _join(_dirname(path), "auth")