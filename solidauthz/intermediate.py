"""Permissions needed when a request would create missing intermediate containers."""

from __future__ import annotations

import posixpath
from collections.abc import Iterator

from .credentials import HttpRequest
from .permissions import AccessMode, ExistenceStorage, PermissionSet

_CREATE_METHODS = frozenset({"PUT", "POST"})
_PATCH_CONTENT_TYPES = ("text/n3", "application/sparql-update")


def _join(base: str, element: str) -> str:
    joined = "/".join(part for part in (base, element) if part)
    return posixpath.normpath(joined) if joined else ""


def _intermediate_candidates(resource_path: str) -> Iterator[str]:
    """The successive ancestor paths of a resource, not counting the resource itself."""
    components = resource_path.split("/")
    current = ""
    for component in components[1:-1]:
        current = _join(current, component)
        yield current


def _has_patch_content_type(request: HttpRequest) -> bool:
    content_type = request.header("Content-Type")
    return any(kind in content_type for kind in _PATCH_CONTENT_TYPES)


class IntermediateCreateExtractor:
    """Determines the permissions needed to create missing intermediate resources."""

    def __init__(self, storage: ExistenceStorage) -> None:
        self._storage = storage

    def extract(self, request: HttpRequest) -> PermissionSet:
        perms = PermissionSet()
        if self.is_intermediate_create_request(request):
            perms.add(AccessMode.WRITE)
            if self._requires_append(request):
                perms.add(AccessMode.APPEND)
            if self._requires_control(request):
                perms.add(AccessMode.CONTROL)
        return perms

    def is_create_request(self, request: HttpRequest) -> bool:
        """Whether the request is a PUT or POST."""
        return request.method in _CREATE_METHODS

    def is_intermediate_create_request(self, request: HttpRequest) -> bool:
        """Whether the request would create at least one missing intermediate resource."""
        if not self.is_create_request(request):
            return False
        if len(request.path.split("/")) <= 2:
            return False
        return any(
            not self._storage.exists(path) for path in _intermediate_candidates(request.path)
        )

    def intermediate_paths(self, resource_path: str) -> list[str]:
        """The intermediate paths of a resource that do not exist yet, outermost first."""
        return [
            path
            for path in _intermediate_candidates(resource_path)
            if not self._storage.exists(path)
        ]

    @staticmethod
    def _requires_append(request: HttpRequest) -> bool:
        return request.method == "POST" or _has_patch_content_type(request)

    @staticmethod
    def _requires_control(request: HttpRequest) -> bool:
        return "type" in request.header("Link") or _has_patch_content_type(request)