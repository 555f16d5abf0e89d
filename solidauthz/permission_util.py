"""Helpers that compute and compare the permissions a request needs."""

from __future__ import annotations

from .credentials import HttpRequest
from .permissions import AccessMode, PermissionSet

_CHECKED_MODES = (AccessMode.READ, AccessMode.WRITE, AccessMode.APPEND, AccessMode.CONTROL)


def _is_patch_of_type(request: HttpRequest, content_type: str) -> bool:
    return request.method == "PATCH" and content_type in request.header("Content-Type")


def _requires_control(request: HttpRequest) -> bool:
    if "type" in request.header("Link"):
        return True
    return request.method in ("DELETE", "PATCH")


def required_permissions(request: HttpRequest) -> PermissionSet:
    """The permissions a request needs, judged by its method and headers."""
    perms = PermissionSet()
    method = request.method
    if method in ("GET", "HEAD"):
        perms.add(AccessMode.READ)
    elif method in ("PUT", "POST"):
        perms.add(AccessMode.WRITE)
        perms.add(AccessMode.APPEND)
    elif method == "DELETE":
        perms.add(AccessMode.WRITE)
    elif method == "PATCH":
        perms.add(AccessMode.WRITE)
        if _is_patch_of_type(request, "text/n3") or _is_patch_of_type(
            request, "application/sparql-update"
        ):
            perms.add(AccessMode.APPEND)

    if _requires_control(request):
        perms.add(AccessMode.CONTROL)
    return perms


def has_required_permissions(perms: PermissionSet, required: PermissionSet) -> bool:
    """Whether every required Read, Write, Append or Control mode is granted."""
    return all(perms.has(mode) for mode in _CHECKED_MODES if required.has(mode))


def missing_permissions(perms: PermissionSet, required: PermissionSet) -> PermissionSet:
    """The required Read, Write, Append and Control modes that are not granted."""
    return PermissionSet(
        mode for mode in _CHECKED_MODES if required.has(mode) and not perms.has(mode)
    )


def intersect_permissions(a: PermissionSet, b: PermissionSet) -> PermissionSet:
    """The Read, Write, Append and Control modes granted by both sets."""
    return PermissionSet(mode for mode in _CHECKED_MODES if a.has(mode) and b.has(mode))


def union_permissions(a: PermissionSet, b: PermissionSet) -> PermissionSet:
    """The Read, Write, Append and Control modes granted by either set."""
    return PermissionSet(mode for mode in _CHECKED_MODES if a.has(mode) or b.has(mode))