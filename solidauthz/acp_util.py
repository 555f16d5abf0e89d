"""Path helpers for Access Control Policy files and resources."""

from __future__ import annotations

import posixpath

_ACP_FILE = ".acp"
_ACP_RESOURCE = "acp"


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


def is_acp_path(path: str) -> bool:
    """Whether the path names an ``.acp`` file."""
    return _basename(path) == _ACP_FILE


def acp_resource_path(path: str) -> str:
    """The ``acp`` resource in the directory of the path."""
    return _join(_dirname(path), _ACP_RESOURCE)


def acp_path(resource: str) -> str:
    """The ``.acp`` file in the directory of the resource."""
    return _join(_dirname(resource), _ACP_FILE)


def is_acp_resource(path: str) -> bool:
    """Whether the path ends in an ``/acp`` segment."""
    return path.endswith("/" + _ACP_RESOURCE)


def acp_resource_name(path: str) -> str:
    """The last element of an ACP resource path."""
    return _basename(path)


def acp_resource_parent(path: str) -> str:
    """The parent of the directory holding an ACP resource."""
    return _dirname(_dirname(path))


def acp_resource_path_from_parent(parent: str) -> str:
    """The ``acp`` resource inside the given parent."""
    return _join(parent, _ACP_RESOURCE)


def acp_path_from_parent(parent: str) -> str:
    """The ``.acp`` file inside the given parent."""
    return _join(parent, _ACP_FILE)