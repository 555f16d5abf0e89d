"""A permission reader that derives create and delete permissions from parent containers."""

from __future__ import annotations

import posixpath

from .permissions import AccessMode, PermissionSet
from .readers import PermissionMap, PermissionReader, PermissionReaderInput


def _parent(resource: str) -> str:
    """The directory part of a path, cleaned the way a file path is cleaned."""
    directory = resource[: resource.rfind("/") + 1]
    if not directory:
        return "."
    cleaned = posixpath.normpath(directory)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


class ParentContainerReader:
    """Determines create and delete permissions from the permissions on the parent container.

    Create requires Append on the parent container. Delete requires Write on both
    the parent container and the resource itself.
    """

    def __init__(self, reader: PermissionReader) -> None:
        self.reader = reader

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        containers = self._find_parents(request.requested_modes)

        combined: dict[str, PermissionSet] = {
            resource: PermissionSet(modes)
            for resource, modes in request.requested_modes.items()
        }
        for container, modes in containers.values():
            combined.setdefault(container, PermissionSet()).update(modes)

        result = dict(
            self.reader.read(
                PermissionReaderInput(
                    credentials=request.credentials, requested_modes=combined
                )
            )
            or {}
        )

        for resource, (container, _) in containers.items():
            result[resource] = self._interpret(
                result.get(resource) or PermissionSet(),
                result.get(container) or PermissionSet(),
            )
        return result

    @classmethod
    def _find_parents(
        cls, requested_modes: dict[str, PermissionSet]
    ) -> dict[str, tuple[str, PermissionSet]]:
        """The resources that need parent permissions, with their container and its modes."""
        return {
            resource: (_parent(resource), cls._parent_modes(modes))
            for resource, modes in requested_modes.items()
            if modes.has(AccessMode.CREATE) or modes.has(AccessMode.DELETE)
        }

    @staticmethod
    def _parent_modes(modes: PermissionSet) -> PermissionSet:
        container_modes = PermissionSet()
        if modes.has(AccessMode.CREATE):
            container_modes.add(AccessMode.APPEND)
        if modes.has(AccessMode.DELETE):
            container_modes.add(AccessMode.WRITE)
        return container_modes

    @staticmethod
    def _interpret(resource: PermissionSet, container: PermissionSet) -> PermissionSet:
        merged = PermissionSet(resource)
        # Creating a member of a container requires Append on the container.
        if container.has(AccessMode.APPEND) and not resource.has(AccessMode.CREATE):
            merged.add(AccessMode.CREATE)
        # Deleting requires Write on both the resource and its container.
        if (
            resource.has(AccessMode.WRITE)
            and container.has(AccessMode.WRITE)
            and not resource.has(AccessMode.DELETE)
        ):
            merged.add(AccessMode.DELETE)
        return merged