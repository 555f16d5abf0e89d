"""Extractors that derive the required access modes from a request."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .credentials import HttpRequest
from .permissions import (
    AccessMap,
    AccessMode,
    IdentifierStrategy,
    ModesExtractor,
    ResourceSet,
)

_READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class MethodModesExtractor:
    """Derives access modes from the HTTP method and whether the target exists."""

    def __init__(self, resource_set: ResourceSet) -> None:
        self._resource_set = resource_set

    def extract(self, request: HttpRequest) -> AccessMap:
        method = request.method
        target = request.path
        required: AccessMap = {}

        # Reading requires Read permissions on the resource.
        if method in _READ_METHODS:
            required[target] = {AccessMode.READ}

        if method == "PUT":
            if self._resource_set.has_resource(target):
                # Replacing a representation requires Write.
                required[target] = {AccessMode.WRITE}
            else:
                # Creating a new resource requires Append and Create.
                required[target] = {AccessMode.APPEND, AccessMode.CREATE}

        # Creating a member of a container requires Append on that container.
        if method == "POST":
            required[target] = {AccessMode.APPEND}

        if method == "DELETE":
            required[target] = {AccessMode.DELETE}

        return required


class CreateModesExtractor:
    """Adds the Create mode when the target resource does not exist yet."""

    def __init__(self, source: ModesExtractor, resource_set: ResourceSet) -> None:
        self._source = source
        self._resource_set = resource_set

    def extract(self, request: HttpRequest) -> AccessMap:
        access_map = self._source.extract(request)
        target = request.path
        if not self._resource_set.has_resource(target):
            access_map.setdefault(target, set()).add(AccessMode.CREATE)
        return access_map

    def is_create_request(self, request: HttpRequest) -> bool:
        """Whether the request creates a resource: a POST with a Slug, or any PUT."""
        if request.method == "POST" and request.header("Slug"):
            return True
        return request.method == "PUT"

    def is_post_request(self, request: HttpRequest) -> bool:
        """Whether the request is a POST."""
        return request.method == "POST"

    def is_put_request(self, request: HttpRequest) -> bool:
        """Whether the request is a PUT."""
        return request.method == "PUT"


class DeleteParentExtractor:
    """Requires Read on the parent container when deleting a resource that does not exist."""

    def __init__(
        self,
        source: ModesExtractor,
        resource_set: ResourceSet,
        identifier_strategy: IdentifierStrategy,
    ) -> None:
        self._source = source
        self._resource_set = resource_set
        self._identifier_strategy = identifier_strategy

    def extract(self, request: HttpRequest) -> AccessMap:
        access_map = self._source.extract(request)
        target = request.path
        if (
            AccessMode.DELETE in access_map.get(target, ())
            and not self._identifier_strategy.is_root_container(target)
            and not self._resource_set.has_resource(target)
        ):
            parent = self._identifier_strategy.get_parent_container(target)
            access_map.setdefault(parent, set()).add(AccessMode.READ)
        return access_map


@dataclass
class N3Patch:
    """The statements of an N3 Patch document, grouped by role."""

    deletes: list[str] = field(default_factory=list)
    inserts: list[str] = field(default_factory=list)
    conditions: list[str] = field(default_factory=list)


_PATCH_BLOCK = re.compile(r"solid:(where|inserts|deletes)\s*\{(.*?)\}", re.DOTALL)
_STATEMENT_END = re.compile(r"\.(?=\s|$)")


def _statements(block: str) -> list[str]:
    return [part.strip() for part in _STATEMENT_END.split(block) if part.strip()]


def _parse_n3_patch(body: bytes) -> N3Patch:
    """Collect the where, inserts and deletes statements of an N3 Patch body."""
    patch = N3Patch()
    text = body.decode("utf-8", errors="replace")
    for role, block in _PATCH_BLOCK.findall(text):
        statements = _statements(block)
        if role == "where":
            patch.conditions.extend(statements)
        elif role == "inserts":
            patch.inserts.extend(statements)
        else:
            patch.deletes.extend(statements)
    return patch


class N3PatchModesExtractor:
    """Derives access modes from the contents of an N3 Patch request body."""

    def __init__(self, resource_set: ResourceSet) -> None:
        self._resource_set = resource_set

    def extract(self, request: HttpRequest) -> AccessMap:
        patch = _parse_n3_patch(request.body)
        target = request.path
        required: AccessMap = {}

        # Conditions are read from the resource.
        if patch.conditions:
            required.setdefault(target, set()).add(AccessMode.READ)

        # Insertions append to the resource, creating it if needed.
        if patch.inserts:
            modes = required.setdefault(target, set())
            modes.add(AccessMode.APPEND)
            if not self._resource_set.has_resource(target):
                modes.add(AccessMode.CREATE)

        # Deletions need to read and write the resource.
        if patch.deletes:
            required.setdefault(target, set()).update({AccessMode.READ, AccessMode.WRITE})

        return required