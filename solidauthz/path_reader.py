"""A permission reader that delegates to other readers chosen by resource path."""

from __future__ import annotations

import re

from .readers import PermissionMap, PermissionReader, PermissionReaderInput
from .permissions import PermissionSet


class PathBasedReader:
    """Sends each resource to the reader whose pattern matches its path below the base URL.

    Patterns are regular expressions searched in the path relative to the base URL,
    keeping its leading slash. Resources outside the base URL or matching no pattern
    are left out of the result, as are the answers of readers that fail.
    """

    def __init__(self, base_url: str, paths: dict[str, PermissionReader]) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        self._base_url = base_url
        self._paths: dict[str, tuple[re.Pattern[str], PermissionReader]] = {}
        for pattern, reader in paths.items():
            self.add_path(pattern, reader)

    @property
    def base_url(self) -> str:
        """The base URL, always ending in a slash."""
        return self._base_url

    @property
    def paths(self) -> dict[str, PermissionReader]:
        """Each pattern with its reader."""
        return {pattern: reader for pattern, (_, reader) in self._paths.items()}

    def __len__(self) -> int:
        return len(self._paths)

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        result: PermissionMap = {}
        for reader, modes in self._match_readers(request.requested_modes):
            reader_input = PermissionReaderInput(
                credentials=request.credentials, requested_modes=modes
            )
            try:
                reader_result = reader.read(reader_input)
            except Exception:
                continue
            result.update(reader_result or {})
        return result

    def _match_readers(
        self, access_map: dict[str, PermissionSet]
    ) -> list[tuple[PermissionReader, dict[str, PermissionSet]]]:
        groups: dict[int, tuple[PermissionReader, dict[str, PermissionSet]]] = {}
        for resource, modes in access_map.items():
            reader = self._find_reader(resource)
            if reader is None:
                continue
            groups.setdefault(id(reader), (reader, {}))[1][resource] = modes
        return list(groups.values())

    def _find_reader(self, path: str) -> PermissionReader | None:
        if not path.startswith(self._base_url):
            return None
        relative = path[len(self._base_url) - 1 :]
        for regex, reader in self._paths.values():
            if regex.search(relative):
                return reader
        return None

    def add_path(self, pattern: str, reader: PermissionReader) -> None:
        """Route paths matching the pattern to the reader."""
        self._paths[pattern] = (re.compile(pattern), reader)

    def remove_path(self, pattern: str) -> None:
        """Forget the pattern; unknown patterns are ignored."""
        self._paths.pop(pattern, None)

    def clear_paths(self) -> None:
        """Forget every pattern."""
        self._paths.clear()

    def has_path(self, pattern: str) -> bool:
        """Whether the pattern is routed."""
        return pattern in self._paths

    def reader_for(self, pattern: str) -> PermissionReader | None:
        """The reader of the pattern, or None if the pattern is unknown."""
        entry = self._paths.get(pattern)
        return entry[1] if entry is not None else None