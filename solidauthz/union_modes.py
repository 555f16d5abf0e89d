"""A modes extractor that combines the modes of several extractors."""

from __future__ import annotations

from typing import Any, Mapping

from .credentials import HttpRequest
from .permissions import AccessMode, ModesExtractor, PermissionSet

_COMBINED_MODES = (AccessMode.READ, AccessMode.WRITE, AccessMode.APPEND, AccessMode.CONTROL)


def _extracted_modes(extracted: Any, target: str) -> set[AccessMode]:
    """The modes in an extractor's answer: a permission set, or an access map for the target."""
    if isinstance(extracted, PermissionSet):
        return set(extracted.granted())
    if isinstance(extracted, Mapping):
        modes = extracted.get(target, ())
        if isinstance(modes, PermissionSet):
            return set(modes.granted())
        return set(modes)
    return set()


class UnionModesExtractor:
    """Combines the Read, Write, Append and Control modes required by several extractors."""

    def __init__(self, *extractors: ModesExtractor) -> None:
        self._extractors: list[ModesExtractor] = list(extractors)

    @property
    def extractors(self) -> tuple[ModesExtractor, ...]:
        """The combined extractors, in the order they are consulted."""
        return tuple(self._extractors)

    def __len__(self) -> int:
        return len(self._extractors)

    def extract(self, request: HttpRequest) -> PermissionSet:
        perms = PermissionSet()
        for extractor in self._extractors:
            modes = _extracted_modes(extractor.extract(request), request.path)
            for mode in _COMBINED_MODES:
                if mode in modes:
                    perms.add(mode)
        return perms

    def add_extractor(self, extractor: ModesExtractor) -> None:
        """Consult the extractor after the others."""
        self._extractors.append(extractor)

    def remove_extractor(self, extractor: ModesExtractor) -> None:
        """Stop consulting the extractor; unknown extractors are ignored."""
        for index, existing in enumerate(self._extractors):
            if existing is extractor:
                del self._extractors[index]
                return

    def clear_extractors(self) -> None:
        """Stop consulting any extractor."""
        self._extractors.clear()

    def has_extractor(self, extractor: ModesExtractor) -> bool:
        """Whether the extractor is consulted."""
        return any(existing is extractor for existing in self._extractors)