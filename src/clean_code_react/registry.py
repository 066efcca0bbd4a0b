"""
Pattern registry - the single source of truth for pattern documents.

A registry is built once, validated, and only read afterwards. Build your
own with ``PatternRegistry.from_mapping`` (handy in tests) or get the
bundled one from ``build_registry()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import ValidationError

from .errors import NotFoundError, RegistryIntegrityError
from .models import IdentifiedPattern, PatternDefinition, PatternOverview
from .patterns import PATTERN_DATA
from .result import Err, Ok, Result

logger = logging.getLogger("clean_code_react.registry")


class PatternRegistry:
    """Read-only mapping of pattern id -> PatternDefinition."""

    def __init__(self, definitions: Mapping[str, PatternDefinition]):
        self._definitions: Mapping[str, PatternDefinition] = MappingProxyType(dict(definitions))
        self._check_integrity()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping]) -> PatternRegistry:
        """Validate raw dict content into a registry."""
        definitions = {}
        for pattern_id, data in raw.items():
            try:
                definitions[pattern_id] = PatternDefinition.model_validate(data)
            except ValidationError as e:
                raise RegistryIntegrityError(f"Pattern '{pattern_id}' is malformed: {e}") from e
        return cls(definitions)

    def _check_integrity(self) -> None:
        if not self._definitions:
            raise RegistryIntegrityError("Registry must contain at least one pattern")

        broken = []
        for pattern_id, definition in self._definitions.items():
            for related in definition.detailed.related_patterns:
                if related == pattern_id:
                    broken.append(f"{pattern_id} -> itself")
                elif related not in self._definitions:
                    broken.append(f"{pattern_id} -> {related}")
        if broken:
            raise RegistryIntegrityError(f"Invalid related pattern references: {', '.join(broken)}")

    # ===== Accessors =====

    def list_overviews(self) -> list[tuple[str, PatternOverview]]:
        """All overviews in registry order."""
        return [(pattern_id, d.overview) for pattern_id, d in self._definitions.items()]

    def get_overview(self, pattern_id: str) -> Result[PatternOverview, NotFoundError]:
        definition = self._definitions.get(pattern_id)
        if definition is None:
            return Err(NotFoundError(pattern_id))
        return Ok(definition.overview)

    def get_detailed(self, pattern_id: str) -> Result[IdentifiedPattern, NotFoundError]:
        """Full document for one pattern, with its id merged in."""
        definition = self._definitions.get(pattern_id)
        if definition is None:
            return Err(NotFoundError(pattern_id))
        return Ok(IdentifiedPattern(**dict(definition.detailed), id=pattern_id))

    def list_ids(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


def build_registry() -> PatternRegistry:
    """Registry over the patterns bundled with the package."""
    registry = PatternRegistry.from_mapping(PATTERN_DATA)
    logger.debug("Loaded %d patterns", len(registry))
    return registry
