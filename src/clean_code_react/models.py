"""
Typed views over the pattern and fundamentals content.

Content is authored as snake_case dict literals and validated into these
frozen models once at startup. Every model serializes with camelCase
aliases (``when_to_use`` -> ``whenToUse``) so the JSON handed to clients
keeps the field names MCP clients of this server already expect.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Content(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump as JSON-ready data with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Patterns
# ============================================================================

class PatternOverview(_Content):
    name: str
    description: str
    when_to_use: str


class CodeSample(_Content):
    title: str
    description: str
    code: str


class CodeComparison(_Content):
    bad: CodeSample
    good: CodeSample


class PatternExample(_Content):
    title: str
    description: str
    comparison: CodeComparison


class DetailedPattern(_Content):
    name: str
    description: str
    problem: str
    solution: str
    benefits: tuple[str, ...]
    drawbacks: tuple[str, ...]
    examples: tuple[PatternExample, ...]
    best_practices: tuple[str, ...]
    common_mistakes: tuple[str, ...]
    related_patterns: tuple[str, ...]


class IdentifiedPattern(DetailedPattern):
    """A detailed pattern that carries its own registry id."""

    id: str


class PatternDefinition(_Content):
    overview: PatternOverview
    detailed: DetailedPattern


# ============================================================================
# Code quality fundamentals
# ============================================================================

class QualityExample(_Content):
    title: str
    bad: str
    good: str
    explanation: str


class Concept(_Content):
    name: str
    description: str
    examples: tuple[QualityExample, ...]
    best_practices: tuple[str, ...]


class Principle(_Content):
    name: str
    description: str
    when_to_prioritize: str
    concepts: tuple[Concept, ...]


class Principles(_Content):
    readability: Principle
    predictability: Principle
    cohesion: Principle
    coupling: Principle


class QualityFundamentals(_Content):
    overview: str
    core_philosophy: str
    principles: Principles
    balancing_principles: str
