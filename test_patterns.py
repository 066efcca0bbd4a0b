"""
Test Suite for the pattern registry and its content

Covers:
- Registry completeness and ordering
- Overview / detailed document structure
- Cross-pattern references
- Content quality checks
- Registry construction failures
"""

import copy

import pytest

from clean_code_react import (
    NotFoundError,
    PatternRegistry,
    RegistryIntegrityError,
    build_registry,
    get_quality_fundamentals,
)
from clean_code_react.patterns import PATTERN_DATA

EXPECTED_PATTERNS = [
    "container-presentational",
    "render-props",
    "compound-component",
    "higher-order-component",
    "dependency-injection",
    "service-layer",
    "adapter-pattern",
    "declarative-programming",
    "prop-drilling-solutions",
    "builder-pattern",
    "factory-pattern",
    "strategy-pattern",
]


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def test_registry_has_all_expected_patterns(registry):
    assert list(registry.list_ids()) == EXPECTED_PATTERNS
    assert len(registry) == len(EXPECTED_PATTERNS)
    for pattern_id in EXPECTED_PATTERNS:
        assert pattern_id in registry


def test_every_id_resolves(registry):
    for pattern_id in registry.list_ids():
        detailed = registry.get_detailed(pattern_id)
        assert detailed.is_ok(), pattern_id
        assert detailed.unwrap().id == pattern_id
        assert registry.get_overview(pattern_id).is_ok()


def test_overviews_are_complete(registry):
    overviews = registry.list_overviews()
    assert len(overviews) == len(registry.list_ids())
    assert [pattern_id for pattern_id, _ in overviews] == list(registry.list_ids())

    for pattern_id, overview in overviews:
        assert overview.name, f"Pattern {pattern_id} missing name"
        assert overview.description, f"Pattern {pattern_id} missing description"
        assert overview.when_to_use, f"Pattern {pattern_id} missing whenToUse"


def test_detailed_patterns_have_required_content(registry):
    for pattern_id in registry.list_ids():
        pattern = registry.get_detailed(pattern_id).unwrap()
        assert pattern.benefits, f"Pattern {pattern_id} has no benefits"
        assert pattern.examples, f"Pattern {pattern_id} has no examples"
        assert pattern.best_practices, f"Pattern {pattern_id} has no best practices"
        assert pattern.common_mistakes, f"Pattern {pattern_id} has no common mistakes"


def test_examples_use_bad_good_comparison(registry):
    for pattern_id in registry.list_ids():
        for index, example in enumerate(registry.get_detailed(pattern_id).unwrap().examples):
            where = f"{pattern_id} example {index}"
            assert example.title, where
            assert example.description, where
            assert len(example.comparison.bad.code) > 100, f"{where} bad code too short"
            assert len(example.comparison.good.code) > 100, f"{where} good code too short"
            assert example.comparison.bad.title and example.comparison.good.title, where


def test_related_patterns_exist_and_are_not_self_references(registry):
    ids = set(registry.list_ids())
    for pattern_id in registry.list_ids():
        related = registry.get_detailed(pattern_id).unwrap().related_patterns
        assert pattern_id not in related, f"Pattern {pattern_id} references itself"
        for other in related:
            assert other in ids, f"{pattern_id} -> {other}"


def test_content_lengths_are_meaningful(registry):
    for pattern_id in registry.list_ids():
        pattern = registry.get_detailed(pattern_id).unwrap()
        assert len(pattern.description) > 50, f"Pattern {pattern_id} description too short"
        assert len(pattern.problem) > 30, f"Pattern {pattern_id} problem too short"
        assert len(pattern.solution) > 30, f"Pattern {pattern_id} solution too short"
        for benefit in pattern.benefits:
            assert len(benefit) > 10, f"Pattern {pattern_id} has very short benefit"
        for practice in pattern.best_practices:
            assert len(practice) > 15, f"Pattern {pattern_id} has very short best practice"


def test_unknown_id_is_not_found(registry):
    detailed = registry.get_detailed("no-such-pattern")
    overview = registry.get_overview("no-such-pattern")

    assert detailed.is_err()
    assert overview.is_err()
    assert isinstance(detailed.unwrap_err(), NotFoundError)
    assert "no-such-pattern" in detailed.unwrap_err().message
    assert detailed.unwrap_err() == overview.unwrap_err()


def test_accessors_are_deterministic(registry):
    assert registry.get_detailed("builder-pattern") == registry.get_detailed("builder-pattern")
    assert registry.list_overviews() == registry.list_overviews()
    assert registry.get_detailed("builder-pattern").unwrap().to_wire() == \
        registry.get_detailed("builder-pattern").unwrap().to_wire()


def test_wire_format_uses_camel_case(registry):
    wire = registry.get_detailed("strategy-pattern").unwrap().to_wire()
    assert wire["id"] == "strategy-pattern"
    assert wire["name"] == "Strategy Pattern"
    for key in ("bestPractices", "commonMistakes", "relatedPatterns"):
        assert key in wire
    assert isinstance(wire["examples"], list)
    assert set(wire["examples"][0]["comparison"]) == {"bad", "good"}


def test_independent_registries():
    small = PatternRegistry.from_mapping({"builder-pattern": _standalone("builder-pattern")})

    assert small.list_ids() == ("builder-pattern",)
    assert small.get_detailed("factory-pattern").is_err()


def test_registry_rejects_dangling_reference():
    data = _standalone("builder-pattern")
    data["detailed"]["related_patterns"] = ["does-not-exist"]

    with pytest.raises(RegistryIntegrityError, match="does-not-exist"):
        PatternRegistry.from_mapping({"builder-pattern": data})


def test_registry_rejects_self_reference():
    data = _standalone("builder-pattern")
    data["detailed"]["related_patterns"] = ["builder-pattern"]

    with pytest.raises(RegistryIntegrityError, match="itself"):
        PatternRegistry.from_mapping({"builder-pattern": data})


def test_registry_rejects_empty_and_malformed_content():
    with pytest.raises(RegistryIntegrityError):
        PatternRegistry.from_mapping({})

    data = _standalone("builder-pattern")
    del data["detailed"]["problem"]
    with pytest.raises(RegistryIntegrityError, match="malformed"):
        PatternRegistry.from_mapping({"builder-pattern": data})


def test_quality_fundamentals_principles():
    fundamentals = get_quality_fundamentals()
    wire = fundamentals.to_wire()

    assert fundamentals is get_quality_fundamentals()
    assert set(wire["principles"]) == {"readability", "predictability", "cohesion", "coupling"}
    for key, principle in wire["principles"].items():
        assert principle["concepts"], f"{key} has no concepts"
        assert principle["whenToPrioritize"]
        for concept in principle["concepts"]:
            assert concept["examples"] and concept["bestPractices"]
    assert wire["corePhilosophy"] and wire["balancingPrinciples"]


def _standalone(pattern_id):
    data = copy.deepcopy(PATTERN_DATA[pattern_id])
    data["detailed"]["related_patterns"] = []
    return data
