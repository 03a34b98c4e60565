"""Tests for criterion comparators."""

from collections.abc import Callable

import pytest

from crimelink.models import CrimeSceneRecord, EvidenceKind, GeographicArea, TimeOfDaySlot
from crimelink.scoring.comparators import (
    CRITERIA,
    catalog_ids_match,
    compare_characteristics,
    compare_crime_type,
    compare_evidence,
    compare_geographic_area,
    compare_modus_operandi,
    compare_time_of_day,
    evidence_similarity,
    jaccard_similarity,
)

# ========== Jaccard ==========


@pytest.mark.unit
@pytest.mark.parametrize(
    ("set_a", "set_b", "expected"),
    [
        ({"a", "b"}, {"a", "b"}, 1.0),
        ({"a", "b"}, {"c", "d"}, 0.0),
        ({"a", "b"}, {"b", "c"}, 1 / 3),
        ({"a", "b", "c"}, {"a", "b", "c", "d"}, 0.75),
        (set(), set(), 1.0),
        ({"a"}, set(), 0.0),
        (set(), {"a"}, 0.0),
    ],
    ids=[
        "identical",
        "disjoint",
        "one_shared",
        "subset",
        "both_empty",
        "left_empty",
        "right_empty",
    ],
)
def test_jaccard_similarity(set_a: set, set_b: set, expected: float) -> None:
    """Test Jaccard similarity on representative set pairs."""
    assert jaccard_similarity(set_a, set_b) == pytest.approx(expected)


@pytest.mark.unit
def test_jaccard_none_is_empty() -> None:
    """Test None is treated as the empty set on either side."""
    assert jaccard_similarity(None, None) == 1.0
    assert jaccard_similarity(None, {"a"}) == 0.0
    assert jaccard_similarity({"a"}, None) == 0.0


@pytest.mark.unit
def test_jaccard_ignores_duplicates() -> None:
    """Test repeated elements do not inflate similarity."""
    assert jaccard_similarity(["a", "a", "a", "b"], ["a", "c"]) == pytest.approx(1 / 3)


@pytest.mark.unit
def test_jaccard_is_symmetric() -> None:
    """Test J(A, B) == J(B, A)."""
    a = {"x", "y", "z"}
    b = {"y", "w"}
    assert jaccard_similarity(a, b) == jaccard_similarity(b, a)


# ========== Catalog ids ==========


@pytest.mark.unit
@pytest.mark.parametrize(
    ("id_a", "id_b", "expected"),
    [
        (3, 3, True),
        (3, 4, False),
        (0, 0, False),
        (-1, -1, False),
        (None, 3, False),
        (None, None, False),
    ],
)
def test_catalog_ids_match(id_a: int | None, id_b: int | None, expected: bool) -> None:
    """Test ids only match when both are set and equal."""
    assert catalog_ids_match(id_a, id_b) is expected


# ========== Criterion comparators ==========


@pytest.mark.unit
def test_categorical_comparators_match(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test all-or-nothing comparators on identical scenes."""
    a = make_scene(1)
    b = make_scene(2)

    assert compare_crime_type(a, b) == (1.0, "Crime type match")
    assert compare_modus_operandi(a, b) == (1.0, "Modus operandi match")
    assert compare_geographic_area(a, b) == (1.0, "Same geographic area")
    assert compare_time_of_day(a, b) == (1.0, "Same time of day")


@pytest.mark.unit
def test_categorical_comparators_mismatch(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test all-or-nothing comparators on differing scenes."""
    a = make_scene(1)
    b = make_scene(
        2,
        crime_type_id=2,
        modus_operandi_id=2,
        geographic_area=GeographicArea.NORTH,
        time_of_day=TimeOfDaySlot.DAWN,
    )

    assert compare_crime_type(a, b) == (0.0, None)
    assert compare_modus_operandi(a, b) == (0.0, None)
    assert compare_geographic_area(a, b) == (0.0, None)
    assert compare_time_of_day(a, b) == (0.0, None)


@pytest.mark.unit
def test_unset_crime_type_never_matches(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test two scenes without crime type do not count as a match."""
    a = make_scene(1, crime_type_id=0, modus_operandi_id=0)
    b = make_scene(2, crime_type_id=0, modus_operandi_id=0)

    assert compare_crime_type(a, b) == (0.0, None)
    assert compare_modus_operandi(a, b) == (0.0, None)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("evidence_a", "evidence_b", "expected_fraction", "expected_reason"),
    [
        (["BLOOD", "HAIR"], ["BLOOD", "HAIR"], 1.0, "Similar physical evidence (100.0%)"),
        (
            ["BLOOD", "HAIR", "FIBERS"],
            ["BLOOD", "HAIR", "FIBERS", "FIREARM"],
            0.75,
            "Similar physical evidence (75.0%)",
        ),
        (["BLOOD", "HAIR"], ["BLOOD"], 0.5, "Some common evidence (50.0%)"),
        (["BLOOD", "HAIR"], ["HAIR", "FIBERS"], 1 / 3, "Some common evidence (33.3%)"),
        (["BLOOD"], ["HAIR"], 0.0, None),
        ([], [], 1.0, "Similar physical evidence (100.0%)"),
    ],
    ids=["identical", "high", "exactly_half", "low", "disjoint", "both_empty"],
)
def test_compare_evidence(
    make_scene: Callable[..., CrimeSceneRecord],
    evidence_a: list[str],
    evidence_b: list[str],
    expected_fraction: float,
    expected_reason: str | None,
) -> None:
    """Test evidence comparator fraction and reason wording."""
    fraction, reason = compare_evidence(
        make_scene(1, evidence=evidence_a), make_scene(2, evidence=evidence_b)
    )

    assert fraction == pytest.approx(expected_fraction)
    assert reason == expected_reason


@pytest.mark.unit
def test_evidence_similarity_deduplicates(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test duplicated evidence tags are collapsed before Jaccard."""
    a = make_scene(1, evidence=[EvidenceKind.BLOOD, EvidenceKind.BLOOD, EvidenceKind.HAIR])
    b = make_scene(2, evidence=[EvidenceKind.BLOOD])

    assert evidence_similarity(a, b) == pytest.approx(0.5)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("flags_b", "expected"),
    [
        ({}, 1.0),
        ({"used_violence": True}, 2 / 3),
        ({"used_violence": True, "was_planned": False}, 1 / 3),
        ({"used_violence": True, "was_planned": False, "multiple_perpetrators": True}, 0.0),
    ],
    ids=["all_agree", "two_agree", "one_agrees", "none_agree"],
)
def test_compare_characteristics(
    make_scene: Callable[..., CrimeSceneRecord], flags_b: dict, expected: float
) -> None:
    """Test characteristics credit counts agreeing flags."""
    fraction, reason = compare_characteristics(make_scene(1), make_scene(2, **flags_b))

    assert fraction == pytest.approx(expected)
    if expected > 0:
        assert reason == "Special characteristics compatible"
    else:
        assert reason is None


@pytest.mark.unit
def test_unknown_perpetrator_not_compared(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test the unknown-perpetrator flag does not affect characteristics."""
    fraction, _ = compare_characteristics(
        make_scene(1, unknown_perpetrator=True), make_scene(2, unknown_perpetrator=False)
    )

    assert fraction == 1.0


@pytest.mark.unit
def test_criteria_order() -> None:
    """Test criteria are evaluated in a fixed order."""
    assert [c.name for c in CRITERIA] == [
        "crime_type",
        "modus_operandi",
        "geographic_area",
        "time_of_day",
        "evidence",
        "characteristics",
    ]
