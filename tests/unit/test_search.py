"""Tests for ranked similarity search."""

import math
from collections.abc import Callable

import pytest

from crimelink.models import CrimeSceneRecord, InvalidArgumentError
from crimelink.scoring import GEOGRAPHY_PROFILE, ComparisonResult, compare_scenes
from crimelink.search import find_similar, is_same_scene, validate_threshold


@pytest.mark.unit
def test_excludes_base_by_id(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test the base scene is never returned as its own match."""
    base = make_scene(1)
    candidates = [base, make_scene(1), make_scene(2)]

    results = find_similar(base, candidates)

    assert [r.compared.scene_id for r in results] == [2]


@pytest.mark.unit
def test_threshold_filters_inclusively(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test only results with score >= threshold are kept."""
    base = make_scene(1)
    exact = make_scene(2)  # 100
    seventy_five = make_scene(3, crime_type_id=9)  # 75
    fifty = make_scene(4, crime_type_id=9, modus_operandi_id=9)  # 50

    results = find_similar(base, [exact, seventy_five, fifty], threshold=75)

    assert [r.score for r in results] == [100.0, 75.0]
    assert all(r.score >= 75 for r in results)


@pytest.mark.unit
def test_sorted_descending(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test results are ordered by score, highest first."""
    base = make_scene(1)
    candidates = [
        make_scene(2, crime_type_id=9, modus_operandi_id=9),
        make_scene(3),
        make_scene(4, crime_type_id=9),
    ]

    results = find_similar(base, candidates, threshold=0)

    assert [r.compared.scene_id for r in results] == [3, 4, 2]


@pytest.mark.unit
def test_ties_keep_input_order(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test equal scores are returned in candidate order."""
    base = make_scene(1)
    candidates = [make_scene(i, crime_type_id=9) for i in (7, 3, 5)]

    results = find_similar(base, candidates)

    assert [r.compared.scene_id for r in results] == [7, 3, 5]


@pytest.mark.unit
def test_empty_candidates(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test an empty collection yields no results."""
    assert find_similar(make_scene(1), []) == []


@pytest.mark.unit
def test_uses_profile(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test the given profile drives scoring."""
    base = make_scene(1)
    other = make_scene(2, crime_type_id=5, modus_operandi_id=5, evidence=["BLOOD"])

    assert find_similar(base, [other]) == []
    results = find_similar(base, [other], profile=GEOGRAPHY_PROFILE)
    assert [r.score for r in results] == [65.0]
    assert results[0].profile == "geography-emphasis"


@pytest.mark.unit
def test_custom_comparator(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test a plugged-in comparator is called with base, candidate and profile."""
    calls: list[tuple[int, int, str]] = []

    def tracking_compare(base, other, profile) -> ComparisonResult:
        calls.append((base.scene_id, other.scene_id, profile.name))
        return compare_scenes(base, other, profile)

    base = make_scene(1)
    find_similar(base, [base, make_scene(2), make_scene(3)], compare=tracking_compare)

    assert calls == [(1, 2, "standard"), (1, 3, "standard")]


# ---------------------------------------------------------------------------
# Unpersisted base
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_unpersisted_base_excludes_only_itself(
    make_scene: Callable[..., CrimeSceneRecord],
) -> None:
    """Test an unpersisted base skips itself but not other unpersisted scenes."""
    base = make_scene(0)
    twin = make_scene(0)

    results = find_similar(base, [base, twin, make_scene(4)])

    assert len(results) == 2
    assert all(r.compared is not base for r in results)
    assert results[0].compared is twin


@pytest.mark.unit
def test_is_same_scene(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test identity rules for persisted and unpersisted bases."""
    persisted = make_scene(3)
    unpersisted = make_scene(0)

    assert is_same_scene(persisted, make_scene(3))
    assert not is_same_scene(persisted, make_scene(4))
    assert is_same_scene(unpersisted, unpersisted)
    assert not is_same_scene(unpersisted, make_scene(0))


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "threshold",
    [-0.01, 100.01, math.nan, math.inf, "60", None, True],
    ids=["negative", "above_100", "nan", "inf", "string", "none", "bool"],
)
def test_invalid_threshold(make_scene: Callable[..., CrimeSceneRecord], threshold: object) -> None:
    """Test out-of-range or non-numeric thresholds are rejected."""
    with pytest.raises(InvalidArgumentError):
        find_similar(make_scene(1), [make_scene(2)], threshold=threshold)  # type: ignore[arg-type]


@pytest.mark.unit
@pytest.mark.parametrize("threshold", [0, 0.0, 60, 100.0])
def test_valid_threshold(threshold: float) -> None:
    """Test thresholds in [0, 100] are accepted."""
    validate_threshold(threshold)


@pytest.mark.unit
def test_none_base(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test a missing base is rejected."""
    with pytest.raises(InvalidArgumentError):
        find_similar(None, [make_scene(2)])  # type: ignore[arg-type]


@pytest.mark.unit
def test_none_candidates(make_scene: Callable[..., CrimeSceneRecord]) -> None:
    """Test a missing candidate collection is rejected."""
    with pytest.raises(InvalidArgumentError):
        find_similar(make_scene(1), None)  # type: ignore[arg-type]
