"""Ranked similarity search of one scene against a collection."""

import math
from collections.abc import Callable, Sequence

from crimelink.models import CrimeSceneRecord, InvalidArgumentError
from crimelink.scoring.engine import compare_scenes
from crimelink.scoring.models import ComparisonResult
from crimelink.scoring.profiles import STANDARD_PROFILE, WeightProfile

__all__ = ["DEFAULT_THRESHOLD", "find_similar", "is_same_scene", "validate_threshold"]

DEFAULT_THRESHOLD = 60.0

CompareFn = Callable[[CrimeSceneRecord, CrimeSceneRecord, WeightProfile], ComparisonResult]


def validate_threshold(threshold: float) -> None:
    """Check that a similarity threshold lies in [0, 100].

    Raises
    ------
    InvalidArgumentError
        If the threshold is not a real number in range (NaN included).
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int | float):
        raise InvalidArgumentError(f"threshold must be a number, got {threshold!r}")
    if math.isnan(threshold) or not 0.0 <= threshold <= 100.0:
        raise InvalidArgumentError(f"threshold must be in [0, 100], got {threshold}")


def is_same_scene(base: CrimeSceneRecord, candidate: CrimeSceneRecord) -> bool:
    """Whether a candidate is the base scene itself.

    Persisted scenes match by id; an unpersisted base only matches the
    very same object.
    """
    if base.is_persisted:
        return candidate.scene_id == base.scene_id
    return candidate is base


def find_similar(
    base: CrimeSceneRecord,
    candidates: Sequence[CrimeSceneRecord],
    threshold: float = DEFAULT_THRESHOLD,
    profile: WeightProfile = STANDARD_PROFILE,
    compare: CompareFn = compare_scenes,
) -> list[ComparisonResult]:
    """Find scenes similar to a base scene.

    Parameters
    ----------
    base : CrimeSceneRecord
        Scene to search from.
    candidates : Sequence[CrimeSceneRecord]
        Scenes to compare against. May contain the base itself.
    threshold : float, optional
        Minimum score to keep (0-100), by default 60.
    profile : WeightProfile, optional
        Criterion weights, by default the standard profile.
    compare : CompareFn, optional
        Comparator, by default ``compare_scenes``. Allows wrapped
        comparators (logging, validation) to be plugged in.

    Returns
    -------
    list[ComparisonResult]
        Results with score >= threshold, highest score first. Equal
        scores keep candidate input order.

    Raises
    ------
    InvalidArgumentError
        If base or candidates is None, or threshold is out of range.
    """
    if base is None:
        raise InvalidArgumentError("base scene is required")
    if candidates is None:
        raise InvalidArgumentError("candidate scenes are required")
    validate_threshold(threshold)

    results: list[ComparisonResult] = []
    for candidate in candidates:
        if candidate is not None and is_same_scene(base, candidate):
            continue

        comparison = compare(base, candidate, profile)
        if comparison.score >= threshold:
            results.append(comparison)

    # sorted() is stable: ties keep input order
    return sorted(results, key=lambda r: r.score, reverse=True)
