"""Criterion comparators for pairwise scene scoring.

Each comparator maps a pair of scenes to an agreement fraction in
[0, 1] and an optional match reason. The engine scales the fraction by
the criterion weight of the active profile.

All functions are pure and deterministic.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from crimelink.models import CrimeSceneRecord

# Type alias for comparator result: (agreement fraction, reason or None)
CompareResult = tuple[float, str | None]

_CHARACTERISTICS = ("used_violence", "was_planned", "multiple_perpetrators")


@dataclass(frozen=True, slots=True)
class CriterionConfig:
    """Configuration for a scoring criterion.

    Attributes
    ----------
    name : str
        Criterion name, matching a ``WeightProfile`` weight field.
    comparator : Callable[[CrimeSceneRecord, CrimeSceneRecord], CompareResult]
        Function returning the agreement fraction and reason.
    """

    name: str
    comparator: Callable[[CrimeSceneRecord, CrimeSceneRecord], CompareResult]

    def compare(self, base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
        """Run the comparator on a scene pair."""
        return self.comparator(base, other)


def jaccard_similarity(set_a: Iterable[Any] | None, set_b: Iterable[Any] | None) -> float:
    """Calculate Jaccard similarity between two sets.

    Parameters
    ----------
    set_a : Iterable | None
        First collection. Duplicates are ignored; None is the empty set.
    set_b : Iterable | None
        Second collection.

    Returns
    -------
    float
        Jaccard similarity (0.0-1.0).

    Notes
    -----
    Jaccard = |A ∩ B| / |A ∪ B|

    When both sets are empty the result is 1.0: two scenes with no
    recorded evidence agree on evidence.
    """
    a = set(set_a) if set_a is not None else set()
    b = set(set_b) if set_b is not None else set()

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    return len(a & b) / len(a | b)


def evidence_similarity(base: CrimeSceneRecord, other: CrimeSceneRecord) -> float:
    """Jaccard similarity of two scenes' evidence kinds."""
    return jaccard_similarity(base.evidence, other.evidence)


def catalog_ids_match(id_a: int | None, id_b: int | None) -> bool:
    """Whether two catalog ids are both set and equal.

    Parameters
    ----------
    id_a : int | None
        First id. Values <= 0 or None are unset.
    id_b : int | None
        Second id.

    Returns
    -------
    bool
        True only if both ids are > 0 and equal.
    """
    if not id_a or not id_b or id_a <= 0 or id_b <= 0:
        return False
    return id_a == id_b


def compare_crime_type(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare crime type ids (all-or-nothing)."""
    if catalog_ids_match(base.crime_type_id, other.crime_type_id):
        return (1.0, "Crime type match")
    return (0.0, None)


def compare_modus_operandi(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare modus operandi ids (all-or-nothing)."""
    if catalog_ids_match(base.modus_operandi_id, other.modus_operandi_id):
        return (1.0, "Modus operandi match")
    return (0.0, None)


def compare_geographic_area(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare geographic areas (all-or-nothing)."""
    if base.geographic_area == other.geographic_area:
        return (1.0, "Same geographic area")
    return (0.0, None)


def compare_time_of_day(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare time-of-day slots (all-or-nothing)."""
    if base.time_of_day == other.time_of_day:
        return (1.0, "Same time of day")
    return (0.0, None)


def compare_evidence(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare evidence kinds with partial credit.

    Returns
    -------
    tuple[float, str | None]
        Jaccard similarity and a reason citing the percentage. Above 50%
        the evidence is reported as similar, otherwise as partly common.
    """
    sim = evidence_similarity(base, other)
    if sim > 0.5:
        return (sim, f"Similar physical evidence ({sim * 100:.1f}%)")
    if sim > 0:
        return (sim, f"Some common evidence ({sim * 100:.1f}%)")
    return (0.0, None)


def compare_characteristics(base: CrimeSceneRecord, other: CrimeSceneRecord) -> CompareResult:
    """Compare special characteristics with partial credit.

    Counts the flags (violence, planning, multiple perpetrators) holding
    the same value in both scenes, whether True or False.
    """
    agreeing = sum(
        1 for flag in _CHARACTERISTICS if getattr(base, flag) == getattr(other, flag)
    )
    if agreeing == 0:
        return (0.0, None)
    return (agreeing / len(_CHARACTERISTICS), "Special characteristics compatible")


# ---------------------------------------------------------------------------
# Criterion registry - ordered for deterministic evaluation and reasons
# ---------------------------------------------------------------------------


CRITERIA: tuple[CriterionConfig, ...] = (
    CriterionConfig(name="crime_type", comparator=compare_crime_type),
    CriterionConfig(name="modus_operandi", comparator=compare_modus_operandi),
    CriterionConfig(name="geographic_area", comparator=compare_geographic_area),
    CriterionConfig(name="time_of_day", comparator=compare_time_of_day),
    CriterionConfig(name="evidence", comparator=compare_evidence),
    CriterionConfig(name="characteristics", comparator=compare_characteristics),
)
