"""Greedy detection of crime series."""

from collections.abc import Callable, Hashable, Sequence

from crimelink.clustering.models import SeriesGroup
from crimelink.models import CrimeSceneRecord, InvalidArgumentError
from crimelink.scoring.models import ComparisonResult
from crimelink.scoring.profiles import STANDARD_PROFILE, WeightProfile
from crimelink.search.similarity import find_similar

__all__ = ["SERIES_THRESHOLD", "MIN_SERIES_SIZE", "detect_series"]

SERIES_THRESHOLD = 75.0
MIN_SERIES_SIZE = 3

SearchFn = Callable[
    [CrimeSceneRecord, Sequence[CrimeSceneRecord], float, WeightProfile],
    list[ComparisonResult],
]


def _assignment_key(record: CrimeSceneRecord) -> Hashable:
    """Key tracking whether a scene already belongs to a series."""
    if record.is_persisted:
        return ("scene", record.scene_id)
    return ("object", id(record))


def detect_series(
    records: Sequence[CrimeSceneRecord],
    profile: WeightProfile = STANDARD_PROFILE,
    search: SearchFn = find_similar,
) -> list[SeriesGroup]:
    """Group scenes into probable series.

    Single greedy pass in input order. Each scene not yet in a series
    seeds a search at ``SERIES_THRESHOLD`` over the scenes not yet in a
    series; two or more matches form a new series of seed plus matches.

    Parameters
    ----------
    records : Sequence[CrimeSceneRecord]
        All scenes to analyse.
    profile : WeightProfile, optional
        Criterion weights, by default the standard profile.
    search : SearchFn, optional
        Similarity search, by default ``find_similar``.

    Returns
    -------
    list[SeriesGroup]
        Disjoint series of at least ``MIN_SERIES_SIZE`` scenes, in
        detection order.

    Raises
    ------
    InvalidArgumentError
        If records is None.

    Notes
    -----
    Scenes already assigned to a series are removed from the candidate
    pool of every later search, so no scene can appear in two series.
    """
    if records is None:
        raise InvalidArgumentError("scene collection is required")

    if len(records) < MIN_SERIES_SIZE:
        return []

    series: list[SeriesGroup] = []
    assigned: set[Hashable] = set()

    for record in records:
        if _assignment_key(record) in assigned:
            continue

        pool = [r for r in records if _assignment_key(r) not in assigned]
        similar = search(record, pool, SERIES_THRESHOLD, profile)

        if len(similar) < MIN_SERIES_SIZE - 1:
            continue

        group = SeriesGroup(seed=record, matches=tuple(similar))
        for member in group.members:
            assigned.add(_assignment_key(member))
        series.append(group)

    return series
