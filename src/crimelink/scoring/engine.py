"""Multi-criteria comparison of two crime scenes.

The engine:
1. Short-circuits when both scenes share the same persisted identity
2. Evaluates every criterion in ``CRITERIA`` order
3. Scales each agreement fraction by the profile weight
4. Clamps and rounds the total to a 0-100 score
5. Classifies the score into a connection category
"""

from crimelink.models import CrimeSceneRecord, InvalidArgumentError
from crimelink.scoring.comparators import CRITERIA
from crimelink.scoring.models import Classification, ComparisonResult
from crimelink.scoring.profiles import STANDARD_PROFILE, WeightProfile

__all__ = [
    "SERIES_CANDIDATE_THRESHOLD",
    "PROBABLE_CONNECTION_THRESHOLD",
    "SAME_SCENE_REASON",
    "classify",
    "compare_scenes",
]

SERIES_CANDIDATE_THRESHOLD = 75.0
PROBABLE_CONNECTION_THRESHOLD = 60.0

SAME_SCENE_REASON = "Same crime scene"

_MAX_SCORE = 100.0
_ROUND_DECIMALS = 2


def classify(score: float) -> Classification:
    """Map a similarity score to a connection category.

    Parameters
    ----------
    score : float
        Similarity score (0-100).

    Returns
    -------
    Classification
        SERIES_CANDIDATE for score >= 75, PROBABLE_CONNECTION for
        60 <= score < 75, LOW_SIMILARITY otherwise.
    """
    if score >= SERIES_CANDIDATE_THRESHOLD:
        return Classification.SERIES_CANDIDATE
    if score >= PROBABLE_CONNECTION_THRESHOLD:
        return Classification.PROBABLE_CONNECTION
    return Classification.LOW_SIMILARITY


def compare_scenes(
    base: CrimeSceneRecord,
    other: CrimeSceneRecord,
    profile: WeightProfile = STANDARD_PROFILE,
) -> ComparisonResult:
    """Compare two scenes and score their similarity.

    Parameters
    ----------
    base : CrimeSceneRecord
        Scene the comparison is made from.
    other : CrimeSceneRecord
        Scene compared against the base.
    profile : WeightProfile, optional
        Criterion weights, by default the standard profile.

    Returns
    -------
    ComparisonResult
        Score, match reasons and classification.

    Raises
    ------
    InvalidArgumentError
        If either scene is None.

    Notes
    -----
    Criteria with a zero weight in the profile are skipped and never
    produce a reason.
    """
    if base is None:
        raise InvalidArgumentError("base scene is required")
    if other is None:
        raise InvalidArgumentError("compared scene is required")

    if base.is_persisted and other.is_persisted and base.scene_id == other.scene_id:
        return ComparisonResult(
            base=base,
            compared=other,
            score=_MAX_SCORE,
            reasons=(SAME_SCENE_REASON,),
            classification=Classification.SERIES_CANDIDATE,
            profile=profile.name,
        )

    total = 0.0
    reasons: list[str] = []

    for criterion in CRITERIA:
        weight = profile.weight_for(criterion.name)
        if weight <= 0:
            continue

        fraction, reason = criterion.compare(base, other)
        contribution = weight * fraction
        total += contribution
        if contribution > 0 and reason:
            reasons.append(reason)

    score = round(min(max(total, 0.0), _MAX_SCORE), _ROUND_DECIMALS)

    return ComparisonResult(
        base=base,
        compared=other,
        score=score,
        reasons=tuple(reasons),
        classification=classify(score),
        profile=profile.name,
    )
