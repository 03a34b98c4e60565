"""Data models for pairwise scene comparison."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from crimelink.models import CrimeSceneRecord

__all__ = ["Classification", "ComparisonResult"]


class Classification(StrEnum):
    """Connection category derived from a similarity score.

    Attributes
    ----------
    SERIES_CANDIDATE : str
        Score >= 75. Likely same perpetrator or group.
    PROBABLE_CONNECTION : str
        60 <= score < 75. Worth investigating further.
    LOW_SIMILARITY : str
        Score < 60. Probably unrelated.
    """

    SERIES_CANDIDATE = "SERIES_CANDIDATE"
    PROBABLE_CONNECTION = "PROBABLE_CONNECTION"
    LOW_SIMILARITY = "LOW_SIMILARITY"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of comparing two crime scenes.

    Attributes
    ----------
    base : CrimeSceneRecord
        Scene the comparison was made from.
    compared : CrimeSceneRecord
        Scene compared against the base.
    score : float
        Similarity in [0, 100], rounded to 2 decimals.
    reasons : tuple[str, ...]
        Human-readable matched criteria, in evaluation order.
    classification : Classification
        Category derived from ``score``.
    profile : str
        Name of the weight profile used.
    """

    base: CrimeSceneRecord
    compared: CrimeSceneRecord
    score: float
    reasons: tuple[str, ...]
    classification: Classification
    profile: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Records are referenced by id only.
        """
        return {
            "base_id": self.base.scene_id,
            "compared_id": self.compared.scene_id,
            "score": self.score,
            "classification": self.classification.value,
            "reasons": list(self.reasons),
            "profile": self.profile,
        }
