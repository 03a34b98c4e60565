"""Data models for crime series detection."""

import hashlib
import json
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from crimelink.models import CrimeSceneRecord
from crimelink.scoring.models import ComparisonResult

__all__ = ["SeriesGroup", "compute_series_id", "member_key"]


@dataclass(frozen=True, slots=True)
class SeriesGroup:
    """A probable crime series.

    Attributes
    ----------
    seed : CrimeSceneRecord
        Scene whose search produced the group.
    matches : tuple[ComparisonResult, ...]
        Seed comparisons for the other members, highest score first.
    """

    seed: CrimeSceneRecord
    matches: tuple[ComparisonResult, ...]

    @property
    def members(self) -> tuple[CrimeSceneRecord, ...]:
        """Seed followed by the matched scenes in score order."""
        return (self.seed, *(match.compared for match in self.matches))

    @property
    def member_ids(self) -> tuple[int, ...]:
        """Scene ids of the members, in member order."""
        return tuple(member.scene_id for member in self.members)

    @property
    def series_id(self) -> str:
        """Deterministic identifier of the member set."""
        return compute_series_id([member_key(member) for member in self.members])

    def __len__(self) -> int:
        return 1 + len(self.matches)

    def __iter__(self) -> Iterator[CrimeSceneRecord]:
        return iter(self.members)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "series_id": self.series_id,
            "seed_id": self.seed.scene_id,
            "member_ids": list(self.member_ids),
            "size": len(self),
            "matches": [match.to_dict() for match in self.matches],
        }


def member_key(scene: CrimeSceneRecord) -> str:
    """Key identifying ``scene`` inside a series id.

    Persisted scenes are keyed by their id. Unpersisted scenes all carry
    id 0, so they are keyed by a digest of their field values instead;
    two unpersisted scenes with identical fields share a key.
    """
    if scene.is_persisted:
        return str(scene.scene_id)
    content = json.dumps(scene.to_dict(), sort_keys=True, ensure_ascii=False)
    return "0:" + hashlib.sha256(content.encode("utf-8")).hexdigest()[:16]


def compute_series_id(member_keys: Sequence[int | str]) -> str:
    """Compute deterministic series ID from member keys.

    Parameters
    ----------
    member_keys : Sequence[int | str]
        Scene ids of the series members, or ``member_key`` values when
        some members are unpersisted.

    Returns
    -------
    str
        Series ID in format "s:{sha256_prefix}", independent of order.
    """
    content = "\n".join(sorted(str(key) for key in member_keys))
    hash_digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
    return f"s:{hash_digest[:12]}"
