"""Crime-scene record model.

Records are produced by an external collaborator (a case database, a
JSONL export) and are read-only to the engine. Catalog ids are opaque:
the engine only compares them and treats values <= 0 as unset.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = [
    "GeographicArea",
    "TimeOfDaySlot",
    "EvidenceKind",
    "CrimeSceneRecord",
    "normalize_evidence",
]


class GeographicArea(StrEnum):
    """Fixed set of city areas a scene can belong to."""

    CENTER = "CENTER"
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"


class TimeOfDaySlot(StrEnum):
    """Time-of-day slot of the crime.

    Attributes
    ----------
    DAWN : str
        00:00-06:00.
    MORNING : str
        06:00-12:00.
    AFTERNOON : str
        12:00-18:00.
    NIGHT : str
        18:00-24:00.
    """

    DAWN = "DAWN"
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    NIGHT = "NIGHT"


class EvidenceKind(StrEnum):
    """Kind of physical trace found at a scene."""

    BROKEN_GLASS = "BROKEN_GLASS"
    FINGERPRINTS = "FINGERPRINTS"
    BLOOD = "BLOOD"
    HAIR = "HAIR"
    FIBERS = "FIBERS"
    FIREARM = "FIREARM"


def normalize_evidence(evidence: Iterable[EvidenceKind | str] | None) -> frozenset[EvidenceKind]:
    """Deduplicate evidence tags into a frozenset.

    Parameters
    ----------
    evidence : Iterable[EvidenceKind | str] | None
        Evidence tags, possibly repeated. None is the empty set.

    Returns
    -------
    frozenset[EvidenceKind]
        Distinct evidence kinds.

    Raises
    ------
    ValueError
        If a tag is not a known evidence kind.
    """
    if evidence is None:
        return frozenset()
    return frozenset(EvidenceKind(tag) for tag in evidence)


@dataclass(frozen=True, slots=True)
class CrimeSceneRecord:
    """A fully populated crime-scene report.

    Attributes
    ----------
    scene_id : int
        Record identity. 0 means the scene is not persisted yet.
    crime_type_id : int
        Crime type catalog id (> 0 when set).
    modus_operandi_id : int
        Modus operandi catalog id (> 0 when set).
    geographic_area : GeographicArea
        Area of the city where the crime happened.
    time_of_day : TimeOfDaySlot
        Time-of-day slot of the crime.
    evidence : frozenset[EvidenceKind]
        Distinct evidence kinds found at the scene.
    used_violence : bool
        Violence was used.
    was_planned : bool
        The act shows signs of planning.
    multiple_perpetrators : bool
        More than one perpetrator took part.
    unknown_perpetrator : bool
        Perpetrator identity is unknown. Not used for scoring.
    location : str | None
        Free-text location of the scene.
    occurred_at : str | None
        ISO 8601 date or datetime of the crime.
    description : str | None
        Free-text description.
    """

    scene_id: int
    crime_type_id: int
    modus_operandi_id: int
    geographic_area: GeographicArea
    time_of_day: TimeOfDaySlot
    evidence: frozenset[EvidenceKind] = field(default_factory=frozenset)
    used_violence: bool = False
    was_planned: bool = False
    multiple_perpetrators: bool = False
    unknown_perpetrator: bool = False
    location: str | None = None
    occurred_at: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        """Coerce enum fields and deduplicate evidence."""
        object.__setattr__(self, "geographic_area", GeographicArea(self.geographic_area))
        object.__setattr__(self, "time_of_day", TimeOfDaySlot(self.time_of_day))
        object.__setattr__(self, "evidence", normalize_evidence(self.evidence))

    @property
    def is_persisted(self) -> bool:
        """Whether the record carries a real identity."""
        return self.scene_id > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Evidence is emitted sorted so output is deterministic.
        """
        return {
            "id": self.scene_id,
            "crime_type_id": self.crime_type_id,
            "modus_operandi_id": self.modus_operandi_id,
            "geographic_area": self.geographic_area.value,
            "time_of_day": self.time_of_day.value,
            "evidence": sorted(tag.value for tag in self.evidence),
            "used_violence": self.used_violence,
            "was_planned": self.was_planned,
            "multiple_perpetrators": self.multiple_perpetrators,
            "unknown_perpetrator": self.unknown_perpetrator,
            "location": self.location,
            "occurred_at": self.occurred_at,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrimeSceneRecord":
        """Create record from dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Record data as produced by ``to_dict``. Missing optional keys
            take their defaults; a missing or null id means unpersisted.

        Returns
        -------
        CrimeSceneRecord
            Reconstructed record.
        """
        return cls(
            scene_id=data.get("id") or 0,
            crime_type_id=data.get("crime_type_id") or 0,
            modus_operandi_id=data.get("modus_operandi_id") or 0,
            geographic_area=GeographicArea(data["geographic_area"]),
            time_of_day=TimeOfDaySlot(data["time_of_day"]),
            evidence=normalize_evidence(data.get("evidence")),
            used_violence=data.get("used_violence", False),
            was_planned=data.get("was_planned", False),
            multiple_perpetrators=data.get("multiple_perpetrators", False),
            unknown_perpetrator=data.get("unknown_perpetrator", False),
            location=data.get("location"),
            occurred_at=data.get("occurred_at"),
            description=data.get("description"),
        )
