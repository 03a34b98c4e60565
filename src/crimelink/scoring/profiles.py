"""Weight profiles for the scoring engine.

A profile assigns a weight to each of the six comparison criteria; the
weights always sum to 100. Profiles are plain configuration records held
in a read-only registry that is built once and passed explicitly to
whatever needs it.
"""

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema

from crimelink.models import PROFILE_SCHEMA, InvalidArgumentError

__all__ = [
    "WeightProfile",
    "STANDARD_PROFILE",
    "GEOGRAPHY_PROFILE",
    "PROFILES",
    "DEFAULT_PROFILE_NAME",
    "build_profile_registry",
    "get_profile",
    "list_profiles",
    "load_profile",
]

TOTAL_WEIGHT = 100.0

_WEIGHT_FIELDS = (
    "crime_type",
    "modus_operandi",
    "geographic_area",
    "time_of_day",
    "evidence",
    "characteristics",
)


@dataclass(frozen=True, slots=True)
class WeightProfile:
    """Named table of criterion weights.

    Attributes
    ----------
    name : str
        Registry key (e.g., 'standard').
    crime_type : float
        Weight of the crime type match.
    modus_operandi : float
        Weight of the modus operandi match.
    geographic_area : float
        Weight of the geographic area match.
    time_of_day : float
        Weight of the time-of-day match.
    evidence : float
        Maximum weight of the evidence similarity.
    characteristics : float
        Maximum weight of the special characteristics agreement.
    description : str
        Human-readable summary.
    """

    name: str
    crime_type: float
    modus_operandi: float
    geographic_area: float
    time_of_day: float
    evidence: float
    characteristics: float
    description: str = ""

    def __post_init__(self) -> None:
        """Validate weights."""
        if not self.name:
            raise ValueError("Profile name must not be empty")

        for name in _WEIGHT_FIELDS:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Weight '{name}' of profile '{self.name}' is negative: {value}")

        total = sum(self.weights().values())
        if not math.isclose(total, TOTAL_WEIGHT, abs_tol=1e-9):
            raise ValueError(
                f"Weights of profile '{self.name}' must sum to {TOTAL_WEIGHT:g}, got {total:g}"
            )

    def weight_for(self, criterion: str) -> float:
        """Get the weight of a criterion.

        Raises
        ------
        KeyError
            If the criterion is unknown.
        """
        if criterion not in _WEIGHT_FIELDS:
            raise KeyError(criterion)
        return float(getattr(self, criterion))

    def weights(self) -> dict[str, float]:
        """Criterion weights in evaluation order."""
        return {name: float(getattr(self, name)) for name in _WEIGHT_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary in the profile file layout."""
        return {"name": self.name, "description": self.description, "weights": self.weights()}


STANDARD_PROFILE = WeightProfile(
    name="standard",
    crime_type=25.0,
    modus_operandi=25.0,
    geographic_area=20.0,
    time_of_day=10.0,
    evidence=15.0,
    characteristics=5.0,
    description="Standard multi-criteria comparison",
)

GEOGRAPHY_PROFILE = WeightProfile(
    name="geography-emphasis",
    crime_type=20.0,
    modus_operandi=10.0,
    geographic_area=40.0,
    time_of_day=25.0,
    evidence=5.0,
    characteristics=0.0,
    description="Geographic and temporal emphasis",
)

DEFAULT_PROFILE_NAME = STANDARD_PROFILE.name


def build_profile_registry(*profiles: WeightProfile) -> Mapping[str, WeightProfile]:
    """Build a read-only name -> profile registry.

    Parameters
    ----------
    *profiles : WeightProfile
        Profiles in display order.

    Returns
    -------
    Mapping[str, WeightProfile]
        Immutable mapping preserving registration order.

    Raises
    ------
    ValueError
        If two profiles share a name.
    """
    registry: dict[str, WeightProfile] = {}
    for profile in profiles:
        if profile.name in registry:
            raise ValueError(f"Duplicate profile name: {profile.name}")
        registry[profile.name] = profile
    return MappingProxyType(registry)


PROFILES: Mapping[str, WeightProfile] = build_profile_registry(STANDARD_PROFILE, GEOGRAPHY_PROFILE)


def get_profile(name: str, registry: Mapping[str, WeightProfile] = PROFILES) -> WeightProfile:
    """Look up a profile by name.

    Parameters
    ----------
    name : str
        Profile name.
    registry : Mapping[str, WeightProfile], optional
        Registry to search, by default the built-in profiles.

    Returns
    -------
    WeightProfile
        Matching profile.

    Raises
    ------
    InvalidArgumentError
        If no profile has that name.
    """
    try:
        return registry[name]
    except KeyError:
        available = ", ".join(registry)
        raise InvalidArgumentError(
            f"Unknown weight profile '{name}'. Available: {available}"
        ) from None


def list_profiles(registry: Mapping[str, WeightProfile] = PROFILES) -> list[WeightProfile]:
    """Return registered profiles in registration order."""
    return list(registry.values())


def load_profile(profile_path: Path | str) -> WeightProfile:
    """Load a weight profile from a JSON file.

    Parameters
    ----------
    profile_path : Path | str
        Path to profile JSON with ``name``, optional ``description`` and a
        ``weights`` object holding the six criterion weights.

    Returns
    -------
    WeightProfile
        Loaded profile.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file does not match the profile schema or the weights do
        not sum to 100.
    """
    path = Path(profile_path)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        config = json.load(f)

    try:
        jsonschema.validate(instance=config, schema=PROFILE_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"Invalid weight profile {path.name}: {e.message}") from e

    return WeightProfile(
        name=config["name"],
        description=config.get("description", ""),
        **config["weights"],
    )
