"""Pairwise scene scoring.

This module implements the weighted multi-criteria comparator, its
classifier, the criterion comparators and the weight profiles.
"""

from crimelink.scoring.comparators import (
    CRITERIA,
    CriterionConfig,
    evidence_similarity,
    jaccard_similarity,
)
from crimelink.scoring.engine import (
    PROBABLE_CONNECTION_THRESHOLD,
    SERIES_CANDIDATE_THRESHOLD,
    classify,
    compare_scenes,
)
from crimelink.scoring.models import Classification, ComparisonResult
from crimelink.scoring.profiles import (
    GEOGRAPHY_PROFILE,
    PROFILES,
    STANDARD_PROFILE,
    WeightProfile,
    build_profile_registry,
    get_profile,
    list_profiles,
    load_profile,
)

__all__ = [
    # Models
    "Classification",
    "ComparisonResult",
    # Comparators
    "CriterionConfig",
    "CRITERIA",
    "jaccard_similarity",
    "evidence_similarity",
    # Profiles
    "WeightProfile",
    "STANDARD_PROFILE",
    "GEOGRAPHY_PROFILE",
    "PROFILES",
    "build_profile_registry",
    "get_profile",
    "list_profiles",
    "load_profile",
    # Engine
    "SERIES_CANDIDATE_THRESHOLD",
    "PROBABLE_CONNECTION_THRESHOLD",
    "classify",
    "compare_scenes",
]
