"""Similarity scoring and series detection for crime-scene reports.

This package provides:
- Data models (crimelink.models): scene records and enumerations
- Scoring (crimelink.scoring): weighted multi-criteria comparison
- Search (crimelink.search): ranked similarity search
- Clustering (crimelink.clustering): greedy series detection
- Audit (crimelink.audit): JSONL event logging and logging wrappers
- Engine (crimelink.engine): batch analysis runs
- CLI (crimelink.cli): command-line interface
- Public API (crimelink.api): record loading and report writing
"""

__version__ = "0.1.0"
__license__ = "MIT"

from crimelink.api import RecordLoadError, find_record, load_records, write_jsonl
from crimelink.clustering import SeriesGroup, detect_series
from crimelink.models import (
    CrimeSceneRecord,
    EvidenceKind,
    GeographicArea,
    InvalidArgumentError,
    TimeOfDaySlot,
)
from crimelink.scoring import (
    Classification,
    ComparisonResult,
    WeightProfile,
    compare_scenes,
    get_profile,
)
from crimelink.search import find_similar

__all__ = [
    "__version__",
    "__license__",
    "CrimeSceneRecord",
    "EvidenceKind",
    "GeographicArea",
    "TimeOfDaySlot",
    "Classification",
    "ComparisonResult",
    "SeriesGroup",
    "WeightProfile",
    "compare_scenes",
    "find_similar",
    "detect_series",
    "get_profile",
    "load_records",
    "write_jsonl",
    "find_record",
    "InvalidArgumentError",
    "RecordLoadError",
]
