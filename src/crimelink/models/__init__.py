"""Shared data types for crimelink.

This package contains the record type, its enumerations, the error type
raised by the engine and the JSON Schemas for input files.

Domain-specific types live closer to their consumers:
- Comparison types -> crimelink.scoring.models
- Series types -> crimelink.clustering.models
- Audit types -> crimelink.audit.models
"""

from crimelink.models.errors import InvalidArgumentError
from crimelink.models.records import (
    CrimeSceneRecord,
    EvidenceKind,
    GeographicArea,
    TimeOfDaySlot,
    normalize_evidence,
)
from crimelink.models.schema import PROFILE_SCHEMA, RECORD_SCHEMA

__all__ = [
    # Records
    "CrimeSceneRecord",
    "GeographicArea",
    "TimeOfDaySlot",
    "EvidenceKind",
    "normalize_evidence",
    # Errors
    "InvalidArgumentError",
    # Schemas
    "RECORD_SCHEMA",
    "PROFILE_SCHEMA",
]
