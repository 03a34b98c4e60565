"""JSON Schemas for record and weight profile files."""

from typing import Any

from crimelink.models.records import EvidenceKind, GeographicArea, TimeOfDaySlot

__all__ = ["RECORD_SCHEMA", "PROFILE_SCHEMA"]

_CATALOG_ID: dict[str, Any] = {"type": ["integer", "null"], "minimum": 0}
_OPTIONAL_TEXT: dict[str, Any] = {"type": ["string", "null"]}

RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "CrimeSceneRecord",
    "type": "object",
    "required": ["geographic_area", "time_of_day"],
    "properties": {
        "id": _CATALOG_ID,
        "crime_type_id": _CATALOG_ID,
        "modus_operandi_id": _CATALOG_ID,
        "geographic_area": {"enum": [area.value for area in GeographicArea]},
        "time_of_day": {"enum": [slot.value for slot in TimeOfDaySlot]},
        "evidence": {
            "type": ["array", "null"],
            "items": {"enum": [kind.value for kind in EvidenceKind]},
        },
        "used_violence": {"type": "boolean"},
        "was_planned": {"type": "boolean"},
        "multiple_perpetrators": {"type": "boolean"},
        "unknown_perpetrator": {"type": "boolean"},
        "location": _OPTIONAL_TEXT,
        "occurred_at": _OPTIONAL_TEXT,
        "description": _OPTIONAL_TEXT,
    },
    "additionalProperties": False,
}

_WEIGHT: dict[str, Any] = {"type": "number", "minimum": 0, "maximum": 100}

PROFILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "WeightProfile",
    "type": "object",
    "required": ["name", "weights"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "weights": {
            "type": "object",
            "required": [
                "crime_type",
                "modus_operandi",
                "geographic_area",
                "time_of_day",
                "evidence",
                "characteristics",
            ],
            "properties": {
                "crime_type": _WEIGHT,
                "modus_operandi": _WEIGHT,
                "geographic_area": _WEIGHT,
                "time_of_day": _WEIGHT,
                "evidence": _WEIGHT,
                "characteristics": _WEIGHT,
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}
