"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from crimelink.models import (  # noqa: E402
    CrimeSceneRecord,
    EvidenceKind,
    GeographicArea,
    TimeOfDaySlot,
)


@pytest.fixture
def make_scene() -> Callable[..., CrimeSceneRecord]:
    """Factory for scene records with minimal boilerplate.

    Defaults describe a planned night-time burglary in the center with
    broken glass and fingerprints.
    """

    def _factory(
        scene_id: int = 1,
        *,
        crime_type_id: int = 1,
        modus_operandi_id: int = 1,
        geographic_area: GeographicArea | str = GeographicArea.CENTER,
        time_of_day: TimeOfDaySlot | str = TimeOfDaySlot.NIGHT,
        evidence: Iterable[EvidenceKind | str] | None = (
            EvidenceKind.BROKEN_GLASS,
            EvidenceKind.FINGERPRINTS,
        ),
        used_violence: bool = False,
        was_planned: bool = True,
        multiple_perpetrators: bool = False,
        unknown_perpetrator: bool = True,
        location: str | None = "Main St 100",
        occurred_at: str | None = None,
        description: str | None = None,
    ) -> CrimeSceneRecord:
        return CrimeSceneRecord(
            scene_id=scene_id,
            crime_type_id=crime_type_id,
            modus_operandi_id=modus_operandi_id,
            geographic_area=geographic_area,
            time_of_day=time_of_day,
            evidence=evidence,
            used_violence=used_violence,
            was_planned=was_planned,
            multiple_perpetrators=multiple_perpetrators,
            unknown_perpetrator=unknown_perpetrator,
            location=location,
            occurred_at=occurred_at,
            description=description,
        )

    return _factory


@pytest.fixture
def make_unrelated_scene(
    make_scene: Callable[..., CrimeSceneRecord],
) -> Callable[..., CrimeSceneRecord]:
    """Factory for scenes sharing nothing with ``make_scene`` defaults."""

    def _factory(scene_id: int, crime_type_id: int = 90) -> CrimeSceneRecord:
        return make_scene(
            scene_id,
            crime_type_id=crime_type_id,
            modus_operandi_id=crime_type_id + 1,
            geographic_area=GeographicArea.SOUTH,
            time_of_day=TimeOfDaySlot.MORNING,
            evidence=[EvidenceKind.BLOOD],
            used_violence=True,
            was_planned=False,
            multiple_perpetrators=True,
        )

    return _factory


@pytest.fixture
def write_scenes(tmp_path: Path) -> Callable[..., Path]:
    """Write scenes (records or raw dicts) to a JSONL file in tmp_path."""

    def _write(scenes: Iterable[CrimeSceneRecord | dict], name: str = "scenes.jsonl") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            for scene in scenes:
                data = scene.to_dict() if isinstance(scene, CrimeSceneRecord) else scene
                f.write(json.dumps(data) + "\n")
        return path

    return _write
