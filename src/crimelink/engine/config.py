"""Analysis configuration and result dataclasses."""

import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class AnalysisConfig:
    """Configuration for a batch analysis run.

    Attributes
    ----------
    profile : str
        Registered weight profile name (default: 'standard').
    profile_path : Path | None
        JSON weight profile file. Overrides ``profile`` when set.
    threshold : float
        Minimum score for the similarity search (default: 60).
    base_id : int | None
        Scene to run a similarity search for. If None, only series
        detection runs.
    strict : bool
        Reject scenes without crime type or location.
    output_dir : Path
        Directory for report artifacts and the audit log.
    """

    profile: str = "standard"
    profile_path: Path | None = None
    threshold: float = 60.0
    base_id: int | None = None
    strict: bool = False
    output_dir: Path = Path("out")

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        if math.isnan(self.threshold) or not 0.0 <= self.threshold <= 100.0:
            raise ValueError(f"threshold must be in [0, 100], got {self.threshold}")

        if self.base_id is not None and self.base_id <= 0:
            raise ValueError(f"base_id must be a positive scene id, got {self.base_id}")

        self.output_dir = Path(self.output_dir)
        if self.profile_path is not None:
            self.profile_path = Path(self.profile_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output_dir"] = str(self.output_dir)
        data["profile_path"] = str(self.profile_path) if self.profile_path is not None else None
        return data


@dataclass
class AnalysisResult:
    """Results from an analysis run.

    Attributes
    ----------
    success : bool
        Whether the run completed.
    total_records : int
        Scenes loaded.
    total_series : int
        Series detected.
    records_in_series : int
        Scenes belonging to some series.
    total_similar : int
        Matches found for ``base_id`` (0 when no search ran).
    output_files : dict[str, str]
        Map of artifact name to file path.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    total_records: int = 0
    total_series: int = 0
    records_in_series: int = 0
    total_similar: int = 0
    output_files: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
