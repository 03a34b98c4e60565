"""JSONL audit trail for analysis runs.

Every scoring operation that passes through the audit wrappers leaves a
line here: comparisons, similarity searches and series detection runs,
keyed by the base scene where there is one. The batch runner adds run,
stage and artifact events around them.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from crimelink.audit.models import LogEvent
from crimelink.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Append-only event log for one analysis run.

    Attributes
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        JSONL file the events are appended to.
    current_stage : str | None
        Stage attached to events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        self.run_id = run_id
        self.log_path = log_path
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        scene_id: int | None = None,
    ) -> None:
        """Append one event line and flush it to disk."""
        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            stage=stage or self.current_stage,
            scene_id=scene_id,
        )
        json.dump(asdict(record), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    # ------------------------------------------------------------------
    # Scoring operations
    # ------------------------------------------------------------------

    def comparison_started(self, base_id: int | None, compared_id: int | None) -> None:
        self.event(
            "comparison_started",
            data={"base_id": base_id, "compared_id": compared_id},
            scene_id=base_id,
        )

    def comparison_finished(
        self,
        base_id: int,
        compared_id: int,
        score: float,
        classification: str,
    ) -> None:
        """Record the outcome of one scene-to-scene comparison.

        Parameters
        ----------
        base_id : int
            Scene the comparison was made from.
        compared_id : int
            Scene it was compared against.
        score : float
            Weighted similarity in [0, 100].
        classification : str
            Band of ``score``, e.g. ``"SERIES_CANDIDATE"``.
        """
        self.event(
            "comparison_finished",
            data={
                "base_id": base_id,
                "compared_id": compared_id,
                "score": score,
                "classification": str(classification),
            },
            scene_id=base_id,
        )

    def search_started(
        self,
        base_id: int | None,
        candidates: int | None,
        threshold: float | None = None,
    ) -> None:
        data: dict[str, Any] = {"candidates": candidates}
        if threshold is not None:
            data["threshold"] = threshold
        self.event("search_started", data=data, scene_id=base_id)

    def search_finished(self, base_id: int | None, matches: int) -> None:
        """Record how many candidates met the threshold for ``base_id``."""
        self.event("search_finished", data={"matches": matches}, scene_id=base_id)

    def series_detection_started(self, records: int | None) -> None:
        self.event("series_detection_started", data={"records": records})

    def series_detected(
        self,
        series: int,
        records_in_series: int,
        series_ids: list[str] | None = None,
    ) -> None:
        """Record the result of a series detection run.

        ``series_ids`` lists the detected groups in detection order, so a
        later report can be matched against this run.
        """
        data: dict[str, Any] = {"series": series, "records_in_series": records_in_series}
        if series_ids is not None:
            data["series_ids"] = series_ids
        self.event("series_detected", data=data)

    def operation_failed(
        self,
        operation: str,
        exc: BaseException,
        scene_id: int | None = None,
    ) -> None:
        """Record an exception raised by a scoring operation."""
        self.event(
            "operation_failed",
            data={
                "operation": operation,
                "exception_class": type(exc).__name__,
                "message": str(exc),
            },
            level="ERROR",
            scene_id=scene_id,
        )

    # ------------------------------------------------------------------
    # Batch runs
    # ------------------------------------------------------------------

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        self.event("run_started", data={"command": command, "parameters": parameters})

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        records_processed: int | None = None,
    ) -> None:
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if records_processed is not None:
            data["records_processed"] = records_processed
        self.event("run_finished", data=data)

    def stage_started(self, stage: str, expected_records: int | None = None) -> None:
        """Log the start of ``stage`` and attach it to the events that follow."""
        self.set_stage(stage)
        data = {} if expected_records is None else {"expected_records": expected_records}
        self.event("stage_started", data=data, stage=stage)

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters
        self.event("stage_finished", data=data, stage=stage)

    def artifact_written(
        self,
        path: str,
        sha256: str,
        stage: str | None = None,
        record_count: int | None = None,
    ) -> None:
        """Record a report file with its digest.

        Parameters
        ----------
        path : str
            File name relative to the output directory.
        sha256 : str
            ``sha256:``-prefixed digest of the file.
        stage : str | None, optional
            Stage that wrote the file.
        record_count : int | None, optional
            Lines written, for JSONL reports.
        """
        data: dict[str, Any] = {"path": path, "sha256": sha256}
        if record_count is not None:
            data["record_count"] = record_count
        self.event("artifact_written", data=data, stage=stage)

    def analysis_failed(self, message: str, traceback: str | None = None) -> None:
        """Record the error that aborted a batch run."""
        data = {"error": message}
        if traceback is not None:
            data["traceback"] = traceback
        self.event("analysis_failed", data=data, level="ERROR", stage="analysis")
