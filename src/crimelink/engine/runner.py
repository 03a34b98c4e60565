"""Batch analysis runner.

This module chains loading, series detection and the optional base
scene search into a single auditable run.

Flow:
    Stage 1: Load scenes from JSONL
    Stage 2: Series detection
    Stage 3: Similarity search for ``base_id`` (optional)
    Stage 4: Summary report
"""

import json
import sys
import time
import traceback
from functools import partial
from pathlib import Path
from typing import Any

from crimelink.api import find_record, load_records, write_jsonl
from crimelink.audit.helpers import generate_run_id
from crimelink.audit.logger import AuditLogger
from crimelink.audit.middleware import logged_compare, logged_detect, logged_search
from crimelink.clustering.models import SeriesGroup
from crimelink.clustering.series_detector import detect_series
from crimelink.engine.config import AnalysisConfig, AnalysisResult
from crimelink.models import CrimeSceneRecord
from crimelink.scoring.engine import compare_scenes
from crimelink.scoring.models import ComparisonResult
from crimelink.scoring.profiles import WeightProfile, get_profile, load_profile
from crimelink.scoring.validation import strict_compare, strict_search
from crimelink.search.similarity import find_similar
from crimelink.utils import calculate_file_sha256

SERIES_FILE = "series.jsonl"
SIMILAR_FILE = "similar.jsonl"
SUMMARY_FILE = "summary.json"
EVENTS_FILE = "events.jsonl"


def resolve_profile(config: AnalysisConfig) -> WeightProfile:
    """Return the profile selected by ``config``.

    A profile file takes precedence over the registered profile name.
    """
    if config.profile_path is not None:
        return load_profile(config.profile_path)
    return get_profile(config.profile)


def _write_artifact(
    items: list[Any],
    output_dir: Path,
    filename: str,
    stage: str,
    logger: AuditLogger,
) -> Path:
    path = output_dir / filename
    count = write_jsonl(items, path)
    logger.artifact_written(
        filename,
        calculate_file_sha256(path),
        stage=stage,
        record_count=count,
    )
    return path


def _build_search(logger: AuditLogger, strict: bool, log_comparisons: bool) -> Any:
    """Assemble the similarity search with logging and optional strict checks."""
    compare: Any = compare_scenes
    if log_comparisons:
        compare = logged_compare(compare, logger)
    if strict:
        compare = strict_compare(compare)

    search = logged_search(partial(find_similar, compare=compare), logger)
    if strict:
        search = strict_search(search)
    return search


def _stage_detect_series(
    records: list[CrimeSceneRecord],
    profile: WeightProfile,
    strict: bool,
    logger: AuditLogger,
) -> list[SeriesGroup]:
    """Stage 2: detect series, logging each seed search."""
    search = _build_search(logger, strict, log_comparisons=False)
    detect = logged_detect(detect_series, logger)
    return detect(records, profile, search)


def _stage_search_base(
    records: list[CrimeSceneRecord],
    base_id: int,
    threshold: float,
    profile: WeightProfile,
    strict: bool,
    logger: AuditLogger,
) -> list[ComparisonResult]:
    """Stage 3: rank scenes similar to the configured base scene."""
    base = find_record(records, base_id)
    search = _build_search(logger, strict, log_comparisons=True)
    return search(base, records, threshold, profile)


def run_analysis(
    input_path: Path | str,
    config: AnalysisConfig | None = None,
    logger: AuditLogger | None = None,
) -> AnalysisResult:
    """Run series detection (and an optional base search) over a scene file.

    Parameters
    ----------
    input_path : Path | str
        JSONL file of crime-scene records.
    config : AnalysisConfig | None, optional
        Run configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None, one is opened on
        ``output_dir/events.jsonl`` and closed at the end of the run.

    Returns
    -------
    AnalysisResult
        Run outcome. Failures are reported with ``success=False``.

    Examples
    --------
        >>> from crimelink.engine import AnalysisConfig, run_analysis
        >>> result = run_analysis("scenes.jsonl", AnalysisConfig(base_id=12))
        >>> print(result.total_series, result.total_similar)
    """
    input_path = Path(input_path)
    if config is None:
        config = AnalysisConfig()

    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    owns_logger = logger is None
    if logger is None:
        logger = AuditLogger(run_id=generate_run_id(), log_path=output_dir / EVENTS_FILE)

    result = AnalysisResult(success=False)
    start = time.perf_counter()
    logger.run_started(command=list(sys.argv), parameters=config.to_dict())

    try:
        result = _run_stages(input_path, config, output_dir, logger, result)
    except Exception as e:
        result.error_message = f"{type(e).__name__}: {e}"
        logger.analysis_failed(result.error_message, traceback=traceback.format_exc())
    finally:
        logger.set_stage(None)
        logger.run_finished(
            status="success" if result.success else "failed",
            duration_seconds=round(time.perf_counter() - start, 6),
            records_processed=result.total_records,
        )
        if owns_logger:
            logger.close()

    if owns_logger:
        result.output_files["events"] = str(output_dir / EVENTS_FILE)
    return result


def _run_stages(
    input_path: Path,
    config: AnalysisConfig,
    output_dir: Path,
    logger: AuditLogger,
    result: AnalysisResult,
) -> AnalysisResult:
    profile = resolve_profile(config)

    # Stage 1
    stage_start = time.perf_counter()
    logger.stage_started("load")
    records = load_records(input_path)
    result.total_records = len(records)
    logger.stage_finished(
        "load",
        duration_seconds=round(time.perf_counter() - stage_start, 6),
        counters={"records": len(records)},
    )

    # Stage 2
    stage_start = time.perf_counter()
    logger.stage_started("series", expected_records=len(records))
    series = _stage_detect_series(records, profile, config.strict, logger)
    result.total_series = len(series)
    result.records_in_series = sum(len(group) for group in series)
    series_path = _write_artifact(series, output_dir, SERIES_FILE, "series", logger)
    result.output_files["series"] = str(series_path)
    logger.stage_finished(
        "series",
        duration_seconds=round(time.perf_counter() - stage_start, 6),
        counters={"series": result.total_series, "records_in_series": result.records_in_series},
    )

    # Stage 3
    if config.base_id is not None:
        stage_start = time.perf_counter()
        logger.stage_started("search", expected_records=len(records))
        similar = _stage_search_base(
            records, config.base_id, config.threshold, profile, config.strict, logger
        )
        result.total_similar = len(similar)
        similar_path = _write_artifact(similar, output_dir, SIMILAR_FILE, "search", logger)
        result.output_files["similar"] = str(similar_path)
        logger.stage_finished(
            "search",
            duration_seconds=round(time.perf_counter() - stage_start, 6),
            counters={"matches": result.total_similar},
        )

    # Stage 4
    summary_path = output_dir / SUMMARY_FILE
    summary = {
        "profile": profile.to_dict(),
        "config": config.to_dict(),
        "total_records": result.total_records,
        "total_series": result.total_series,
        "records_in_series": result.records_in_series,
        "total_similar": result.total_similar,
        "series": [group.to_dict() for group in series],
    }
    with summary_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, ensure_ascii=False, sort_keys=True)
    result.output_files["summary"] = str(summary_path)
    logger.artifact_written(SUMMARY_FILE, calculate_file_sha256(summary_path), stage="report")

    result.success = True
    return result
