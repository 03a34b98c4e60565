"""Audit logging wrappers around the engine operations.

Each wrapper takes an operation and an ``AuditLogger`` and returns a
function with the same signature that logs a started/finished event pair.
Exceptions are logged as ``operation_failed`` events and re-raised unchanged.
"""

from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any

from crimelink.audit.logger import AuditLogger
from crimelink.clustering.models import SeriesGroup
from crimelink.models import CrimeSceneRecord
from crimelink.scoring.models import ComparisonResult

__all__ = ["logged_compare", "logged_search", "logged_detect"]

CompareFn = Callable[..., ComparisonResult]
SearchFn = Callable[..., list[ComparisonResult]]
DetectFn = Callable[..., list[SeriesGroup]]


def _scene_id(scene: CrimeSceneRecord | None) -> int | None:
    return scene.scene_id if scene is not None else None


def logged_compare(compare: CompareFn, logger: AuditLogger) -> CompareFn:
    """Log every comparison made through ``compare``."""

    @wraps(compare)
    def wrapper(
        base: CrimeSceneRecord, other: CrimeSceneRecord, *args: Any, **kwargs: Any
    ) -> ComparisonResult:
        base_id = _scene_id(base)
        logger.comparison_started(base_id, _scene_id(other))
        try:
            result = compare(base, other, *args, **kwargs)
        except Exception as e:
            logger.operation_failed("compare", e, scene_id=base_id)
            raise

        logger.comparison_finished(
            result.base.scene_id,
            result.compared.scene_id,
            result.score,
            result.classification,
        )
        return result

    return wrapper


def logged_search(search: SearchFn, logger: AuditLogger) -> SearchFn:
    """Log every similarity search made through ``search``."""

    @wraps(search)
    def wrapper(
        base: CrimeSceneRecord,
        candidates: Sequence[CrimeSceneRecord],
        *args: Any,
        **kwargs: Any,
    ) -> list[ComparisonResult]:
        base_id = _scene_id(base)
        threshold = args[0] if args else kwargs.get("threshold")
        logger.search_started(
            base_id,
            len(candidates) if candidates is not None else None,
            threshold=threshold,
        )
        try:
            results = search(base, candidates, *args, **kwargs)
        except Exception as e:
            logger.operation_failed("search", e, scene_id=base_id)
            raise

        logger.search_finished(base_id, len(results))
        return results

    return wrapper


def logged_detect(detect: DetectFn, logger: AuditLogger) -> DetectFn:
    """Log every series detection run made through ``detect``."""

    @wraps(detect)
    def wrapper(
        records: Sequence[CrimeSceneRecord], *args: Any, **kwargs: Any
    ) -> list[SeriesGroup]:
        logger.series_detection_started(len(records) if records is not None else None)
        try:
            series = detect(records, *args, **kwargs)
        except Exception as e:
            logger.operation_failed("detect_series", e)
            raise

        logger.series_detected(
            len(series),
            sum(len(group) for group in series),
            series_ids=[group.series_id for group in series],
        )
        return series

    return wrapper
