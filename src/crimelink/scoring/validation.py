"""Strict input validation wrappers.

The engine accepts any non-null scene. Case workflows that only compare
fully catalogued scenes can wrap the operations with these validators,
which reject scenes lacking a crime type or a location before scoring.
"""

from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any, TypeVar

from crimelink.models import CrimeSceneRecord, InvalidArgumentError
from crimelink.scoring.models import ComparisonResult

__all__ = ["validate_scene", "strict_compare", "strict_search", "compose"]

F = TypeVar("F", bound=Callable[..., Any])

CompareFn = Callable[..., ComparisonResult]
SearchFn = Callable[..., list[ComparisonResult]]


def validate_scene(scene: CrimeSceneRecord | None, role: str) -> None:
    """Check that a scene is complete enough for strict comparison.

    Parameters
    ----------
    scene : CrimeSceneRecord | None
        Scene to validate.
    role : str
        Argument name used in error messages (e.g., 'base').

    Raises
    ------
    InvalidArgumentError
        If the scene is None, has no crime type or has a blank location.
    """
    if scene is None:
        raise InvalidArgumentError(f"{role} scene is required")
    if scene.crime_type_id <= 0:
        raise InvalidArgumentError(f"{role} scene must have a valid crime type")
    if not scene.location or not scene.location.strip():
        raise InvalidArgumentError(f"{role} scene location is required")


def strict_compare(compare: CompareFn) -> CompareFn:
    """Wrap a comparator so both scenes are validated first."""

    @wraps(compare)
    def wrapper(
        base: CrimeSceneRecord, other: CrimeSceneRecord, *args: Any, **kwargs: Any
    ) -> ComparisonResult:
        validate_scene(base, "base")
        validate_scene(other, "compared")
        return compare(base, other, *args, **kwargs)

    return wrapper


def strict_search(search: SearchFn) -> SearchFn:
    """Wrap a search so the base is validated and candidates are non-empty."""

    @wraps(search)
    def wrapper(
        base: CrimeSceneRecord,
        candidates: Sequence[CrimeSceneRecord],
        *args: Any,
        **kwargs: Any,
    ) -> list[ComparisonResult]:
        validate_scene(base, "base")
        if not candidates:
            raise InvalidArgumentError("candidate scenes must not be empty")
        return search(base, candidates, *args, **kwargs)

    return wrapper


def compose(fn: F, *wrappers: Callable[[F], F]) -> F:
    """Apply wrappers around ``fn``, innermost first.

    ``compose(f, a, b)`` is ``b(a(f))``.
    """
    for wrapper in wrappers:
        fn = wrapper(fn)
    return fn
