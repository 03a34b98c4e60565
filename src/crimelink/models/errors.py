"""Error types shared by the scoring, search and clustering layers."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when an engine operation receives an unusable argument.

    Covers missing records or collections, thresholds outside [0, 100]
    and unknown weight profile names. Well-formed inputs never fail.
    """
