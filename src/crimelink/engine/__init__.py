"""Batch analysis engine.

This package provides the entry point for running series detection and
similarity search over a scene file, including configuration and result
types.
"""

from crimelink.engine.config import AnalysisConfig, AnalysisResult
from crimelink.engine.runner import resolve_profile, run_analysis

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "resolve_profile",
    "run_analysis",
]
