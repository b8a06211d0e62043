"""
Prediction and analysis engines.

This package contains the engines that perform the core academic logic
of the advising system. Engines are pure: they do no I/O and keep no state
between calls.
"""

from .gpa import cumulative_gpa, running_cgpa, semester_gpa, total_credits_earned
from .predictor import PredictionEngine, InsufficientHistoryError
from .performance import PerformanceAnalyzer, color_band, border_color

__all__ = [
    "cumulative_gpa",
    "running_cgpa",
    "semester_gpa",
    "total_credits_earned",
    "PredictionEngine",
    "InsufficientHistoryError",
    "PerformanceAnalyzer",
    "color_band",
    "border_color",
]
