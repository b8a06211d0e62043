"""
Data models for the advising system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the engines, the orchestrator, and the UI.
"""

from .student import (
    Course,
    Semester,
    SemesterStatus,
    FailedCourse,
    RetakeStatus,
    StudentProfile,
)
from .prediction import (
    TrendDirection,
    GPATrend,
    SemesterPoint,
    GPAPrediction,
    MilestoneStatus,
    MilestoneIcon,
    Milestone,
    GraduationPrediction,
)
from .performance import (
    AssessmentType,
    PerformanceBand,
    CLOScore,
    SubjectPerformance,
    CriticalOutcome,
    PerformanceAnalysis,
)
from .study_guide import StudyGuide

__all__ = [
    # Student record
    "Course",
    "Semester",
    "SemesterStatus",
    "FailedCourse",
    "RetakeStatus",
    "StudentProfile",
    # Predictions
    "TrendDirection",
    "GPATrend",
    "SemesterPoint",
    "GPAPrediction",
    "MilestoneStatus",
    "MilestoneIcon",
    "Milestone",
    "GraduationPrediction",
    # Performance
    "AssessmentType",
    "PerformanceBand",
    "CLOScore",
    "SubjectPerformance",
    "CriticalOutcome",
    "PerformanceAnalysis",
    # Study guide
    "StudyGuide",
]
