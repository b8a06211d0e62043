"""
GPA and graduation prediction data models.

These are pure output records of the PredictionEngine. They are never
persisted; they are always recomputed from a StudentProfile.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TrendDirection(Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class MilestoneStatus(Enum):
    START = "start"
    COMPLETED = "completed"
    CURRENT = "current"
    FUTURE = "future"
    GRADUATION = "graduation"


class MilestoneIcon(Enum):
    CHECK = "check"
    WARNING = "warning"
    TROPHY = "trophy"
    CLOCK = "clock"
    FLAG = "flag"
    GRADUATION = "graduation"


@dataclass(frozen=True)
class GPATrend:
    """
    Direction of a student's recent semester GPAs.
    
    `change` is the recent average minus the older average, rounded to two
    decimals. Anything within ±0.15 is considered stable.
    """
    trend: TrendDirection
    change: float
    description: str


@dataclass(frozen=True)
class SemesterPoint:
    """One chart-ready data point: a semester's own GPA and the CGPA after it."""
    semester: str
    gpa: float
    cgpa: float


@dataclass(frozen=True)
class GPAPrediction:
    current_cgpa: float
    predicted_final_gpa: float
    range: tuple                       # (low, high), both within 0.0 - 4.0
    trend: GPATrend
    semester_data: list                # List of SemesterPoint in semester order


@dataclass(frozen=True)
class Milestone:
    """
    A single entry on the graduation timeline.
    
    Example for a Dean's List semester:
        id: "sem-3"
        semester_number: 3
        date: "Fall 2023"
        status: COMPLETED
        title: "Semester 3"
        description: "Completed with 15 credits"
        icon: TROPHY
        highlights: ["Dean's List", "Recovered from setback"]
    """
    id: str
    semester_number: int
    date: str
    status: MilestoneStatus
    title: str
    description: str
    icon: MilestoneIcon
    gpa: Optional[float] = None
    credits: Optional[int] = None
    highlights: list = field(default_factory=list)


@dataclass(frozen=True)
class GraduationPrediction:
    expected_date: str                 # "Month YYYY", always May or December
    semesters_remaining: int
    confidence: int                    # Integer in [50, 95]
    risk_factors: list                 # Free-text strings, in evaluation order
    milestones: list                   # List of Milestone, start → graduation
    credits_earned: int
    credits_remaining: int
