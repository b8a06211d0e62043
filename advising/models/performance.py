"""
Course performance data models.

Contains the dataclasses produced by the PerformanceAnalyzer: per-outcome
scores, per-subject views, and the transcript-wide analysis.
"""

from dataclasses import dataclass
from enum import Enum


class AssessmentType(Enum):
    """How a learning outcome was assessed. Informational only."""
    QUIZ = "quiz"
    ASSIGNMENT = "assignment"
    EXAM = "exam"
    PROJECT = "project"


class PerformanceBand(Enum):
    """
    Presentation band for a performance percentage.
    
    EXCELLENT: >= 85
    GOOD:      >= 70
    FAIR:      >= 60
    POOR:      below 60
    """
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class CLOScore:
    """
    Score for one course learning outcome (CLO).
    
    A CLO is "weak" when its score is below 60.
    """
    clo_number: int                    # 1..5
    description: str
    score: float                       # 0 - 100
    assessment_type: AssessmentType


@dataclass(frozen=True)
class SubjectPerformance:
    """
    Derived view of one enrolled course. Recomputed on every analysis.
    
    `needs_attention` is set when the overall performance is below 70% OR more
    than two CLOs are weak. Note the subject threshold (70) differs from the
    CLO threshold (60).
    """
    code: str
    name: str
    overall_performance: float         # grade points / 4.0 * 100
    grade: str
    grade_points: float
    credits: int
    semester: str
    clo_scores: list
    weak_clos: list
    trend: str
    needs_attention: bool


@dataclass(frozen=True)
class CriticalOutcome:
    """A weak CLO together with the subject it belongs to."""
    subject: str
    clo: CLOScore

    def __lt__(self, other):
        """For sorting: lowest score first."""
        return self.clo.score < other.clo.score


@dataclass(frozen=True)
class PerformanceAnalysis:
    overall_gpa: float
    weak_subjects: list                # Needs attention, weakest first
    strong_subjects: list              # >= 85%, strongest first
    critical_clos: list                # Up to 10 CriticalOutcome, lowest first
    recommendations: list              # Advisory strings, in priority order
