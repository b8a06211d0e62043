"""
Student record data models.

Contains the dataclasses and enums that represent a student's academic
record: courses grouped into semesters, failed-course retake tracking,
and the StudentProfile aggregate root.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SemesterStatus(Enum):
    """
    Lifecycle of a semester. Transitions (future → current → completed) are
    driven by the registrar, never by the engines.
    
    COMPLETED: Grades are final; usable as historical data points
    CURRENT: In progress; counts toward cumulative metrics
    FUTURE: Planned only; excluded from every aggregate
    """
    COMPLETED = "completed"
    CURRENT = "current"
    FUTURE = "future"


class RetakeStatus(Enum):
    """Where a failed course stands in the retake process."""
    PENDING_RETAKE = "pending_retake"
    RETAKEN_PASSED = "retaken_passed"
    RETAKEN_FAILED = "retaken_failed"


@dataclass(frozen=True)
class Course:
    """
    A single course enrollment within a semester.
    
    Attributes:
        code: Course code, unique within its semester (e.g., "CS101")
        name: Human-readable course title
        credits: Credit-hour weight (positive integer)
        grade: Letter grade, for display only (e.g., "B+")
        points: Grade-point value on the 0.0 - 4.0 scale; 0.0 means failed
    """
    code: str
    name: str
    credits: int
    grade: str
    points: float

    @property
    def is_failed(self) -> bool:
        return self.points == 0


@dataclass(frozen=True)
class Semester:
    """
    An ordered container of courses.
    
    Semester numbers are strictly increasing and are also used to project
    future semesters. Achievements and warnings are free-text tags used only
    for display (e.g., "Dean's List", "Failed PHY102").
    """
    number: int
    name: str                          # e.g., "Fall 2023"
    status: SemesterStatus
    courses: list
    semester_gpa: float
    credits_attempted: int
    credits_earned: int                # Never exceeds credits_attempted
    achievements: list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    @property
    def counts_toward_gpa(self) -> bool:
        """Current and completed semesters count; future ones never do."""
        return self.status != SemesterStatus.FUTURE


@dataclass(frozen=True)
class FailedCourse:
    """
    A failed course tracked across semesters. Only ever read as a risk signal.
    """
    code: str
    name: str
    credits: int
    status: RetakeStatus
    original_semester: int             # Semester of the first attempt
    attempts: int = 1


@dataclass(frozen=True)
class StudentProfile:
    """
    Aggregate root for one student's academic record.
    
    Semesters must be supplied sorted by number. `current_semester` must equal
    the number of the one semester with status CURRENT, if there is one; the
    engines rely on callers to keep that consistent.
    """
    id: str
    name: str
    program: str
    enrollment_date: str               # e.g., "Fall 2022"
    total_credits_required: int
    current_semester: int
    semesters: list
    failed_courses: list = field(default_factory=list)

    @property
    def active_semesters(self) -> list:
        """Every non-future semester, in order."""
        return [s for s in self.semesters if s.counts_toward_gpa]

    def find_current_semester(self) -> Optional[Semester]:
        for semester in self.semesters:
            if semester.status == SemesterStatus.CURRENT:
                return semester
        return None
