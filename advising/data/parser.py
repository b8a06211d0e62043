"""
Profile parsing.

This module turns raw student profile JSON into StudentProfile objects,
filling in per-semester aggregates the export left out.
"""

from ..config import MAX_GRADE_POINTS, MIN_GRADE_POINTS
from ..engines.gpa import semester_gpa
from ..models import (
    Course,
    Semester,
    SemesterStatus,
    FailedCourse,
    RetakeStatus,
    StudentProfile,
)


def _get(data: dict, *keys, default=None):
    """Return the first key present, so camelCase and snake_case both work."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


class ProfileParser:
    """
    Parses raw profile JSON into a StudentProfile.
    
    KEY RESPONSIBILITY: produce a profile the engines can trust without
    checking it again.
    
    DERIVED FIELDS:
    Exports sometimes omit the per-semester aggregates. When missing:
    - credits_attempted = sum of course credits
    - credits_earned = sum of credits of courses with grade points > 0
      (a 0.0 course is a failure: attempted but not earned)
    - semester_gpa = credit-weighted GPA of the semester's courses
    
    ORDERING:
    Semesters are sorted by number, so trend and running CGPA follow the
    academic sequence rather than the order the export happened to use.
    """
    
    def parse(self, profile_data: dict) -> StudentProfile:
        """
        Parse a full profile.
        
        Raises:
            ValueError: unknown status, non-positive credits, grade points
                outside 0.0 - 4.0, credits earned above credits attempted or
                different from the passed courses, duplicate semester numbers,
                or more than one current semester
        """
        semesters = sorted(
            (self._parse_semester(s) for s in _get(profile_data, "semesters", default=[])),
            key=lambda s: s.number,
        )
        
        numbers = [s.number for s in semesters]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Duplicate semester numbers: {numbers}")
        current = [s.number for s in semesters if s.status == SemesterStatus.CURRENT]
        if len(current) > 1:
            raise ValueError(f"More than one current semester: {current}")
        
        failed = [
            self._parse_failed_course(f)
            for f in _get(profile_data, "failedCourses", "failed_courses", default=[])
        ]
        
        return StudentProfile(
            id=str(_get(profile_data, "id", default="")),
            name=_get(profile_data, "name", default=""),
            program=_get(profile_data, "program", default=""),
            enrollment_date=_get(profile_data, "enrollmentDate", "enrollment_date", default=""),
            total_credits_required=int(
                _get(profile_data, "totalCreditsRequired", "total_credits_required", default=0)
            ),
            current_semester=int(
                _get(profile_data, "currentSemester", "current_semester", default=0)
            ),
            semesters=semesters,
            failed_courses=failed,
        )
    
    def _parse_semester(self, data: dict) -> Semester:
        number = int(_get(data, "number", default=0))
        courses = [self._parse_course(c, number) for c in _get(data, "courses", default=[])]
        
        try:
            status = SemesterStatus(_get(data, "status", default="completed"))
        except ValueError:
            raise ValueError(f"Semester {number}: unknown status {data.get('status')!r}")
        
        passed_credits = sum(c.credits for c in courses if not c.is_failed)
        
        attempted = int(_get(data, "creditsAttempted", "credits_attempted",
                             default=sum(c.credits for c in courses)))
        earned = int(_get(data, "creditsEarned", "credits_earned", default=passed_credits))
        
        if earned > attempted:
            raise ValueError(
                f"Semester {number}: credits earned ({earned}) exceed credits attempted ({attempted})"
            )
        # A course earns its credits exactly when it has grade points
        if courses and earned != passed_credits:
            raise ValueError(
                f"Semester {number}: credits earned ({earned}) do not match "
                f"credits of passed courses ({passed_credits})"
            )
        
        gpa = _get(data, "semesterGPA", "semester_gpa")
        if gpa is None:
            gpa = semester_gpa(courses)
        
        return Semester(
            number=number,
            name=_get(data, "name", default=f"Semester {number}"),
            status=status,
            courses=courses,
            semester_gpa=float(gpa),
            credits_attempted=attempted,
            credits_earned=earned,
            achievements=list(_get(data, "achievements", default=[])),
            warnings=list(_get(data, "warnings", default=[])),
        )
    
    def _parse_course(self, data: dict, semester_number: int) -> Course:
        code = _get(data, "code", default="")
        credits = int(_get(data, "credits", default=0))
        points = float(_get(data, "points", "gradePoints", "grade_points", default=0.0))
        
        if credits <= 0:
            raise ValueError(f"Semester {semester_number}, {code}: credits must be positive")
        if not MIN_GRADE_POINTS <= points <= MAX_GRADE_POINTS:
            raise ValueError(
                f"Semester {semester_number}, {code}: grade points {points} outside "
                f"{MIN_GRADE_POINTS}-{MAX_GRADE_POINTS}"
            )
        
        return Course(
            code=code,
            name=_get(data, "name", "title", default=code),
            credits=credits,
            grade=_get(data, "grade", default=""),
            points=points,
        )
    
    def _parse_failed_course(self, data: dict) -> FailedCourse:
        code = _get(data, "code", default="")
        try:
            status = RetakeStatus(_get(data, "status", default="pending_retake"))
        except ValueError:
            raise ValueError(f"Failed course {code}: unknown retake status {data.get('status')!r}")
        
        return FailedCourse(
            code=code,
            name=_get(data, "name", default=code),
            credits=int(_get(data, "credits", default=0)),
            status=status,
            original_semester=int(_get(data, "originalSemester", "original_semester", default=0)),
            attempts=int(_get(data, "attempts", default=1)),
        )
