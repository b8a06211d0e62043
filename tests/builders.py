"""Builders for StudentProfile test fixtures."""

from advising.engines import semester_gpa
from advising.models import (
    Course,
    Semester,
    SemesterStatus,
    FailedCourse,
    RetakeStatus,
    StudentProfile,
)


def make_course(code="CS101", points=3.0, credits=3, grade="B", name=None):
    return Course(code=code, name=name or code, credits=credits, grade=grade, points=points)


def make_semester(number, courses=None, gpa=None, status=SemesterStatus.COMPLETED,
                  credits_earned=None, achievements=None, warnings=None, name=None):
    """
    Build a semester. With only `gpa` given, a single 15-credit course at
    that grade-point value is used so the semester GPA is consistent.
    """
    if courses is None:
        courses = [make_course(f"C{number}", points=gpa if gpa is not None else 3.0, credits=15)]
    attempted = sum(c.credits for c in courses)
    if credits_earned is None:
        credits_earned = sum(c.credits for c in courses if c.points > 0)
    return Semester(
        number=number,
        name=name or f"Semester {number}",
        status=status,
        courses=courses,
        semester_gpa=gpa if gpa is not None else semester_gpa(courses),
        credits_attempted=attempted,
        credits_earned=credits_earned,
        achievements=achievements or [],
        warnings=warnings or [],
    )


def make_student(semesters, total_credits_required=130, failed_courses=None,
                 current_semester=None, enrollment_date="Fall 2022"):
    if current_semester is None:
        current = [s.number for s in semesters if s.status == SemesterStatus.CURRENT]
        current_semester = current[0] if current else len(semesters)
    return StudentProfile(
        id="std-test",
        name="Test Student",
        program="BS Testing",
        enrollment_date=enrollment_date,
        total_credits_required=total_credits_required,
        current_semester=current_semester,
        semesters=semesters,
        failed_courses=failed_courses or [],
    )


def make_failed(code="PHY102", status=RetakeStatus.PENDING_RETAKE, credits=4, semester=1):
    return FailedCourse(code=code, name=code, credits=credits, status=status,
                        original_semester=semester)
