from advising.engines import (
    PredictionEngine,
    cumulative_gpa,
    running_cgpa,
    semester_gpa,
    total_credits_earned,
)
from advising.models import SemesterStatus

from .builders import make_course, make_semester, make_student


def test_single_perfect_course():
    semesters = [make_semester(1, courses=[make_course(points=4.0, credits=3)])]
    assert cumulative_gpa(semesters) == 4.0


def test_no_credits_is_zero():
    assert cumulative_gpa([]) == 0.0
    assert cumulative_gpa([make_semester(1, courses=[])]) == 0.0


def test_weighted_by_credits_not_semesters():
    semesters = [
        make_semester(1, courses=[make_course("A", points=4.0, credits=4)]),
        make_semester(2, courses=[make_course("B", points=0.0, credits=1)]),
    ]
    # Semester-count weighting would give 2.0
    assert cumulative_gpa(semesters) == 3.2


def test_future_semesters_excluded():
    semesters = [
        make_semester(1, gpa=3.0),
        make_semester(2, gpa=1.0, status=SemesterStatus.FUTURE),
    ]
    assert cumulative_gpa(semesters) == 3.0
    assert running_cgpa(semesters) == [3.0]


def test_current_semester_counts():
    semesters = [
        make_semester(1, gpa=4.0),
        make_semester(2, gpa=2.0, status=SemesterStatus.CURRENT),
    ]
    assert cumulative_gpa(semesters) == 3.0


def test_example_student_cumulative(example_student):
    assert cumulative_gpa(example_student.semesters) == 3.29


def test_example_student_running(example_student):
    running = running_cgpa(example_student.semesters)
    assert running == [3.53, 2.89, 3.12, 3.22, 3.29]
    assert running[-1] == cumulative_gpa(example_student.semesters)


def test_running_cgpa_length_matches_non_future_count():
    semesters = [
        make_semester(1, gpa=2.5),
        make_semester(2, gpa=3.5, status=SemesterStatus.CURRENT),
        make_semester(3, status=SemesterStatus.FUTURE),
        make_semester(4, status=SemesterStatus.FUTURE),
    ]
    running = running_cgpa(semesters)
    assert len(running) == 2
    assert running[-1] == cumulative_gpa(semesters)


def test_running_cgpa_empty_semester_first():
    semesters = [make_semester(1, courses=[]), make_semester(2, gpa=3.0)]
    assert running_cgpa(semesters) == [0.0, 3.0]


def test_semester_gpa():
    courses = [make_course("A", points=4.0, credits=3), make_course("B", points=0.0, credits=4)]
    assert semester_gpa(courses) == 1.71
    assert semester_gpa([]) == 0.0


def test_failed_course_not_earned():
    semester = make_semester(1, courses=[
        make_course("A", points=3.0, credits=3),
        make_course("B", points=0.0, credits=4),
    ])
    assert semester.credits_attempted == 7
    assert semester.credits_earned == 3


def test_total_credits_earned(example_student):
    assert total_credits_earned(example_student) == 69


def test_total_credits_earned_ignores_future():
    student = make_student([
        make_semester(1, gpa=3.0),
        make_semester(2, gpa=3.0, status=SemesterStatus.FUTURE),
    ])
    assert total_credits_earned(student) == 15


def test_gpa_calculations_are_idempotent(example_student):
    semesters = example_student.semesters
    assert cumulative_gpa(semesters) == cumulative_gpa(semesters)
    assert running_cgpa(semesters) == running_cgpa(semesters)
    
    engine = PredictionEngine()
    assert engine.gpa_trend(semesters) == engine.gpa_trend(semesters)
