"""
Credit-weighted GPA arithmetic.

Shared by the PredictionEngine and the PerformanceAnalyzer so that both
always agree on what a student's GPA is.

WEIGHTING:
----------
GPA is always weighted by credit hours, never by semester count:

    GPA = sum(points × credits) / sum(credits)

A 4-credit F hurts more than a 2-credit F. Failed courses (0.0 points)
still count their credits in the denominator.
"""

from ..models import StudentProfile


def _weighted_totals(semester) -> tuple:
    """Return (quality points, credits) for one semester's courses."""
    points = sum(c.points * c.credits for c in semester.courses)
    credits = sum(c.credits for c in semester.courses)
    return points, credits


def cumulative_gpa(semesters: list) -> float:
    """
    Cumulative GPA over every non-future semester, rounded to 2 decimals.
    
    Returns 0.0 when no credits have been attempted.
    """
    total_points = 0.0
    total_credits = 0
    
    for semester in semesters:
        if not semester.counts_toward_gpa:
            continue
        points, credits = _weighted_totals(semester)
        total_points += points
        total_credits += credits
    
    if total_credits == 0:
        return 0.0
    return round(total_points / total_credits, 2)


def running_cgpa(semesters: list) -> list:
    """
    Cumulative GPA after each non-future semester, in the given order.
    
    Used to plot a CGPA trajectory. Semesters must already be sorted by
    number. The last value always equals cumulative_gpa(semesters).
    """
    cgpas = []
    total_points = 0.0
    total_credits = 0
    
    for semester in semesters:
        if not semester.counts_toward_gpa:
            continue
        points, credits = _weighted_totals(semester)
        total_points += points
        total_credits += credits
        cgpas.append(round(total_points / total_credits, 2) if total_credits else 0.0)
    
    return cgpas


def semester_gpa(courses: list) -> float:
    """Credit-weighted GPA of a single semester's courses."""
    credits = sum(c.credits for c in courses)
    if credits == 0:
        return 0.0
    return round(sum(c.points * c.credits for c in courses) / credits, 2)


def total_credits_earned(student: StudentProfile) -> int:
    """Sum of credits earned over every non-future semester."""
    return sum(s.credits_earned for s in student.active_semesters)
