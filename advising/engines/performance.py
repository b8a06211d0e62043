"""
Course Performance Analysis Engine.

This module breaks each enrolled course down into course learning outcome
(CLO) scores and rolls them up into subject-level and student-level signals.
"""

import random
from typing import Optional

from ..config import (
    MAX_GRADE_POINTS,
    OUTCOME_DESCRIPTIONS,
    OUTCOME_VARIATION,
    WEAK_OUTCOME_THRESHOLD,
    NEEDS_ATTENTION_THRESHOLD,
    MAX_WEAK_OUTCOMES,
    STRONG_SUBJECT_THRESHOLD,
    CRITICAL_OUTCOME_LIMIT,
    ADVISOR_GPA_THRESHOLD,
    BAND_EXCELLENT,
    BAND_GOOD,
    BAND_FAIR,
)
from ..models import (
    Course,
    StudentProfile,
    AssessmentType,
    PerformanceBand,
    CLOScore,
    SubjectPerformance,
    CriticalOutcome,
    PerformanceAnalysis,
)
from . import gpa


def color_band(performance: float) -> PerformanceBand:
    """Map a performance percentage to its presentation band."""
    if performance >= BAND_EXCELLENT:
        return PerformanceBand.EXCELLENT
    if performance >= BAND_GOOD:
        return PerformanceBand.GOOD
    if performance >= BAND_FAIR:
        return PerformanceBand.FAIR
    return PerformanceBand.POOR


def border_color(performance: float) -> PerformanceBand:
    """Band used for card borders. Same cut-offs as color_band."""
    return color_band(performance)


class PerformanceAnalyzer:
    """
    Analyzes a student's performance at the subject and CLO level.
    
    ═══════════════════════════════════════════════════════════════════════════
    THRESHOLDS
    ═══════════════════════════════════════════════════════════════════════════
    
    CLO is weak:              score < 60
    Subject needs attention:  performance < 70  OR  more than 2 weak CLOs
    Subject is strong:        performance >= 85
    
    A subject can need attention even when none of its CLOs are weak.
    
    ═══════════════════════════════════════════════════════════════════════════
    CLO SCORES ARE SYNTHESIZED
    ═══════════════════════════════════════════════════════════════════════════
    
    Per-outcome marks are not recorded anywhere, so they are generated from
    the course grade with up to ±10 points of random variation. Every call
    draws new scores. Pass a seeded `random.Random` for reproducible output.
    
    ═══════════════════════════════════════════════════════════════════════════
    
    USAGE:
        analyzer = PerformanceAnalyzer(rng=random.Random(42))
        analysis = analyzer.analyze_student_performance(student)
    """
    
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
    
    def generate_outcome_scores(self, course: Course) -> list:
        """
        Synthesize the five CLO scores for a course.
        
        Each score is the course's percentage plus an independent variation
        in [-10, +10], held within 0 - 100. The assessment type is drawn
        uniformly from quiz/assignment/exam/project.
        """
        base = (course.points / MAX_GRADE_POINTS) * 100
        assessment_types = list(AssessmentType)
        
        scores = []
        for i, description in enumerate(OUTCOME_DESCRIPTIONS, 1):
            variation = self.rng.uniform(0, OUTCOME_VARIATION)
            sign = 1 if self.rng.random() > 0.5 else -1
            scores.append(CLOScore(
                clo_number=i,
                description=description,
                score=max(0.0, min(100.0, base + variation * sign)),
                assessment_type=self.rng.choice(assessment_types),
            ))
        return scores
    
    def analyze_subject(self, course: Course, semester_name: str) -> SubjectPerformance:
        """Build the SubjectPerformance view of one course."""
        clo_scores = self.generate_outcome_scores(course)
        weak_clos = [clo for clo in clo_scores if clo.score < WEAK_OUTCOME_THRESHOLD]
        overall = (course.points / MAX_GRADE_POINTS) * 100
        
        return SubjectPerformance(
            code=course.code,
            name=course.name,
            overall_performance=overall,
            grade=course.grade,
            grade_points=course.points,
            credits=course.credits,
            semester=semester_name,
            clo_scores=clo_scores,
            weak_clos=weak_clos,
            # No per-course history exists to compare against
            trend="stable",
            needs_attention=(
                overall < NEEDS_ATTENTION_THRESHOLD or len(weak_clos) > MAX_WEAK_OUTCOMES
            ),
        )
    
    def analyze_student_performance(self, student: StudentProfile) -> PerformanceAnalysis:
        """
        Analyze every course in every non-future semester.
        
        Returns:
            PerformanceAnalysis with:
            - overall_gpa: credit-weighted, same formula as the predictor
            - weak_subjects: needs attention, weakest first
            - strong_subjects: >= 85%, strongest first
            - critical_clos: the 10 lowest weak CLOs across all subjects
            - recommendations: advisory strings in priority order
        """
        overall_gpa = gpa.cumulative_gpa(student.semesters)
        
        subjects = [
            self.analyze_subject(course, semester.name)
            for semester in student.active_semesters
            for course in semester.courses
        ]
        
        weak_subjects = sorted(
            (s for s in subjects if s.needs_attention),
            key=lambda s: s.overall_performance,
        )
        strong_subjects = sorted(
            (s for s in subjects if s.overall_performance >= STRONG_SUBJECT_THRESHOLD),
            key=lambda s: s.overall_performance,
            reverse=True,
        )
        
        critical = sorted(
            CriticalOutcome(subject=s.name, clo=clo)
            for s in subjects
            for clo in s.weak_clos
        )
        
        recommendations = []
        if weak_subjects:
            weakest = weak_subjects[0]
            recommendations.append(
                f"Focus on improving {weakest.name} "
                f"({int(weakest.overall_performance + 0.5)}%)"
            )
        if critical:
            recommendations.append(f"Work on {critical[0].clo.description.lower()} skills")
        if overall_gpa < ADVISOR_GPA_THRESHOLD:
            recommendations.append("Consider meeting with academic advisor")
        
        return PerformanceAnalysis(
            overall_gpa=overall_gpa,
            weak_subjects=weak_subjects,
            strong_subjects=strong_subjects,
            critical_clos=critical[:CRITICAL_OUTCOME_LIMIT],
            recommendations=recommendations,
        )
    
    def current_semester_performance(self, student: StudentProfile) -> list:
        """
        Analyze only the current semester's courses, weakest first.
        
        Returns an empty list when no semester is in progress.
        """
        current = student.find_current_semester()
        if current is None:
            return []
        
        subjects = [self.analyze_subject(course, current.name) for course in current.courses]
        return sorted(subjects, key=lambda s: s.overall_performance)
