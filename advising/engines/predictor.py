"""
GPA & Graduation Prediction Engine.

This module projects a student's final GPA and graduation date from the
semesters they have already taken.
"""

import math
import re
from datetime import date
from typing import Optional

from ..config import (
    TREND_RECENT_WINDOW,
    TREND_OLDER_EXCLUDE,
    TREND_THRESHOLD,
    TREND_DESCRIPTIONS,
    NOT_ENOUGH_DATA,
    ASSUMED_CREDITS_PER_SEMESTER,
    TREND_DAMPING,
    PREDICTION_MARGIN,
    MAX_GRADE_POINTS,
    MIN_GRADE_POINTS,
    LOW_CREDIT_LOAD,
    HIGH_FAILURE_RATE,
    CONFIDENCE_BASE,
    CONFIDENCE_FLOOR,
    CONFIDENCE_CEILING,
    RISK_FACTOR_PENALTY,
    FAILURE_RATE_PENALTY,
    RETAKE_DELAY_SEMESTERS,
    MONTHS_PER_SEMESTER,
    SPRING_SNAP_MONTHS,
    SPRING_GRADUATION_MONTH,
    FALL_GRADUATION_MONTH,
    DEANS_LIST,
)
from ..models import (
    StudentProfile,
    SemesterStatus,
    RetakeStatus,
    TrendDirection,
    GPATrend,
    SemesterPoint,
    GPAPrediction,
    MilestoneStatus,
    MilestoneIcon,
    Milestone,
    GraduationPrediction,
)
from . import gpa


class InsufficientHistoryError(ValueError):
    """
    Raised when a graduation estimate needs history the student doesn't have.
    
    The estimate divides credits earned by the number of semesters taken, so
    it is undefined for a student with no completed/current semesters or no
    credits earned yet.
    """


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class PredictionEngine:
    """
    Predicts final GPA and graduation timing from a StudentProfile.
    
    ═══════════════════════════════════════════════════════════════════════════
    HOW THE PROJECTION WORKS
    ═══════════════════════════════════════════════════════════════════════════
    
    1. TREND: Compare recent semester GPAs (last 3) against older ones
       (all but the last 2). A change beyond ±0.15 is a real trend.
    
    2. FINAL GPA: Carry 30% of that change forward for every remaining
       semester, assuming a flat 15-credit load:
       
           final = current CGPA + change × 0.3 × semesters remaining
       
       This is a simplification, not a regression model.
    
    3. GRADUATION: Divide remaining credits by the student's own average
       load, add half a semester per pending retake, then project forward
       six months per semester and snap to May or December.
    
    ═══════════════════════════════════════════════════════════════════════════
    
    The engine is stateless apart from `today`, which can be pinned so that
    date projections are reproducible.
    
    USAGE:
        engine = PredictionEngine()
        prediction = engine.predict_final_gpa(student)
        graduation = engine.estimate_graduation(student)
    """
    
    def __init__(self, today: Optional[date] = None):
        self.today = today
    
    def _current_date(self) -> date:
        return self.today or date.today()
    
    # =========================================================================
    #  GPA
    # =========================================================================
    
    def cumulative_gpa(self, semesters: list) -> float:
        return gpa.cumulative_gpa(semesters)
    
    def running_cgpa(self, semesters: list) -> list:
        return gpa.running_cgpa(semesters)
    
    def total_credits_earned(self, student: StudentProfile) -> int:
        return gpa.total_credits_earned(student)
    
    def gpa_trend(self, semesters: list) -> GPATrend:
        """
        Classify the direction of the student's semester GPAs.
        
        Only completed and current semesters are considered. With fewer than
        two of those there is nothing to compare against.
        """
        history = [s for s in semesters if s.counts_toward_gpa]
        
        if len(history) < 2:
            return GPATrend(TrendDirection.STABLE, 0.0, NOT_ENOUGH_DATA)
        
        recent = [s.semester_gpa for s in history[-TREND_RECENT_WINDOW:]]
        avg_recent = sum(recent) / len(recent)
        
        older = [s.semester_gpa for s in history[:-TREND_OLDER_EXCLUDE]]
        avg_older = sum(older) / len(older) if older else avg_recent
        
        change = round(avg_recent - avg_older, 2)
        
        if change > TREND_THRESHOLD:
            direction = TrendDirection.IMPROVING
        elif change < -TREND_THRESHOLD:
            direction = TrendDirection.DECLINING
        else:
            direction = TrendDirection.STABLE
        
        return GPATrend(direction, change, TREND_DESCRIPTIONS[direction.value])
    
    def predict_final_gpa(self, student: StudentProfile) -> GPAPrediction:
        """
        Project the GPA the student will graduate with.
        
        Returns:
            GPAPrediction with the current CGPA, the trend-adjusted point
            estimate, a ±0.15 range (clamped to 0.0 - 4.0), the trend, and
            one chart point per non-future semester.
        """
        semesters = student.active_semesters
        current_cgpa = gpa.cumulative_gpa(semesters)
        running = gpa.running_cgpa(semesters)
        trend = self.gpa_trend(semesters)
        
        credits_left = student.total_credits_required - gpa.total_credits_earned(student)
        semesters_remaining = max(0, math.ceil(credits_left / ASSUMED_CREDITS_PER_SEMESTER))
        
        adjustment = trend.change * TREND_DAMPING * semesters_remaining
        predicted = round(_clamp(current_cgpa + adjustment, MIN_GRADE_POINTS, MAX_GRADE_POINTS), 2)
        
        low = max(MIN_GRADE_POINTS, round(predicted - PREDICTION_MARGIN, 2))
        high = min(MAX_GRADE_POINTS, round(predicted + PREDICTION_MARGIN, 2))
        
        semester_data = [
            SemesterPoint(semester=s.name, gpa=s.semester_gpa, cgpa=cgpa)
            for s, cgpa in zip(semesters, running)
        ]
        
        return GPAPrediction(
            current_cgpa=current_cgpa,
            predicted_final_gpa=predicted,
            range=(low, high),
            trend=trend,
            semester_data=semester_data,
        )
    
    # =========================================================================
    #  GRADUATION
    # =========================================================================
    
    def estimate_graduation(self, student: StudentProfile) -> GraduationPrediction:
        """
        Estimate when the student will graduate and how sure we are.
        
        RISK FACTORS (checked in this order):
        -------------------------------------
        1. Any failed course still pending a retake
        2. Average credit load below 14 per semester
        3. More than 0.15 failed courses per semester
        
        Confidence starts at 85, loses 10 per risk factor and 20 × failure
        rate, and is held within [50, 95].
        
        Raises:
            InsufficientHistoryError: no completed/current semesters, or no
                credits earned in them
        """
        semesters = student.active_semesters
        if not semesters:
            raise InsufficientHistoryError(
                f"{student.name or student.id} has no completed or current semesters"
            )
        
        credits_earned = gpa.total_credits_earned(student)
        if credits_earned == 0:
            raise InsufficientHistoryError(
                f"{student.name or student.id} has not earned any credits yet"
            )
        
        credits_remaining = student.total_credits_required - credits_earned
        avg_credits = credits_earned / len(semesters)
        
        pending_retakes = [
            f for f in student.failed_courses if f.status == RetakeStatus.PENDING_RETAKE
        ]
        failure_rate = len(student.failed_courses) / len(semesters)
        
        risk_factors = []
        if pending_retakes:
            risk_factors.append(f"{len(pending_retakes)} course(s) pending retake")
        if avg_credits < LOW_CREDIT_LOAD:
            risk_factors.append("Below average credit load per semester")
        if failure_rate > HIGH_FAILURE_RATE:
            risk_factors.append("Higher than average course failure rate")
        
        base_remaining = max(0, math.ceil(credits_remaining / avg_credits))
        semesters_remaining = math.ceil(
            base_remaining + len(pending_retakes) * RETAKE_DELAY_SEMESTERS
        )
        
        confidence = _clamp(
            CONFIDENCE_BASE
            - len(risk_factors) * RISK_FACTOR_PENALTY
            - failure_rate * FAILURE_RATE_PENALTY,
            CONFIDENCE_FLOOR,
            CONFIDENCE_CEILING,
        )
        
        expected_date = self.expected_graduation_date(semesters_remaining)
        milestones = self._generate_milestones(student, semesters_remaining, expected_date)
        
        return GraduationPrediction(
            expected_date=expected_date,
            semesters_remaining=semesters_remaining,
            confidence=_round_half_up(confidence),
            risk_factors=risk_factors,
            milestones=milestones,
            credits_earned=credits_earned,
            credits_remaining=credits_remaining,
        )
    
    def expected_graduation_date(self, semesters_remaining: int) -> str:
        """
        Project six months per semester from today and snap to a ceremony.
        
        SNAPPING RULE (0-based month index of the projected date):
        ---------------------------------------------------------
        1..6  (Feb - Jul)  → May of that year
        other (Aug - Jan)  → December of that year
        
        Returns:
            "Month YYYY", e.g. "May 2027"
        """
        today = self._current_date()
        month_index = today.month - 1 + semesters_remaining * MONTHS_PER_SEMESTER
        year = today.year + month_index // 12
        month_index %= 12
        
        if month_index in SPRING_SNAP_MONTHS:
            month_index = SPRING_GRADUATION_MONTH
        else:
            month_index = FALL_GRADUATION_MONTH
        
        return date(year, month_index + 1, 1).strftime("%B %Y")
    
    def _generate_milestones(self, student: StudentProfile, semesters_remaining: int,
                             expected_date: str) -> list:
        """Build the timeline from enrollment through graduation."""
        milestones = [Milestone(
            id="start",
            semester_number=0,
            date=student.enrollment_date,
            status=MilestoneStatus.START,
            title="Journey Begins",
            description=f"Started {student.program}",
            icon=MilestoneIcon.FLAG,
        )]
        
        for sem in student.semesters:
            if sem.status != SemesterStatus.COMPLETED:
                continue
            
            if DEANS_LIST in sem.achievements:
                icon = MilestoneIcon.TROPHY
            elif sem.warnings:
                icon = MilestoneIcon.WARNING
            else:
                icon = MilestoneIcon.CHECK
            
            milestones.append(Milestone(
                id=f"sem-{sem.number}",
                semester_number=sem.number,
                date=sem.name,
                status=MilestoneStatus.COMPLETED,
                title=f"Semester {sem.number}",
                description=f"Completed with {sem.credits_earned} credits",
                icon=icon,
                gpa=sem.semester_gpa,
                credits=sem.credits_earned,
                highlights=list(sem.achievements) + list(sem.warnings),
            ))
        
        current = student.find_current_semester()
        if current:
            milestones.append(Milestone(
                id=f"sem-{current.number}",
                semester_number=current.number,
                date=current.name,
                status=MilestoneStatus.CURRENT,
                title=f"Semester {current.number} (Current)",
                description=f"In progress - {current.credits_attempted} credits",
                icon=MilestoneIcon.CLOCK,
                gpa=current.semester_gpa,
                credits=current.credits_attempted,
            ))
        
        current_number = current.number if current else student.current_semester
        
        for i in range(1, semesters_remaining + 1):
            number = current_number + i
            milestones.append(Milestone(
                id=f"sem-{number}",
                semester_number=number,
                date=self._semester_label(student, number),
                status=MilestoneStatus.FUTURE,
                title=f"Semester {number}",
                description="Upcoming semester",
                icon=MilestoneIcon.CLOCK,
            ))
        
        milestones.append(Milestone(
            id="graduation",
            semester_number=current_number + semesters_remaining + 1,
            date=expected_date,
            status=MilestoneStatus.GRADUATION,
            title="Graduation",
            description=f"Expected: {student.program}",
            icon=MilestoneIcon.GRADUATION,
        ))
        
        return milestones
    
    def _semester_label(self, student: StudentProfile, number: int) -> str:
        """
        Name a future semester, e.g. "Spring 2026".
        
        Odd semester numbers are Fall and even ones Spring. Semester 1 is the
        Fall of the enrollment year (falls back to the current year when the
        enrollment date has no year in it).
        """
        match = re.search(r"\d{4}", student.enrollment_date or "")
        start_year = int(match.group()) if match else self._current_date().year
        
        if number % 2 == 1:
            return f"Fall {start_year + (number - 1) // 2}"
        return f"Spring {start_year + number // 2}"
