"""
Academic Advisor - Main Orchestrator.

This module contains the AcademicAdvisor class that connects the
algorithm layer to the presentation layer.
"""

import logging
import random
from datetime import date
from typing import Optional

from .config import random_seed
from .data import DataLoader, ProfileParser
from .engines import PredictionEngine, PerformanceAnalyzer, InsufficientHistoryError
from .models import StudentProfile
from .services import StudyGuideClient, StudyGuideError
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class AcademicAdvisor:
    """
    Main interface for the advising system.
    
    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════
    
    This class connects the Algorithm layer to the Presentation layer:
    
    1. Loads a student profile (file or already-built StudentProfile)
    2. Calls the engines to get prediction/analysis results (pure data)
    3. Passes that data to the display
    4. Returns the results so callers can reuse them
    
    TO CHANGE THE UI:
    -----------------
    Pass a different display object: AcademicAdvisor(display=WebDisplay()).
    
    ═══════════════════════════════════════════════════════════════════════════
    
    USAGE:
        advisor = AcademicAdvisor()
        student = advisor.load_student("example_student")
        advisor.run_gpa_forecast(student)
        advisor.run_graduation_estimate(student)
        analysis = advisor.run_performance_analysis(student)
    """
    
    def __init__(self, today: Optional[date] = None, rng: Optional[random.Random] = None,
                 display=None, study_guide_client: Optional[StudyGuideClient] = None,
                 loader: Optional[DataLoader] = None):
        self.loader = loader or DataLoader()
        self.parser = ProfileParser()
        self.prediction_engine = PredictionEngine(today=today)
        self.performance_analyzer = PerformanceAnalyzer(rng=rng or random.Random(random_seed()))
        self.study_guide_client = study_guide_client
        self.display = display or TerminalDisplay()
    
    def load_student(self, name_or_path) -> StudentProfile:
        """Load and parse a student profile by name or path."""
        return self.parser.parse(self.loader.load_profile(name_or_path))
    
    def list_students(self) -> list:
        return self.loader.list_available_profiles()
    
    def run_gpa_forecast(self, student: StudentProfile):
        """Predict the final GPA and display it."""
        prediction = self.prediction_engine.predict_final_gpa(student)
        self.display.print_gpa_prediction(prediction)
        return prediction
    
    def run_graduation_estimate(self, student: StudentProfile):
        """
        Estimate graduation and display it.
        
        Returns:
            GraduationPrediction, or None when the student has no history
            to project from (the reason is displayed instead)
        """
        try:
            graduation = self.prediction_engine.estimate_graduation(student)
        except InsufficientHistoryError as e:
            logger.warning("Cannot estimate graduation for %s: %s", student.id, e)
            self.display.print_error("GRADUATION ESTIMATE", str(e))
            return None
        
        self.display.print_graduation_prediction(graduation)
        return graduation
    
    def run_performance_analysis(self, student: StudentProfile, current_only: bool = False):
        """
        Analyze subject and CLO performance and display it.
        
        Args:
            current_only: analyze just the current semester
        
        Returns:
            PerformanceAnalysis, or a list of SubjectPerformance when
            current_only is set
        """
        if current_only:
            subjects = self.performance_analyzer.current_semester_performance(student)
            self.display.print_header("CURRENT SEMESTER PERFORMANCE")
            self.display.print_subject_table(subjects, "Courses (weakest first)")
            return subjects
        
        analysis = self.performance_analyzer.analyze_student_performance(student)
        self.display.print_performance_analysis(analysis)
        return analysis
    
    def run_study_guide(self, student: StudentProfile, focus_area: str = ""):
        """
        Generate a study guide for the student's weak subjects.
        
        Returns:
            StudyGuide, or None when there is nothing to study or the
            endpoint refused (the reason is displayed instead)
        """
        analysis = self.performance_analyzer.analyze_student_performance(student)
        if not analysis.weak_subjects:
            self.display.print_header("STUDY GUIDE")
            print(f"\n  {self.display.GREEN}No subjects need attention. Keep it up!{self.display.RESET}")
            return None
        
        client = self.study_guide_client or StudyGuideClient()
        try:
            guide = client.generate(analysis.weak_subjects, focus_area)
        except StudyGuideError as e:
            logger.error("Study guide generation failed: %s", e)
            self.display.print_error("STUDY GUIDE", str(e))
            return None
        
        self.display.print_study_guide(guide)
        return guide
    
    def run_full_report(self, name_or_path) -> dict:
        """
        Load a student and run every analysis.
        
        Returns:
            Dict with student, gpa_prediction, graduation, performance
        """
        student = self.load_student(name_or_path)
        self.display.print_student_info(student)
        
        return {
            "student": student,
            "gpa_prediction": self.run_gpa_forecast(student),
            "graduation": self.run_graduation_estimate(student),
            "performance": self.run_performance_analysis(student),
        }
