"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..engines import color_band
from ..models import (
    StudentProfile,
    TrendDirection,
    GPAPrediction,
    GraduationPrediction,
    MilestoneStatus,
    MilestoneIcon,
    PerformanceBand,
    PerformanceAnalysis,
    StudyGuide,
)


class TerminalDisplay:
    """
    Pretty terminal output for prediction and analysis results.
    
    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════
    
    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Map PerformanceBand values to CSS classes instead of ANSI colors.
       
    2. FOR API RESPONSE:
       Skip the display and serialize the returned dataclasses to JSON.
    
    ═══════════════════════════════════════════════════════════════════════════
    """
    
    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"
    
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"
    
    BAND_COLORS = {
        PerformanceBand.EXCELLENT: GREEN,
        PerformanceBand.GOOD: BLUE,
        PerformanceBand.FAIR: YELLOW,
        PerformanceBand.POOR: RED,
    }
    
    ICONS = {
        MilestoneIcon.CHECK: "✓",
        MilestoneIcon.WARNING: "⚠",
        MilestoneIcon.TROPHY: "🏆",
        MilestoneIcon.CLOCK: "⏳",
        MilestoneIcon.FLAG: "🚩",
        MilestoneIcon.GRADUATION: "🎓",
    }
    
    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
    
    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")
    
    @classmethod
    def color_for(cls, performance: float) -> str:
        """ANSI color for a performance percentage."""
        return cls.BAND_COLORS[color_band(performance)]
    
    @classmethod
    def trend_badge(cls, direction: TrendDirection) -> str:
        """Return a colored trend badge."""
        if direction == TrendDirection.IMPROVING:
            return f"{cls.BG_GREEN}{cls.WHITE} ▲ IMPROVING {cls.RESET}"
        elif direction == TrendDirection.DECLINING:
            return f"{cls.BG_RED}{cls.WHITE} ▼ DECLINING {cls.RESET}"
        else:
            return f"{cls.BG_YELLOW}{cls.WHITE} ● STABLE {cls.RESET}"
    
    @classmethod
    def print_error(cls, title: str, message: str):
        cls.print_header(f"{title}: ERROR")
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")
    
    @classmethod
    def print_student_info(cls, student: StudentProfile):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.name or 'Unknown'}")
        print(f"  {cls.BOLD}Program:{cls.RESET} {student.program or 'Unknown'}")
        print(f"  {cls.BOLD}Enrolled:{cls.RESET} {student.enrollment_date or 'Unknown'}")
        print(f"  {cls.BOLD}Current Semester:{cls.RESET} {student.current_semester}")
        print(f"  {cls.BOLD}Credits Required:{cls.RESET} {student.total_credits_required}")
    
    @classmethod
    def print_gpa_prediction(cls, prediction: GPAPrediction):
        """Print the GPA trajectory table and the final GPA projection."""
        cls.print_header("GPA FORECAST")
        
        low, high = prediction.range
        print(f"\n  {cls.BOLD}Current CGPA:{cls.RESET} {prediction.current_cgpa:.2f}")
        print(f"  {cls.BOLD}Predicted Final GPA:{cls.RESET} "
              f"{cls.CYAN}{prediction.predicted_final_gpa:.2f}{cls.RESET} "
              f"{cls.DIM}(range {low:.2f} - {high:.2f}){cls.RESET}")
        print(f"  {cls.BOLD}Trend:{cls.RESET} {cls.trend_badge(prediction.trend.trend)} "
              f"{prediction.trend.description} ({prediction.trend.change:+.2f})")
        
        cls.print_subheader("Semester History")
        print(f"\n  {cls.BOLD}{'SEMESTER':<16} {'GPA':>6} {'CGPA':>6}  {'TRAJECTORY'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        
        for point in prediction.semester_data:
            bar = "█" * int(point.cgpa * 10)
            color = cls.color_for(point.gpa / 4.0 * 100)
            print(f"  {point.semester:<16} {color}{point.gpa:>6.2f}{cls.RESET} "
                  f"{point.cgpa:>6.2f}  {cls.DIM}{bar}{cls.RESET}")
    
    @classmethod
    def print_graduation_prediction(cls, graduation: GraduationPrediction):
        """Print the graduation estimate, risk factors, and milestone timeline."""
        cls.print_header("GRADUATION ESTIMATE")
        
        if graduation.confidence >= 80:
            conf_color = cls.GREEN
        elif graduation.confidence >= 65:
            conf_color = cls.YELLOW
        else:
            conf_color = cls.RED
        
        print(f"\n  {cls.BOLD}Expected Graduation:{cls.RESET} {cls.CYAN}{graduation.expected_date}{cls.RESET}")
        print(f"  {cls.BOLD}Semesters Remaining:{cls.RESET} {graduation.semesters_remaining}")
        print(f"  {cls.BOLD}Confidence:{cls.RESET} {conf_color}{graduation.confidence}%{cls.RESET}")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {graduation.credits_earned} earned, "
              f"{graduation.credits_remaining} remaining")
        
        if graduation.risk_factors:
            cls.print_subheader("Risk Factors")
            for risk in graduation.risk_factors:
                print(f"    {cls.YELLOW}⚠{cls.RESET} {risk}")
        
        cls.print_subheader("Timeline")
        for milestone in graduation.milestones:
            icon = cls.ICONS[milestone.icon]
            if milestone.status == MilestoneStatus.FUTURE:
                print(f"    {cls.DIM}{icon} {milestone.date:<16} {milestone.title}{cls.RESET}")
                continue
            
            line = f"    {icon} {milestone.date:<16} {cls.BOLD}{milestone.title}{cls.RESET}"
            if milestone.gpa is not None:
                line += f" {cls.DIM}GPA {milestone.gpa:.2f}{cls.RESET}"
            print(line)
            print(f"       {cls.DIM}{milestone.description}{cls.RESET}")
            if milestone.highlights:
                print(f"       {cls.MAGENTA}{' • '.join(milestone.highlights)}{cls.RESET}")
    
    @classmethod
    def print_subject_table(cls, subjects: list, title: str):
        """Print a table of SubjectPerformance rows."""
        cls.print_subheader(title)
        if not subjects:
            print(f"    {cls.DIM}(none){cls.RESET}")
            return
        
        print(f"\n  {cls.BOLD}{'CODE':<10} {'NAME':<32} {'GRADE':<6} {'PERF':>6}  {'WEAK CLOs'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for s in subjects:
            color = cls.color_for(s.overall_performance)
            name = s.name[:29] + "..." if len(s.name) > 32 else s.name
            weak = ", ".join(f"CLO {c.clo_number}" for c in s.weak_clos) or "-"
            flag = f" {cls.RED}!{cls.RESET}" if s.needs_attention else ""
            print(f"  {s.code:<10} {name:<32} {s.grade:<6} "
                  f"{color}{s.overall_performance:>5.0f}%{cls.RESET}  {weak}{flag}")
    
    @classmethod
    def print_performance_analysis(cls, analysis: PerformanceAnalysis):
        """Print weak/strong subjects, critical CLOs, and recommendations."""
        cls.print_header("PERFORMANCE ANALYSIS")
        print(f"\n  {cls.BOLD}Overall GPA:{cls.RESET} {analysis.overall_gpa:.2f}")
        
        cls.print_subject_table(analysis.weak_subjects, "Subjects Needing Attention")
        cls.print_subject_table(analysis.strong_subjects, "Strong Subjects")
        
        if analysis.critical_clos:
            cls.print_subheader("Critical Learning Outcomes")
            for item in analysis.critical_clos:
                color = cls.color_for(item.clo.score)
                print(f"    {color}{item.clo.score:>5.1f}%{cls.RESET} {item.subject} "
                      f"{cls.DIM}CLO {item.clo.clo_number}: {item.clo.description} "
                      f"({item.clo.assessment_type.value}){cls.RESET}")
        
        if analysis.recommendations:
            cls.print_subheader("Recommendations")
            for i, rec in enumerate(analysis.recommendations, 1):
                print(f"    {cls.CYAN}{i}.{cls.RESET} {rec}")
        print()
    
    @classmethod
    def print_study_guide(cls, guide: StudyGuide):
        cls.print_header("STUDY GUIDE")
        print(f"  {cls.DIM}Generated {guide.generated_at} for {guide.subjects_analyzed} "
              f"subject(s), {guide.total_weak_clos} weak CLO(s){cls.RESET}\n")
        print(guide.content)
        print()
