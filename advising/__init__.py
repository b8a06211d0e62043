"""
Student Academic Advising Package
=================================

GPA forecasting, graduation estimates, and course performance analysis
for a student-facing academic portal.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │ ProfileParser   │  │ gpa (shared GPA arithmetic) │  │
│  │  (I/O)      │  │ (parsing)       │  │                             │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │    PredictionEngine     │  │       PerformanceAnalyzer           │  │
│  │ (GPA trend, graduation) │  │   (subjects and CLO scores)         │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      AcademicAdvisor                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── config.py            # Thresholds and settings
├── advisor.py           # AcademicAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── student.py       # Course, Semester, FailedCourse, StudentProfile
│   ├── prediction.py    # GPATrend, GPAPrediction, Milestone, GraduationPrediction
│   ├── performance.py   # CLOScore, SubjectPerformance, PerformanceAnalysis
│   └── study_guide.py   # StudyGuide
│
├── data/                # Data loading and parsing
│   ├── loader.py        # DataLoader
│   └── parser.py        # ProfileParser
│
├── engines/             # Prediction and analysis engines
│   ├── gpa.py           # Credit-weighted GPA helpers
│   ├── predictor.py     # PredictionEngine
│   └── performance.py   # PerformanceAnalyzer
│
├── services/            # Remote service clients
│   └── study_guide.py   # StudyGuideClient
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from advising import AcademicAdvisor

    advisor = AcademicAdvisor()
    student = advisor.load_student("example_student")
    advisor.run_gpa_forecast(student)
    advisor.run_graduation_estimate(student)

Engines can be used on their own, without any display:

    from advising import PredictionEngine, PerformanceAnalyzer

    prediction = PredictionEngine().predict_final_gpa(student)
    analysis = PerformanceAnalyzer().analyze_student_performance(student)

Running from command line:

    python -m advising

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import AcademicAdvisor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    Semester,
    SemesterStatus,
    FailedCourse,
    RetakeStatus,
    StudentProfile,
    TrendDirection,
    GPATrend,
    SemesterPoint,
    GPAPrediction,
    MilestoneStatus,
    MilestoneIcon,
    Milestone,
    GraduationPrediction,
    AssessmentType,
    PerformanceBand,
    CLOScore,
    SubjectPerformance,
    CriticalOutcome,
    PerformanceAnalysis,
    StudyGuide,
)

# Engine exports (for advanced use)
from .engines import (
    PredictionEngine,
    PerformanceAnalyzer,
    InsufficientHistoryError,
    cumulative_gpa,
    running_cgpa,
    total_credits_earned,
    color_band,
    border_color,
)

# Data exports
from .data import DataLoader, ProfileParser

# Service exports
from .services import StudyGuideClient, StudyGuideError

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AcademicAdvisor",
    "main",
    # Models
    "Course",
    "Semester",
    "SemesterStatus",
    "FailedCourse",
    "RetakeStatus",
    "StudentProfile",
    "TrendDirection",
    "GPATrend",
    "SemesterPoint",
    "GPAPrediction",
    "MilestoneStatus",
    "MilestoneIcon",
    "Milestone",
    "GraduationPrediction",
    "AssessmentType",
    "PerformanceBand",
    "CLOScore",
    "SubjectPerformance",
    "CriticalOutcome",
    "PerformanceAnalysis",
    "StudyGuide",
    # Engines
    "PredictionEngine",
    "PerformanceAnalyzer",
    "InsufficientHistoryError",
    "cumulative_gpa",
    "running_cgpa",
    "total_credits_earned",
    "color_band",
    "border_color",
    # Data
    "DataLoader",
    "ProfileParser",
    # Services
    "StudyGuideClient",
    "StudyGuideError",
    # UI
    "TerminalDisplay",
]
