"""
Configuration constants for the advising system.

This module contains all configuration values and constants used throughout
the prediction and analysis engines. Centralizing these makes it easy to
adjust behavior as academic policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
EXAMPLE_PROFILE = DATA_DIR / "example_student.json"


# =============================================================================
# GRADE SCALE
# =============================================================================

# Grade points are on the 0.0 - 4.0 scale. A course with 0.0 grade points is a
# failure: its credits count as attempted but never as earned.
MAX_GRADE_POINTS = 4.0
MIN_GRADE_POINTS = 0.0


# =============================================================================
# GPA TREND & FINAL GPA PROJECTION
# =============================================================================

# Trend compares the average of the last 3 semesters against the average of
# every semester except the last 2.
TREND_RECENT_WINDOW = 3
TREND_OLDER_EXCLUDE = 2
TREND_THRESHOLD = 0.15

TREND_DESCRIPTIONS = {
    "improving": "Your GPA is on an upward trajectory",
    "declining": "Your GPA has been declining recently",
    "stable": "Your GPA has remained consistent",
}
NOT_ENOUGH_DATA = "Not enough data"

# Flat credit-load assumption used when projecting the final GPA
ASSUMED_CREDITS_PER_SEMESTER = 15

# Each remaining semester carries 30% of the observed trend forward
TREND_DAMPING = 0.3

# Half-width of the predicted final GPA confidence range
PREDICTION_MARGIN = 0.15


# =============================================================================
# GRADUATION ESTIMATE
# =============================================================================

LOW_CREDIT_LOAD = 14              # Avg credits/semester below this is a risk
HIGH_FAILURE_RATE = 0.15          # Failed courses per semester above this is a risk

CONFIDENCE_BASE = 85
CONFIDENCE_FLOOR = 50
CONFIDENCE_CEILING = 95
RISK_FACTOR_PENALTY = 10          # Confidence lost per risk factor
FAILURE_RATE_PENALTY = 20         # Confidence lost per unit of failure rate

# Each pending retake delays graduation by half a semester
RETAKE_DELAY_SEMESTERS = 0.5

MONTHS_PER_SEMESTER = 6

# Graduation ceremonies happen in May or December. Month indexes are 0-based:
# a projected month in [1, 6] snaps to May, anything else snaps to December.
SPRING_SNAP_MONTHS = range(1, 7)
SPRING_GRADUATION_MONTH = 4       # May
FALL_GRADUATION_MONTH = 11        # December

DEANS_LIST = "Dean's List"


# =============================================================================
# COURSE LEARNING OUTCOME (CLO) ANALYSIS
# =============================================================================

WEAK_OUTCOME_THRESHOLD = 60       # A CLO scoring below this is "weak"
NEEDS_ATTENTION_THRESHOLD = 70    # A subject below this needs attention
MAX_WEAK_OUTCOMES = 2             # ...as does one with more weak CLOs than this
STRONG_SUBJECT_THRESHOLD = 85
CRITICAL_OUTCOME_LIMIT = 10
ADVISOR_GPA_THRESHOLD = 3.0

# Synthesized CLO scores deviate from the course grade by up to this much
OUTCOME_VARIATION = 10

OUTCOME_DESCRIPTIONS = (
    "Understand fundamental concepts and theories",
    "Apply knowledge to solve practical problems",
    "Analyze complex scenarios and data",
    "Evaluate solutions and make informed decisions",
    "Create original work and innovative solutions",
)

# Presentation bands. The cut-offs are part of the contract, the colors are not.
BAND_EXCELLENT = 85
BAND_GOOD = 70
BAND_FAIR = 60


# =============================================================================
# REMOTE STUDY GUIDE GENERATION
# =============================================================================

# Any OpenAI-compatible chat-completions endpoint works here, including a
# local Ollama server (http://localhost:11434/v1/chat/completions).
STUDY_GUIDE_URL = os.environ.get(
    "STUDY_GUIDE_URL", "http://localhost:11434/v1/chat/completions"
)
STUDY_GUIDE_MODEL = os.environ.get("STUDY_GUIDE_MODEL", "llama3.2:latest")
STUDY_GUIDE_API_KEY = os.environ.get("STUDY_GUIDE_API_KEY", "")
STUDY_GUIDE_TIMEOUT = float(os.environ.get("STUDY_GUIDE_TIMEOUT", "60"))


def random_seed():
    """Seed for outcome score synthesis, or None for a fresh draw every run."""
    seed = os.environ.get("ADVISING_SEED")
    return int(seed) if seed else None
