"""
Command-Line Interface for the Advising System.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
1. GPA FORECAST: Trend and projected final GPA
2. GRADUATION ESTIMATE: Expected date, risk factors, and timeline
3. PERFORMANCE ANALYSIS: Weak/strong subjects and critical CLOs
4. STUDY GUIDE: Generate a study guide for weak subjects (needs an endpoint)
5. FULL REPORT: Modes 1-3 together

Run with:
    python -m advising [--profile PATH] [--seed N] [--verbose]
"""

import argparse
import logging
import random

import requests

from .config import EXAMPLE_PROFILE
from .advisor import AcademicAdvisor
from .ui import TerminalDisplay


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="advising",
        description="GPA forecasting, graduation estimates, and performance analysis.",
    )
    parser.add_argument("--profile", default=str(EXAMPLE_PROFILE),
                        help="student profile name or JSON path (default: example student)")
    parser.add_argument("--mode", type=int, choices=range(1, 6),
                        help="run one mode without the menu")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for CLO score synthesis, for repeatable output")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser.parse_args(argv)


def _select_mode() -> int:
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         STUDENT ACADEMIC ADVISING                                ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📈 GPA FORECAST         - Trend and projected final GPA      ║")
    print("║  2. 🎓 GRADUATION ESTIMATE  - Expected date and timeline         ║")
    print("║  3. 📋 PERFORMANCE ANALYSIS - Weak subjects and CLOs             ║")
    print("║  4. 📚 STUDY GUIDE          - AI study guide for weak subjects   ║")
    print("║  5. 🧾 FULL REPORT          - Modes 1-3                          ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")
    
    try:
        return int(input(f"{TerminalDisplay.BOLD}Select mode (1-5): {TerminalDisplay.RESET}").strip())
    except (ValueError, EOFError):
        print("  → Using default: Full Report")
        return 5


def main(argv=None):
    """Command-line entry point."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    rng = random.Random(args.seed) if args.seed is not None else None
    advisor = AcademicAdvisor(rng=rng)
    
    try:
        student = advisor.load_student(args.profile)
    except (FileNotFoundError, ValueError) as e:
        TerminalDisplay.print_error("PROFILE", str(e))
        return 1
    
    mode = args.mode or _select_mode()
    advisor.display.print_student_info(student)

    if mode == 5:
        advisor.run_gpa_forecast(student)
        advisor.run_graduation_estimate(student)
        advisor.run_performance_analysis(student)
    elif mode == 1:
        advisor.run_gpa_forecast(student)
    elif mode == 2:
        advisor.run_graduation_estimate(student)
    elif mode == 3:
        advisor.run_performance_analysis(student)
        advisor.run_performance_analysis(student, current_only=True)
    elif mode == 4:
        try:
            focus = input("  Special focus (optional): ").strip()
        except EOFError:
            focus = ""
        try:
            advisor.run_study_guide(student, focus)
        except requests.RequestException as e:
            TerminalDisplay.print_error("STUDY GUIDE", f"Could not reach the study guide endpoint ({e})")
            return 1
    else:
        print(f"  {TerminalDisplay.YELLOW}Unknown mode: {mode}{TerminalDisplay.RESET}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
