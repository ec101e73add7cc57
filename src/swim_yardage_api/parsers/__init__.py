"""Deterministic swim workout parsing."""
from .models import Section, Stroke, WorkoutSummary, YardageMatch
from .swim_parser import (
    DEFAULT_SECTION,
    DEFAULT_STROKE,
    SECTION_RULES,
    STROKE_RULES,
    SwimWorkoutParser,
    classify_section,
    classify_stroke,
    extract_yardage,
    parse_workout,
    split_lines,
)
from .report import render_report

__all__ = [
    "DEFAULT_SECTION",
    "DEFAULT_STROKE",
    "SECTION_RULES",
    "STROKE_RULES",
    "Section",
    "Stroke",
    "SwimWorkoutParser",
    "WorkoutSummary",
    "YardageMatch",
    "classify_section",
    "classify_stroke",
    "extract_yardage",
    "parse_workout",
    "render_report",
    "split_lines",
]
