"""Interchangeable workout analysis strategies."""
from swim_yardage_api.config import settings

from .base import WorkoutAnalyzer
from .llm import LLMWorkoutAnalyzer
from .local import LocalWorkoutAnalyzer


def get_analyzer() -> WorkoutAnalyzer:
    """FastAPI dependency returning the analyzer for ANALYZER_STRATEGY."""
    if settings.ANALYZER_STRATEGY == "llm":
        return LLMWorkoutAnalyzer()
    return LocalWorkoutAnalyzer()


__all__ = [
    "LLMWorkoutAnalyzer",
    "LocalWorkoutAnalyzer",
    "WorkoutAnalyzer",
    "get_analyzer",
]
