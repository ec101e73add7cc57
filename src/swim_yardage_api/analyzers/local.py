"""Analyzer backed by the deterministic swim parser."""

import logging
from typing import Any, Dict

from swim_yardage_api.parsers.swim_parser import SwimWorkoutParser

from .base import WorkoutAnalyzer

logger = logging.getLogger(__name__)


class LocalWorkoutAnalyzer(WorkoutAnalyzer):
    """Parses workouts in-process; never fails on unrecognized lines"""

    name = "local"

    def __init__(self, parser: SwimWorkoutParser | None = None):
        self.parser = parser or SwimWorkoutParser()

    def analyze_text(self, text: str) -> Dict[str, Any]:
        summary = self.parser.parse(text)
        logger.info(
            f"Local analysis: {summary.total_yards} yds, "
            f"{len(summary.section_yards)} sections, {summary.set_count} sets"
        )
        return summary.to_response()

    def describe(self) -> Dict[str, Any]:
        return {"strategy": self.name}
