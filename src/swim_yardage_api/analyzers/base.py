"""
Base Analyzer

Abstract base class for the strategies that turn workout text into a
structured breakdown.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class WorkoutAnalyzer(ABC):
    """Abstract base class for workout analyzers"""

    name: str = "base"

    @abstractmethod
    def analyze_text(self, text: str) -> Dict[str, Any]:
        """
        Analyze workout text.

        Args:
            text: Non-blank workout text

        Returns:
            JSON-ready dict with at least totalYards, sectionYards,
            strokePercentages, aiTip and aiSummary (or rawOutput when a
            provider's answer could not be parsed)
        """
        pass

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """Identifiers reported by the diagnostics endpoint."""
        pass
