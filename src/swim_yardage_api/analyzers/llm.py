"""Analyzer that delegates to a text-generation provider."""

from typing import Any, Dict, Optional

from swim_yardage_api.services.llm_service import LLMService

from .base import WorkoutAnalyzer


class LLMWorkoutAnalyzer(WorkoutAnalyzer):
    name = "llm"

    def __init__(self, provider: Optional[str] = None, model: Optional[str] = None):
        self.provider = provider
        self.model = model

    def analyze_text(self, text: str) -> Dict[str, Any]:
        return LLMService.analyze_workout(text, provider=self.provider, model=self.model)

    def describe(self) -> Dict[str, Any]:
        return {"strategy": self.name, **LLMService.describe(self.provider, self.model)}
