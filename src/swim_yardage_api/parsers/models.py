"""
Parser Models

Enumerations and pydantic models for the swim workout breakdown that every
analyzer outputs.
"""

from typing import Dict, List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Section(str, Enum):
    """Practice phases, in their fixed enumeration order"""
    WARMUP = "Warmup"
    PRESET = "Preset"
    MAIN_SET = "Main Set"
    PULL = "Pull"
    SPRINT_FINISHER = "Sprint Finisher"
    POST_SET = "Post-Set"
    COOLDOWN = "Cooldown"


class Stroke(str, Enum):
    """Stroke categories, in their fixed enumeration order"""
    FREESTYLE = "Freestyle"
    BACKSTROKE = "Backstroke"
    BREASTSTROKE = "Breaststroke"
    BUTTERFLY = "Butterfly"
    KICK = "Kick"
    DRILL = "Drill"


class YardageMatch(BaseModel):
    """A rep x distance pattern found on a line"""
    model_config = ConfigDict(frozen=True)

    reps: int = Field(..., ge=0)
    distance: int = Field(..., ge=0)
    text: str = Field(..., description="Matched notation, e.g. '8x50'")

    @property
    def yards(self) -> int:
        return self.reps * self.distance


class WorkoutSummary(BaseModel):
    """Breakdown of one workout; serialized with camelCase aliases"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_yards: int = Field(default=0, ge=0, alias="totalYards")
    set_count: int = Field(default=0, ge=0, alias="setCount", description="Lines that carried yardage")
    section_yards: Dict[str, int] = Field(default_factory=dict, alias="sectionYards")
    section_percentages: Dict[str, float] = Field(default_factory=dict, alias="sectionPercentages")
    stroke_yards: Dict[str, int] = Field(default_factory=dict, alias="strokeYards")
    stroke_percentages: Dict[str, float] = Field(default_factory=dict, alias="strokePercentages")
    section_lines: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="sectionLines",
        description="Raw lines per section, sections in order of first encounter",
    )
    dominant_section: Optional[str] = Field(default=None, alias="dominantSection")
    dominant_stroke: Optional[str] = Field(default=None, alias="dominantStroke")
    ai_tip: str = Field(default="", alias="aiTip")
    ai_summary: str = Field(default="", alias="aiSummary", description="Rendered text report")
    source: str = "local"

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


class LLMAnalysis(BaseModel):
    """Structured analysis returned by a text-generation provider"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    total_yards: float = Field(default=0, ge=0, alias="totalYards")
    section_yards: Dict[str, float] = Field(default_factory=dict, alias="sectionYards")
    stroke_percentages: Dict[str, float] = Field(default_factory=dict, alias="strokePercentages")
    ai_tip: str = Field(default="", alias="aiTip")

    @field_validator("stroke_percentages")
    @classmethod
    def normalize_percentages(cls, value: Dict[str, float]) -> Dict[str, float]:
        """Providers sometimes answer 0-100 instead of 0-1."""
        if any(v > 1 for v in value.values()):
            value = {k: v / 100 for k, v in value.items()}
        return {k: round(min(max(v, 0.0), 1.0), 2) for k, v in value.items()}
