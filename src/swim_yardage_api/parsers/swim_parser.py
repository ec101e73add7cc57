"""
Swim Workout Parser

Turns whiteboard-style swim practice text into a yardage breakdown:
- Splits the text into trimmed, non-empty lines
- Tracks the active practice section from header keywords
- Extracts the first rep x distance pattern per line ("8x50", "16 x 25")
- Labels each yardage line with a single stroke
- Totals yardage per section and per stroke

Keyword matching is a fixed, ordered rule list: the first substring that
appears in the lower-cased line wins.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, TypeVar

from .models import Section, Stroke, WorkoutSummary, YardageMatch
from .report import render_report

logger = logging.getLogger(__name__)

E = TypeVar("E", Section, Stroke)

SECTION_RULES: Tuple[Tuple[str, Section], ...] = (
    ("warm", Section.WARMUP),
    ("pre", Section.PRESET),
    ("main", Section.MAIN_SET),
    ("pull", Section.PULL),
    ("sprint", Section.SPRINT_FINISHER),
    ("post", Section.POST_SET),
    ("cool", Section.COOLDOWN),
)

STROKE_RULES: Tuple[Tuple[str, Stroke], ...] = (
    ("back", Stroke.BACKSTROKE),
    ("breast", Stroke.BREASTSTROKE),
    ("fly", Stroke.BUTTERFLY),
    ("kick", Stroke.KICK),
    ("drill", Stroke.DRILL),
)

# Untitled practice sheets land in the main set instead of being dropped
DEFAULT_SECTION = Section.MAIN_SET
DEFAULT_STROKE = Stroke.FREESTYLE

PERCENT_PRECISION = 2

LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')
YARDAGE_PATTERN = re.compile(r'(\d+)\s*[xX]\s*(\d+)')  # "8x50", "16 x 25", "2 X 100"

NO_YARDAGE_TIP = (
    "No rep x distance sets were found; write sets like 8x50 so the "
    "yardage can be counted."
)


def split_lines(text: str) -> List[str]:
    """Split on any line ending and drop lines that are blank once trimmed."""
    if not text:
        return []
    return [line.strip() for line in LINE_BREAK_PATTERN.split(text) if line.strip()]


def _first_rule_match(line: str, rules: Iterable[Tuple[str, E]]) -> Optional[E]:
    lowered = line.lower()
    for keyword, category in rules:
        if keyword in lowered:
            return category
    return None


def classify_section(line: str) -> Optional[Section]:
    """Return the section a header keyword names, or None for a non-header line."""
    return _first_rule_match(line, SECTION_RULES)


def classify_stroke(line: str) -> Stroke:
    return _first_rule_match(line, STROKE_RULES) or DEFAULT_STROKE


def extract_yardage(line: str) -> Optional[YardageMatch]:
    """Find the first rep x distance pattern on a line."""
    match = YARDAGE_PATTERN.search(line)
    if not match:
        return None
    return YardageMatch(
        reps=int(match.group(1)),
        distance=int(match.group(2)),
        text=match.group(0),
    )


def compute_percentages(totals: Dict[E, int], total_yards: int) -> Dict[str, float]:
    """Share of total yardage per category; zero entries are left out."""
    if total_yards <= 0:
        return {}
    return {
        category.value: round(yards / total_yards, PERCENT_PRECISION)
        for category, yards in totals.items()
        if yards > 0
    }


def find_dominant(totals: Dict[E, int], order: Iterable[E]) -> Optional[E]:
    """Largest accumulator; ties go to whichever comes first in `order`."""
    best: Optional[E] = None
    for category in order:
        yards = totals.get(category, 0)
        if yards > 0 and (best is None or yards > totals[best]):
            best = category
    return best


def stroke_short_name(stroke: Stroke) -> str:
    name = stroke.value.lower()
    if name.endswith("stroke"):
        name = name[: -len("stroke")]
    return name


def build_tip(section: Optional[Section], stroke: Optional[Stroke]) -> str:
    if section is None or stroke is None:
        return NO_YARDAGE_TIP
    return (
        f"Most of this practice is in the {section.value.lower()}, mostly "
        f"{stroke_short_name(stroke)}; hold your {stroke_short_name(stroke)} "
        f"technique together as the yardage adds up."
    )


@dataclass
class SectionState:
    """Accumulator and recorded lines for one section name"""
    yards: int = 0
    lines: List[str] = field(default_factory=list)


class SectionTracker:
    """
    Running section state machine.

    Lines are buffered for the active section and flushed into that
    section's recorded lines whenever a header switches sections, and once
    more when the input ends. Sections are keyed by name, so a section that
    comes back later keeps accumulating into the same bucket.
    """

    def __init__(self, initial: Section = DEFAULT_SECTION):
        self.current = initial
        self.sections: Dict[Section, SectionState] = {s: SectionState() for s in Section}
        self.encounter_order: List[Section] = []
        self._pending: List[str] = []

    def observe(self, line: str) -> bool:
        """Switch sections if the line is a header. Returns True for headers."""
        section = classify_section(line)
        if section is None:
            return False
        self.flush()
        if section != self.current:
            logger.debug(f"Section {self.current.value} -> {section.value}")
        self.current = section
        return True

    def buffer(self, line: str) -> None:
        self._pending.append(line)

    def add_yards(self, yards: int) -> None:
        self.sections[self.current].yards += yards

    def flush(self) -> None:
        if not self._pending:
            return
        if self.current not in self.encounter_order:
            self.encounter_order.append(self.current)
        self.sections[self.current].lines.extend(self._pending)
        self._pending = []

    def yards_by_section(self) -> Dict[Section, int]:
        return {section: state.yards for section, state in self.sections.items()}

    def lines_by_section(self) -> Dict[str, List[str]]:
        return {
            section.value: list(self.sections[section].lines)
            for section in self.encounter_order
        }


class SwimWorkoutParser:
    """Deterministic, single-pass parser for swim practice text"""

    def parse(self, text: str) -> WorkoutSummary:
        tracker = SectionTracker()
        stroke_totals: Dict[Stroke, int] = {stroke: 0 for stroke in Stroke}
        total_yards = 0
        set_count = 0

        for line in split_lines(text):
            # Headers land in the section they open
            tracker.observe(line)
            tracker.buffer(line)

            match = extract_yardage(line)
            if match is None:
                continue

            tracker.add_yards(match.yards)
            stroke_totals[classify_stroke(line)] += match.yards
            total_yards += match.yards
            set_count += 1

        tracker.flush()

        section_totals = tracker.yards_by_section()
        dominant_section = find_dominant(section_totals, Section)
        dominant_stroke = find_dominant(stroke_totals, Stroke)

        summary = WorkoutSummary(
            total_yards=total_yards,
            set_count=set_count,
            section_yards={s.value: y for s, y in section_totals.items() if y > 0},
            section_percentages=compute_percentages(section_totals, total_yards),
            stroke_yards={s.value: y for s, y in stroke_totals.items() if y > 0},
            stroke_percentages=compute_percentages(stroke_totals, total_yards),
            section_lines=tracker.lines_by_section(),
            dominant_section=dominant_section.value if dominant_section else None,
            dominant_stroke=dominant_stroke.value if dominant_stroke else None,
            ai_tip=build_tip(dominant_section, dominant_stroke),
        )

        logger.debug(
            f"Parsed {set_count} yardage lines, {total_yards} yds across "
            f"{len(summary.section_yards)} sections"
        )

        return summary.model_copy(update={"ai_summary": render_report(summary)})


def parse_workout(text: str) -> WorkoutSummary:
    """Module-level shortcut for SwimWorkoutParser().parse()."""
    return SwimWorkoutParser().parse(text)
