"""Plain-text rendering of a WorkoutSummary."""

from typing import Dict, List

from .models import WorkoutSummary

INDENT = "  "
NAME_WIDTH = 18


def _percent(yards: int, total_yards: int) -> float:
    if total_yards <= 0:
        return 0.0
    return yards * 100 / total_yards


def _table(title: str, heading: str, yards_by_name: Dict[str, int], total_yards: int) -> List[str]:
    lines = [title.upper(), f"{INDENT}{heading:<{NAME_WIDTH}}{'Yards':>7}{'%':>8}"]
    if not yards_by_name:
        lines.append(f"{INDENT}(no yardage found)")
        return lines
    for name, yards in yards_by_name.items():
        lines.append(
            f"{INDENT}{name:<{NAME_WIDTH}}{yards:>7}{_percent(yards, total_yards):>7.1f}%"
        )
    return lines


def render_report(summary: WorkoutSummary) -> str:
    """
    Render the multi-block text report.

    One block per section that recorded lines, in the order the sections
    were first seen, then totals, the section and stroke tables and the tip.
    """
    blocks: List[List[str]] = []

    for section, raw_lines in summary.section_lines.items():
        block = [section.upper()]
        block.extend(f"{INDENT}{line}" for line in raw_lines)
        block.append(f"{INDENT}Section total: {summary.section_yards.get(section, 0)} yds")
        blocks.append(block)

    blocks.append([
        "TOTALS",
        f"{INDENT}Total yardage: {summary.total_yards} yds",
        f"{INDENT}Sets with yardage: {summary.set_count}",
        f"{INDENT}Sections: {len(summary.section_yards)}",
    ])
    blocks.append(_table("Section summary", "Section", summary.section_yards, summary.total_yards))
    blocks.append(_table("Stroke mix", "Stroke", summary.stroke_yards, summary.total_yards))
    blocks.append([f"Tip: {summary.ai_tip}"])

    return "\n\n".join("\n".join(block) for block in blocks)
