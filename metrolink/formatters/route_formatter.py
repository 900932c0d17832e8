"""
Route Formatter

Renders route results as plain text: one line per station with the line
being ridden, a marker at every change of line, and the overall totals.
"""

import logging
from typing import List, NamedTuple

from ..core.models.route import RouteResult, NoRoute, RouteCriterion, RouteOutcome

HEADINGS = {
    RouteCriterion.FASTEST: "*** Shortest Time Route ***",
    RouteCriterion.FEWEST_CHANGES: "*** Fewest Changes Route ***",
}


class ChangePoint(NamedTuple):
    """A station where the route leaves one line for another."""
    station: str
    from_line: str
    to_line: str


class RouteFormatter:
    """Formats route outcomes for text display."""

    def __init__(self, time_decimals: int = 1):
        """
        Initialize the route formatter.

        Args:
            time_decimals: Decimal places shown for journey times
        """
        self.time_decimals = time_decimals
        self.logger = logging.getLogger(__name__)

    def change_points(self, result: RouteResult) -> List[ChangePoint]:
        """Find every boundary where adjacent segments use different lines."""
        return [
            ChangePoint(current.to_station, current.line, following.line)
            for current, following in zip(result.segments, result.segments[1:])
            if current.line != following.line
        ]

    def format_time(self, minutes: float) -> str:
        return f"{minutes:.{self.time_decimals}f}"

    def format(self, outcome: RouteOutcome) -> str:
        """Render a RouteResult or NoRoute as multi-line text."""
        if isinstance(outcome, NoRoute):
            return f"No path found between {outcome.start} and {outcome.end}."
        return "\n".join(self.format_lines(outcome))

    def format_lines(self, result: RouteResult) -> List[str]:
        lines = [HEADINGS[result.criterion]]

        if not result.segments:
            lines.append(f"{result.start} (already at destination)")

        previous_line = None
        for segment in result.segments:
            if previous_line is not None and previous_line != segment.line:
                lines.append(f"{segment.from_station} on the {previous_line} line")
                lines.append(f"** Change to the {segment.line} line at {segment.from_station} **")
            lines.append(f"{segment.from_station} on the {segment.line} line")
            previous_line = segment.line

        if result.segments:
            last = result.segments[-1]
            lines.append(f"{last.to_station} on the {last.line} line")

        if result.total_changes is not None:
            lines.append(f"Overall Changes = {result.total_changes}")
        lines.append(f"Overall Journey Time (mins) = {self.format_time(result.total_time)}")
        return lines

    def format_summary(self, outcome: RouteOutcome) -> str:
        """One-line summary such as ``A -> C: 10.0 min, 1 change(s) via Red, Blue``."""
        if not outcome:
            return f"{outcome.start} -> {outcome.end}: no route"
        changes = len(self.change_points(outcome))
        lines = ", ".join(outcome.lines_used) or "no travel"
        return (f"{outcome.start} -> {outcome.end}: {self.format_time(outcome.total_time)} min, "
                f"{changes} change(s) via {lines}")

    @staticmethod
    def format_errors(problems: List[str]) -> str:
        return "\n".join(problems)
