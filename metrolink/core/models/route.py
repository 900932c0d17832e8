"""
Route Model

Result types returned by the route finders. A found route is a RouteResult;
an exhausted search yields a NoRoute value rather than an exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Dict, Any, Tuple, Union


class RouteCriterion(Enum):
    """Optimisation objective of a route query."""
    FASTEST = "fastest"
    FEWEST_CHANGES = "fewest_changes"


@dataclass(frozen=True)
class RouteSegment:
    """Represents one hop of a route between two adjacent stations."""

    from_station: str
    to_station: str
    line: str

    def __post_init__(self):
        """Validate route segment data."""
        if not self.from_station or not self.to_station:
            raise ValueError("From and to stations cannot be empty")
        if not self.line:
            raise ValueError("Line name cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.from_station, "to": self.to_station, "line": self.line}


@dataclass(frozen=True)
class RouteResult:
    """
    A route found between two stations.

    ``segments`` is ordered from start to end. ``total_time`` includes the
    change penalties. ``total_changes`` is only set by the fewest-changes
    search; the fastest search leaves it as None. Change boundaries are not
    stored, they are derived by comparing the lines of adjacent segments.
    """

    start: str
    end: str
    segments: Tuple[RouteSegment, ...]
    total_time: float
    criterion: RouteCriterion = RouteCriterion.FASTEST
    total_changes: Optional[int] = None

    def __post_init__(self):
        """Validate route data."""
        if not self.start or not self.end:
            raise ValueError("Start and end stations cannot be empty")
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, 'segments', tuple(self.segments))
        if self.total_time < 0:
            raise ValueError("Total time cannot be negative")
        if self.total_changes is not None and self.total_changes < 0:
            raise ValueError("Total changes cannot be negative")

    @property
    def found(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True

    @property
    def stations(self) -> List[str]:
        """Every station visited, start and end included."""
        if not self.segments:
            return [self.start]
        return [self.segments[0].from_station] + [seg.to_station for seg in self.segments]

    @property
    def lines_used(self) -> List[str]:
        """Lines ridden in travel order, consecutive repeats collapsed."""
        lines: List[str] = []
        for segment in self.segments:
            if not lines or lines[-1] != segment.line:
                lines.append(segment.line)
        return lines

    @property
    def interchange_stations(self) -> List[str]:
        """Stations where the line differs between the arriving and departing segment."""
        return [
            current.to_station
            for current, following in zip(self.segments, self.segments[1:])
            if current.line != following.line
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        data = {
            "start": self.start,
            "end": self.end,
            "criterion": self.criterion.value,
            "segments": [segment.to_dict() for segment in self.segments],
            "total_time": self.total_time,
        }
        if self.total_changes is not None:
            data["total_changes"] = self.total_changes
        return data

    def __str__(self) -> str:
        return f"{self.start} -> {self.end} ({self.total_time} min, {len(self.segments)} segments)"


@dataclass(frozen=True)
class NoRoute:
    """Outcome of a search that exhausted every reachable state without settling the end."""

    start: str
    end: str
    criterion: RouteCriterion = RouteCriterion.FASTEST

    @property
    def found(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "criterion": self.criterion.value, "found": False}

    def __str__(self) -> str:
        return f"No route from {self.start} to {self.end}"


RouteOutcome = Union[RouteResult, NoRoute]
