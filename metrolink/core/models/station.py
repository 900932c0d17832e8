"""
Station Model

Stations, the shared connection records between them, and the directed
segment views used during route finding. Stations are identified by name only.
"""

import math
from dataclasses import dataclass, field
from typing import List, Dict, Any

from ..exceptions import InvalidWeight, InvalidName


def validate_minutes(value: float, what: str = "time") -> float:
    """Return ``value`` as a float, raising InvalidWeight if it is negative or not a number."""
    try:
        minutes = float(value)
    except (TypeError, ValueError):
        raise InvalidWeight(value, what)
    if math.isnan(minutes) or minutes < 0:
        raise InvalidWeight(value, what)
    return minutes


@dataclass(frozen=True)
class Segment:
    """
    Directed view of a connection as seen from one of its endpoints.

    Segments are produced on demand by the network graph and carry the
    travel time current at the moment they were produced.
    """

    from_station: str
    to_station: str
    line: str
    time: float

    @property
    def neighbor(self) -> str:
        """Name of the station this segment leads to."""
        return self.to_station


@dataclass(eq=False)
class Connection:
    """
    Undirected, line-labelled link between two stations.

    A single record is shared by both endpoints, so a delay applied to it is
    observed identically in both directions.
    """

    station_a: str
    station_b: str
    line: str
    time: float

    def __post_init__(self):
        if not self.station_a or not self.station_b:
            raise InvalidName("Connection endpoints")
        if not self.line:
            raise InvalidName("Line name")
        self.time = validate_minutes(self.time)

    def links(self, first: str, second: str) -> bool:
        """Check whether this connection joins the two stations, in either direction."""
        return ((self.station_a == first and self.station_b == second) or
                (self.station_a == second and self.station_b == first))

    def other_end(self, station: str) -> str:
        """Get the endpoint opposite to ``station``."""
        if station == self.station_a:
            return self.station_b
        if station == self.station_b:
            return self.station_a
        raise ValueError(f"'{station}' is not an endpoint of this connection")

    def segment_from(self, station: str) -> Segment:
        """Get the directed segment leaving ``station``."""
        return Segment(station, self.other_end(station), self.line, self.time)

    def add_delay(self, minutes: float) -> None:
        """Increase the travel time by a non-negative delay."""
        self.time += validate_minutes(minutes, "delay")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from_station": self.station_a,
            "to_station": self.station_b,
            "line": self.line,
            "time": self.time
        }

    def __repr__(self) -> str:
        return (f"Connection('{self.station_a}' <-> '{self.station_b}', "
                f"line='{self.line}', time={self.time})")


@dataclass(eq=False)
class Station:
    """
    A named stop in the network.

    ``connections`` keeps insertion order and is not de-duplicated: adding the
    same pair and line twice yields two parallel connections, which is how
    express and stopping services over the same track are modelled.
    """

    name: str
    is_open: bool = True
    connections: List[Connection] = field(default_factory=list)

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.name or not self.name.strip():
            raise InvalidName("Station name")

    @property
    def segments(self) -> List[Segment]:
        """Outgoing segments in insertion order."""
        return [connection.segment_from(self.name) for connection in self.connections]

    @property
    def lines(self) -> List[str]:
        """Distinct lines serving this station, in first-seen order."""
        seen: List[str] = []
        for connection in self.connections:
            if connection.line not in seen:
                seen.append(connection.line)
        return seen

    @property
    def is_interchange(self) -> bool:
        """Check if more than one line serves this station."""
        return len(self.lines) > 1

    def serves_line(self, line_name: str) -> bool:
        """Check if this station is served by a specific line."""
        return any(connection.line == line_name for connection in self.connections)

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "name": self.name,
            "is_open": self.is_open,
            "lines": self.lines,
            "is_interchange": self.is_interchange,
            "segments": [
                {"to_station": seg.to_station, "line": seg.line, "time": seg.time}
                for seg in self.segments
            ]
        }

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"Station(name='{self.name}', {status}, connections={len(self.connections)})"
