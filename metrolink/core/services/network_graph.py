"""
Network Graph

Owns the stations of the network and the connections between them, and
applies live delays and closures.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Iterable, Iterator, Tuple

from ..exceptions import StationNotFound, SegmentNotFound
from ..models.station import Station, Connection, Segment, validate_minutes
from ...utils.rw_lock import ReadWriteLock


class NetworkGraph:
    """
    Arena of stations keyed by name.

    Every connection is stored once and listed by both of its endpoints, so the
    two directions of travel always share one travel time. Mutations take the
    write side of ``lock``; callers running a search hold the read side for the
    duration of the query so that a delay is never observed half-applied.
    """

    def __init__(self):
        self._stations: Dict[str, Station] = {}
        self._connections: List[Connection] = []
        # (station, line) -> connections touching that station on that line
        self._line_index: Dict[Tuple[str, str], List[Connection]] = defaultdict(list)
        self.lock = ReadWriteLock()

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, str, str, float]]) -> 'NetworkGraph':
        """
        Build a graph from ``(from_station, to_station, line, minutes)`` records.

        Stations are created on first mention.
        """
        graph = cls()
        for from_station, to_station, line, minutes in records:
            graph.add_station(from_station)
            graph.add_station(to_station)
            graph.add_connection(from_station, to_station, line, minutes)
        return graph

    # Lookup

    def find_station(self, name: str) -> Optional[Station]:
        """Get the station with this name, or None."""
        return self._stations.get(name)

    def get_station(self, name: str) -> Station:
        """Get the station with this name, raising StationNotFound if absent."""
        station = self._stations.get(name)
        if station is None:
            raise StationNotFound(name)
        return station

    def has_station(self, name: str) -> bool:
        return name in self._stations

    def __contains__(self, name: str) -> bool:
        return name in self._stations

    def __len__(self) -> int:
        return len(self._stations)

    @property
    def size(self) -> int:
        """Number of stations in the network."""
        return len(self._stations)

    def is_open(self, name: str) -> bool:
        return self.get_station(name).is_open

    def station_names(self) -> List[str]:
        """Station names in insertion order."""
        return list(self._stations)

    def stations(self) -> List[Station]:
        return list(self._stations.values())

    def connections(self) -> List[Connection]:
        return list(self._connections)

    def is_connected(self, first: str, second: str, line: str) -> bool:
        """Check whether a connection on ``line`` joins the two stations, in either direction."""
        return any(
            connection.links(first, second)
            for connection in self._line_index.get((first, line), ())
        )

    def neighbors(self, name: str) -> Iterator[Segment]:
        """
        Iterate over the outgoing segments of a station.

        The station is checked immediately; segments are produced lazily in
        insertion order with the travel time current at iteration.
        """
        station = self.get_station(name)
        return (connection.segment_from(name) for connection in station.connections)

    def travel_time(self, first: str, second: str, line: str) -> float:
        """Get the travel time of the first connection on ``line`` between two stations."""
        self.get_station(first)
        self.get_station(second)
        for connection in self._line_index.get((first, line), ()):
            if connection.links(first, second):
                return connection.time
        raise SegmentNotFound(first, second, line)

    # Mutation

    def add_station(self, name: str) -> Station:
        """
        Add an open station with no connections. Returns the existing station if present.

        Raises:
            InvalidName: if ``name`` is empty
        """
        with self.lock.write_locked():
            station = self._stations.get(name)
            if station is None:
                station = Station(name)
                self._stations[name] = station
            return station

    def add_connection(self, first: str, second: str, line: str, time: float) -> Connection:
        """
        Connect two existing stations on ``line`` with a travel time in minutes.

        Repeated calls for the same pair and line add parallel connections.

        Raises:
            StationNotFound: if either station is missing
            InvalidWeight: if ``time`` is negative
            InvalidName: if ``line`` is empty
        """
        with self.lock.write_locked():
            station_a = self.get_station(first)
            station_b = self.get_station(second)
            connection = Connection(first, second, line, time)

            self._connections.append(connection)
            station_a.connections.append(connection)
            self._line_index[(first, line)].append(connection)
            station_b.connections.append(connection)
            self._line_index[(second, line)].append(connection)
            return connection

    def apply_delay(self, first: str, second: str, line: str, minutes: float) -> List[Connection]:
        """
        Add a delay to every connection on ``line`` between the two stations.

        Both directions of travel see the new time at once.

        Returns:
            The delayed connections

        Raises:
            InvalidWeight: if ``minutes`` is negative
            StationNotFound: if either station is missing
            SegmentNotFound: if no such connection exists
        """
        delay = validate_minutes(minutes, "delay")
        with self.lock.write_locked():
            self.get_station(first)
            self.get_station(second)
            matching = [
                connection for connection in self._line_index.get((first, line), ())
                if connection.links(first, second)
            ]
            if not matching:
                raise SegmentNotFound(first, second, line)
            # A connection from a station to itself is indexed twice
            delayed: List[Connection] = []
            for connection in matching:
                if not any(connection is seen for seen in delayed):
                    connection.add_delay(delay)
                    delayed.append(connection)
            return delayed

    def apply_closure(self, name: str) -> bool:
        """
        Close a station. Closing an already closed station is accepted.

        Returns:
            True if the station was open before this call
        """
        with self.lock.write_locked():
            station = self.get_station(name)
            was_open = station.is_open
            station.is_open = False
            return was_open

    def reopen_station(self, name: str) -> bool:
        """
        Open a station again after a closure.

        Returns:
            True if the station was closed before this call
        """
        with self.lock.write_locked():
            station = self.get_station(name)
            was_closed = not station.is_open
            station.is_open = True
            return was_closed

    def remove_connection(self, first: str, second: str) -> bool:
        """
        Remove the first connection found between two stations, on any line.

        Returns:
            True if a connection was removed, False if none existed
        """
        with self.lock.write_locked():
            station_a = self.get_station(first)
            station_b = self.get_station(second)
            for connection in station_a.connections:
                if connection.links(first, second):
                    break
            else:
                return False

            self._connections.remove(connection)
            self._discard(station_a.connections, connection)
            self._discard(station_b.connections, connection)
            self._discard(self._line_index[(first, connection.line)], connection)
            self._discard(self._line_index[(second, connection.line)], connection)
            return True

    @staticmethod
    def _discard(connections: List[Connection], connection: Connection) -> None:
        for index, candidate in enumerate(connections):
            if candidate is connection:
                del connections[index]
                return

    # Inspection

    def segment_count(self) -> int:
        """Number of directed segments, two per connection."""
        return sum(len(station.connections) for station in self._stations.values())

    def describe(self) -> List[str]:
        """One line per directed segment, grouped by station."""
        lines = []
        for station in self._stations.values():
            for segment in station.segments:
                lines.append(
                    f"[{segment.from_station} to {segment.to_station}, "
                    f"{segment.line}, {segment.time} min]"
                )
        return lines

    def __repr__(self) -> str:
        return f"NetworkGraph(stations={len(self._stations)}, connections={len(self._connections)})"
