"""
Network Exceptions

Typed failures raised by the network graph, the loader and the route service.
"""


class NetworkError(Exception):
    """Base class for network-related errors."""

    pass


class StationNotFound(NetworkError):
    """Raised when a station name is not present in the network."""

    def __init__(self, station: str):
        self.station = station
        super().__init__(f"Station not found: '{station}'")


class SegmentNotFound(NetworkError):
    """Raised when no connection on the given line links two stations."""

    def __init__(self, from_station: str, to_station: str, line: str):
        self.from_station = from_station
        self.to_station = to_station
        self.line = line
        super().__init__(
            f"No {line} connection between '{from_station}' and '{to_station}'"
        )


class InvalidWeight(NetworkError):
    """Raised for a negative travel time or a negative delay."""

    def __init__(self, value: float, what: str = "time"):
        self.value = value
        super().__init__(f"Invalid {what}: {value} (must be a non-negative number)")


class StationAlreadyClosed(NetworkError):
    """Raised by the route service when closing a station that is already closed."""

    def __init__(self, station: str):
        self.station = station
        super().__init__(f"Station is already closed: '{station}'")


class GraphLoadError(NetworkError):
    """Raised when network data cannot be read or parsed."""

    def __init__(self, message: str, source: str = None, line_number: int = None):
        self.source = source
        self.line_number = line_number
        location = ""
        if source is not None:
            location = f" ({source}"
            if line_number is not None:
                location += f", line {line_number}"
            location += ")"
        super().__init__(f"{message}{location}")


class InvalidName(NetworkError, ValueError):
    """Raised for an empty station or line name."""

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"{what} cannot be empty")
