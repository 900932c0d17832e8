"""
CSV Network Loader

Builds a NetworkGraph from a ``From,To,Line,Time`` CSV file, one connection
per row.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..exceptions import GraphLoadError, InvalidWeight
from ..models.station import validate_minutes
from .network_graph import NetworkGraph

ConnectionRecord = Tuple[str, str, str, float]

EXPECTED_COLUMNS = 4


class CsvNetworkLoader:
    """Reads connection records from CSV and populates a graph."""

    def __init__(self, path: Union[str, Path], has_header: bool = True, delimiter: str = ","):
        """
        Initialize the loader.

        Args:
            path: CSV file with From, To, Line and Time columns
            has_header: Skip a leading row whose first cell is "From"
            delimiter: Field separator
        """
        self.path = Path(path)
        self.has_header = has_header
        self.delimiter = delimiter
        self.logger = logging.getLogger(__name__)

    def load(self) -> NetworkGraph:
        """
        Read the file and build the graph.

        Raises:
            GraphLoadError: if the file is missing, unreadable or malformed
        """
        self.logger.info(f"Loading network from {self.path}")
        records = self.read_records()
        graph = self.load_records(records)
        self.logger.info(
            f"Loaded {graph.size} stations and {len(graph.connections())} connections "
            f"from {self.path.name}"
        )
        return graph

    def read_records(self) -> List[ConnectionRecord]:
        if not self.path.exists():
            raise GraphLoadError("Network file not found", str(self.path))
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return list(self._parse_rows(csv.reader(f, delimiter=self.delimiter)))
        except UnicodeDecodeError as e:
            raise GraphLoadError(f"Network file is not valid UTF-8: {e}", str(self.path))
        except csv.Error as e:
            raise GraphLoadError(f"Malformed CSV: {e}", str(self.path))
        except OSError as e:
            raise GraphLoadError(f"Failed to read network file: {e}", str(self.path))

    def _parse_rows(self, rows: Iterable[List[str]]) -> Iterator[ConnectionRecord]:
        for line_number, row in enumerate(rows, start=1):
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue
            if line_number == 1 and self.has_header and cells[0].lower().startswith("from"):
                self.logger.debug(f"Skipping header row: {cells}")
                continue
            yield self.parse_row(cells, line_number)

    def parse_row(self, cells: List[str], line_number: Optional[int] = None) -> ConnectionRecord:
        """Convert one row of cells into a connection record."""
        source = str(self.path)
        if len(cells) < EXPECTED_COLUMNS:
            raise GraphLoadError(
                f"Expected {EXPECTED_COLUMNS} columns, got {len(cells)}", source, line_number
            )
        from_station, to_station, line, raw_time = cells[:EXPECTED_COLUMNS]
        if not from_station or not to_station or not line:
            raise GraphLoadError("Station and line names cannot be empty", source, line_number)
        try:
            minutes = validate_minutes(raw_time)
        except InvalidWeight:
            raise GraphLoadError(
                f"Invalid travel time '{raw_time}' (must be a non-negative number)",
                source, line_number
            )
        return from_station, to_station, line, minutes

    @staticmethod
    def load_records(records: Iterable[ConnectionRecord]) -> NetworkGraph:
        """Build a graph from already parsed records, creating stations on first mention."""
        return NetworkGraph.from_records(records)
