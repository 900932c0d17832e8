"""
Global pytest configuration and fixtures.
"""

import json
import logging
import random
from typing import List, Optional, Tuple

import pytest

from metrolink.core.services.network_graph import NetworkGraph
from metrolink.core.services.route_service import RouteService

ABC_RECORDS = [
    ("A", "B", "Red", 5.0),
    ("B", "C", "Red", 5.0),
    ("B", "C", "Blue", 3.0),
    ("A", "C", "Blue", 20.0),
]

SAMPLE_CSV = """From,To,Line,Time
A,B,Red,5.0
B,C,Red,5.0
B,C,Blue,3.0
A,C,Blue,20.0
"""


@pytest.fixture
def abc_graph():
    """Three stations: A-B Red 5, B-C Red 5, B-C Blue 3, A-C Blue 20."""
    return NetworkGraph.from_records(ABC_RECORDS)


@pytest.fixture
def route_service(abc_graph):
    return RouteService(abc_graph)


@pytest.fixture
def choice_graph():
    """
    S to T three ways:
    via X (Red 1 then Blue 1): 4.0 min, 1 change;
    via Z (Green 2.5 + 2.5): 5.0 min, 0 changes;
    via Y (Green 3 + 3): 6.0 min, 0 changes.
    """
    return NetworkGraph.from_records([
        ("S", "X", "Red", 1.0),
        ("X", "T", "Blue", 1.0),
        ("S", "Y", "Green", 3.0),
        ("Y", "T", "Green", 3.0),
        ("S", "Z", "Green", 2.5),
        ("Z", "T", "Green", 2.5),
    ])


@pytest.fixture
def sample_csv(tmp_path):
    """The three-station network written as a CSV file."""
    path = tmp_path / "network.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def temp_config_file(tmp_path, sample_csv):
    """Provide a config file pointing at the sample network."""
    path = tmp_path / "config.json"
    config_data = {
        "network": {"csv_path": sample_csv.name, "has_header": True, "delimiter": ","},
        "routing": {"change_penalty_minutes": 2.0, "default_criterion": "both"},
        "display": {"time_decimals": 1},
        "logging": {"level": "WARNING", "log_file": None},
    }
    path.write_text(json.dumps(config_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def restore_logging():
    """Put the root logger back as it was after code that calls logging.basicConfig."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def random_records(seed: int, stations: int = 7, connections: int = 12,
                   lines: Tuple[str, ...] = ("Red", "Blue", "Green")) -> List[Tuple[str, str, str, float]]:
    """Deterministic pseudo-random network; times are whole or half minutes."""
    rng = random.Random(seed)
    names = [f"S{i}" for i in range(stations)]
    records = []
    for _ in range(connections):
        first, second = rng.sample(names, 2)
        records.append((first, second, rng.choice(lines), rng.randint(1, 20) / 2))
    return records


def brute_force_costs(graph: NetworkGraph, start: str, end: str,
                      change_penalty: float = 2.0) -> List[Tuple[int, float]]:
    """
    ``(changes, minutes)`` of every route between two stations that visits
    no station twice and avoids closed stations.
    """
    if not graph.is_open(start):
        return []
    if start == end:
        return [(0, 0.0)]

    costs = []

    def walk(station: str, line: Optional[str], changes: int, minutes: float, visited: set):
        for segment in graph.neighbors(station):
            neighbor = segment.to_station
            if neighbor in visited or not graph.is_open(neighbor):
                continue
            is_change = line is not None and line != segment.line
            next_changes = changes + (1 if is_change else 0)
            next_minutes = minutes + segment.time + (change_penalty if is_change else 0.0)
            if neighbor == end:
                costs.append((next_changes, next_minutes))
                continue
            walk(neighbor, segment.line, next_changes, next_minutes, visited | {neighbor})

    walk(start, None, 0, 0.0, {start})
    return costs


def route_time(result, graph: NetworkGraph, change_penalty: float = 2.0) -> float:
    """Recompute a route's travel time from its segments and the live graph."""
    total = 0.0
    previous_line = None
    for segment in result.segments:
        total += min(
            candidate.time for candidate in graph.neighbors(segment.from_station)
            if candidate.to_station == segment.to_station and candidate.line == segment.line
        )
        if previous_line is not None and previous_line != segment.line:
            total += change_penalty
        previous_line = segment.line
    return total


@pytest.fixture
def brute_force():
    return brute_force_costs


@pytest.fixture
def recompute_time():
    return route_time


@pytest.fixture
def make_random_graph():
    def factory(seed: int, **kwargs) -> NetworkGraph:
        return NetworkGraph.from_records(random_records(seed, **kwargs))
    return factory

