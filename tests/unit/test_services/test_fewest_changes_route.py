"""
Unit tests for FewestChangesRouteFinder.
"""

import pytest

from metrolink.core.exceptions import StationNotFound
from metrolink.core.models.route import NoRoute, RouteCriterion
from metrolink.core.services.network_graph import NetworkGraph
from metrolink.core.services.fastest_route import FastestRouteFinder
from metrolink.core.services.fewest_changes_route import FewestChangesRouteFinder


@pytest.fixture
def finder():
    return FewestChangesRouteFinder()


class TestFewestChangesRoute:
    """Test the (changes, time) objective on small fixed networks."""

    def test_abc_route_stays_on_one_line(self, finder, abc_graph):
        result = finder.find_route(abc_graph, "A", "C")

        assert result.criterion == RouteCriterion.FEWEST_CHANGES
        assert result.total_changes == 0
        assert result.total_time == 10.0
        assert result.lines_used == ["Red"]

    def test_prefers_no_change_over_faster_change(self, finder, choice_graph):
        result = finder.find_route(choice_graph, "S", "T")

        assert result.total_changes == 0
        assert result.total_time == 5.0
        assert result.stations == ["S", "Z", "T"]

    def test_ties_on_changes_broken_by_time(self, finder, choice_graph):
        choice_graph.apply_delay("S", "Z", "Green", 2.0)

        result = finder.find_route(choice_graph, "S", "T")

        assert result.total_changes == 0
        assert result.total_time == 6.0
        assert result.stations == ["S", "Y", "T"]

    def test_time_includes_change_penalty(self, finder):
        graph = NetworkGraph.from_records([
            ("A", "B", "Red", 1.0),
            ("B", "C", "Blue", 1.0),
            ("C", "D", "Red", 1.0),
        ])

        result = finder.find_route(graph, "A", "D")

        assert result.total_changes == 2
        assert result.total_time == 7.0

    def test_custom_change_penalty(self):
        graph = NetworkGraph.from_records([
            ("A", "B", "Red", 1.0),
            ("B", "C", "Blue", 1.0),
        ])

        result = FewestChangesRouteFinder(change_penalty=0.5).find_route(graph, "A", "C")

        assert result.total_changes == 1
        assert result.total_time == 2.5

    def test_closed_station_reroutes(self, finder, abc_graph):
        before = finder.find_route(abc_graph, "A", "C")
        abc_graph.apply_closure("B")
        after = finder.find_route(abc_graph, "A", "C")

        assert (before.total_changes, before.total_time) == (0, 10.0)
        assert (after.total_changes, after.total_time) == (0, 20.0)
        assert after.lines_used == ["Blue"]

    def test_change_needed_to_reach_branch(self, finder, abc_graph):
        abc_graph.add_station("D")
        abc_graph.add_connection("B", "D", "Green", 1.0)

        result = finder.find_route(abc_graph, "C", "D")

        assert result.total_changes == 1
        # C-B on Blue is quicker than on Red, same number of changes
        assert result.total_time == 6.0
        assert result.lines_used == ["Blue", "Green"]

    def test_never_more_changes_than_fastest(self, finder, choice_graph):
        fastest = FastestRouteFinder().find_route(choice_graph, "S", "T")
        fewest = finder.find_route(choice_graph, "S", "T")

        assert fewest.total_changes <= len(fastest.interchange_stations)
        assert fewest.total_time >= fastest.total_time

    @pytest.mark.parametrize("spur", [
        [("C", "D", "Green", 1.0)],
        [("C", "D", "Green", 1.0), ("D", "E", "Green", 1.0)],
        [("A", "D", "Red", 0.5)],
    ])
    def test_closing_off_route_station_changes_nothing(self, finder, abc_graph, spur):
        """Closing a station that no A-C route passes through leaves the result unchanged."""
        for first, second, line, minutes in spur:
            abc_graph.add_station(first)
            abc_graph.add_station(second)
            abc_graph.add_connection(first, second, line, minutes)
        before = finder.find_route(abc_graph, "A", "C")

        abc_graph.apply_closure("D")
        after = finder.find_route(abc_graph, "A", "C")

        assert after == before
        assert "D" not in after.stations


class TestEdgeCases:
    """Test identity, closures and unknown stations."""

    def test_start_equals_end(self, finder, abc_graph):
        result = finder.find_route(abc_graph, "C", "C")

        assert result.segments == ()
        assert result.total_changes == 0
        assert result.total_time == 0.0

    def test_closed_start_gives_no_route(self, finder, abc_graph):
        abc_graph.apply_closure("A")

        outcome = finder.find_route(abc_graph, "A", "C")

        assert isinstance(outcome, NoRoute)
        assert outcome.criterion == RouteCriterion.FEWEST_CHANGES

    def test_closed_end_gives_no_route(self, finder, abc_graph):
        abc_graph.apply_closure("C")

        assert not finder.find_route(abc_graph, "A", "C")

    def test_unknown_station_raises(self, finder, abc_graph):
        with pytest.raises(StationNotFound):
            finder.find_route(abc_graph, "Nowhere", "C")

    def test_disconnected_components(self, finder):
        graph = NetworkGraph.from_records([
            ("A", "B", "Red", 1.0),
            ("C", "D", "Blue", 1.0),
        ])

        assert not finder.find_route(graph, "A", "D")


class TestOptimality:
    """Compare against exhaustive search on pseudo-random networks."""

    @pytest.mark.parametrize("seed", range(12))
    def test_matches_exhaustive_search(self, finder, make_random_graph, brute_force,
                                       recompute_time, seed):
        graph = make_random_graph(seed)
        names = graph.station_names()
        start, end = names[0], names[-1]

        outcome = finder.find_route(graph, start, end)
        costs = brute_force(graph, start, end)

        if not costs:
            assert not outcome
            return
        best_changes, best_minutes = min(costs)
        assert outcome.total_changes == best_changes
        assert outcome.total_time == pytest.approx(best_minutes)
        assert len(outcome.interchange_stations) == outcome.total_changes
        assert recompute_time(outcome, graph) == pytest.approx(outcome.total_time)

    @pytest.mark.parametrize("seed", range(8))
    def test_against_fastest(self, finder, make_random_graph, seed):
        graph = make_random_graph(seed, stations=9, connections=18, lines=("Red", "Blue", "Green", "Pink"))
        names = graph.station_names()
        fastest_finder = FastestRouteFinder()

        for end in names[1:]:
            fastest = fastest_finder.find_route(graph, names[0], end)
            fewest = finder.find_route(graph, names[0], end)

            assert bool(fastest) == bool(fewest)
            if fastest:
                assert fewest.total_changes <= len(fastest.interchange_stations)
                assert fewest.total_time >= fastest.total_time - 1e-9
