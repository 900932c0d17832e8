"""
Integration tests against the bundled tram network file.

Loads data/metrolink_times_linecolour.csv through the service factory and
checks journeys whose times can be worked out by hand from the file.
"""

from pathlib import Path

import pytest

from metrolink.core.exceptions import StationNotFound
from metrolink.core.services.service_factory import ServiceFactory

NETWORK_FILE = Path(__file__).resolve().parents[2] / "data" / "metrolink_times_linecolour.csv"


@pytest.fixture
def factory():
    return ServiceFactory(network_path=NETWORK_FILE)


@pytest.fixture
def service(factory):
    return factory.get_route_service()


class TestBundledNetwork:
    """Test loading the bundled network."""

    def test_network_loads(self, factory):
        stats = factory.get_service_statistics()

        assert stats["stations"] == 42
        assert stats["connections"] == 51
        assert stats["lines"] == ["Blue", "Green", "Pink", "Purple", "Yellow"]
        assert stats["closed_stations"] == []

    def test_interchanges(self, factory):
        graph = factory.get_network_graph()

        assert graph.get_station("Cornbrook").is_interchange
        assert graph.get_station("Piccadilly Gardens").lines == ["Purple", "Blue", "Pink"]
        assert not graph.get_station("Altrincham").is_interchange


class TestJourneys:
    """Test journeys across the bundled network."""

    def test_single_line_journey(self, service):
        fastest = service.compute_fastest("Altrincham", "Piccadilly")
        fewest = service.compute_fewest_changes("Altrincham", "Piccadilly")

        assert fastest.total_time == 30.0
        assert fastest.lines_used == ["Purple"]
        assert (fewest.total_changes, fewest.total_time) == (0, 30.0)

    def test_journey_with_one_change(self, service):
        result = service.compute_fewest_changes("Eccles", "Droylsden")

        assert result.total_changes == 1
        assert result.total_time == 43.0
        assert result.lines_used == ["Blue", "Yellow"]
        assert result.interchange_stations == ["Piccadilly"]
        assert service.compute_fastest("Eccles", "Droylsden").total_time == 43.0

    def test_reverse_journey(self, service):
        assert service.compute_fastest("Droylsden", "Eccles").total_time == 43.0

    def test_closure_cuts_off_east(self, service):
        service.close_station("Piccadilly Gardens")

        assert not service.compute_fastest("Eccles", "Droylsden")
        assert not service.compute_fewest_changes("Eccles", "Droylsden")

    def test_delay_splits_objectives(self, service):
        service.apply_delay("Piccadilly Gardens", "Piccadilly", "Purple", 5.0)

        fastest = service.compute_fastest("Altrincham", "Piccadilly")
        fewest = service.compute_fewest_changes("Altrincham", "Piccadilly")

        assert fastest.total_time == 32.0
        assert len(fastest.interchange_stations) == 1
        assert fastest.lines_used[0] == "Purple"
        assert (fewest.total_changes, fewest.total_time) == (0, 35.0)
        assert fewest.lines_used == ["Purple"]

    def test_closed_destination_rejected_by_validation(self, service):
        service.close_station("Crumpsall")

        assert service.validate_endpoints("Victoria", "Crumpsall") == [
            "The end station is closed: 'Crumpsall'"
        ]
        assert not service.compute_fastest("Victoria", "Crumpsall")

    def test_misspelt_station(self, service):
        with pytest.raises(StationNotFound):
            service.compute_fastest("Piccadily", "Victoria")

    def test_reload_clears_updates(self, factory):
        factory.get_route_service().close_station("Piccadilly Gardens")

        factory.reload_network()

        assert factory.get_route_service().compute_fastest("Eccles", "Droylsden").total_time == 43.0
