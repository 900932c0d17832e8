"""
Service Factory

Builds the network graph and route service from application configuration.
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union

from ...managers.config_manager import ConfigData
from .csv_network_loader import CsvNetworkLoader
from .network_graph import NetworkGraph
from .route_service import RouteService


class ServiceFactory:
    """Factory for creating and caching the core service instances."""

    def __init__(self, config: Optional[ConfigData] = None,
                 network_path: Optional[Union[str, Path]] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults to ConfigData()
            network_path: Network CSV path, overrides config.network.csv_path
        """
        self.logger = logging.getLogger(__name__)
        self.config = config if config is not None else ConfigData()
        self.network_path = Path(network_path or self.config.network.csv_path)

        self._graph: Optional[NetworkGraph] = None
        self._route_service: Optional[RouteService] = None
        self._formatter = None

        self.logger.info(f"Initialized ServiceFactory with network file: {self.network_path}")

    def get_network_graph(self) -> NetworkGraph:
        """Get or load the network graph. Raises GraphLoadError on bad data."""
        if self._graph is None:
            loader = CsvNetworkLoader(
                self.network_path,
                has_header=self.config.network.has_header,
                delimiter=self.config.network.delimiter
            )
            self._graph = loader.load()
        return self._graph

    def get_route_service(self) -> RouteService:
        """Get or create the route service instance."""
        if self._route_service is None:
            self._route_service = RouteService(
                self.get_network_graph(),
                change_penalty=self.config.routing.change_penalty_minutes
            )
            self.logger.info("Created RouteService instance")
        return self._route_service

    def get_formatter(self):
        """Get or create the route formatter."""
        # Imported here: the formatters package depends on core models
        from ...formatters.route_formatter import RouteFormatter

        if self._formatter is None:
            self._formatter = RouteFormatter(self.config.display.time_decimals)
        return self._formatter

    def get_service_statistics(self) -> Dict[str, Any]:
        """Get statistics from the route service, loading the network if needed."""
        return self.get_route_service().get_network_statistics()

    def reload_network(self) -> NetworkGraph:
        """Discard the live graph, with its delays and closures, and read the file again."""
        self._graph = None
        self._route_service = None
        self.logger.info("Reloading network data")
        return self.get_network_graph()

    def shutdown(self) -> None:
        """Drop all service instances."""
        self._graph = None
        self._route_service = None
        self._formatter = None
        self.logger.info("All services shut down")


# Global service factory instance
_service_factory: Optional[ServiceFactory] = None


def get_service_factory(config: Optional[ConfigData] = None,
                        network_path: Optional[Union[str, Path]] = None) -> ServiceFactory:
    """Get the global service factory instance, creating it on first use."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory(config, network_path)

    return _service_factory


def get_route_service() -> RouteService:
    """Get the route service."""
    return get_service_factory().get_route_service()


def shutdown_services() -> None:
    """Shutdown all services and forget the global factory."""
    global _service_factory

    if _service_factory:
        _service_factory.shutdown()
    _service_factory = None
