"""
Main entry point for the Metrolink router.

This module sets up logging, loads the configuration and the network, applies
any delays and closures given on the command line, and prints the requested
routes.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from metrolink.core.exceptions import NetworkError
from metrolink.core.models.route import RouteCriterion
from metrolink.core.services.service_factory import ServiceFactory
from metrolink.managers.config_manager import ConfigManager, ConfigurationError, LoggingConfig
from version import get_version_string

CRITERIA = {
    "fastest": [RouteCriterion.FASTEST],
    "fewest": [RouteCriterion.FEWEST_CHANGES],
    "fewest_changes": [RouteCriterion.FEWEST_CHANGES],
    "both": [RouteCriterion.FASTEST, RouteCriterion.FEWEST_CHANGES],
}


def setup_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Setup application logging with console and optional file output."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metrolink",
        description="Find the fastest or fewest-changes route across the tram network.",
    )
    parser.add_argument("--version", action="version", version=get_version_string())
    parser.add_argument("--config", help="Path to config.json (default: user config directory)")
    parser.add_argument("--network", help="Network CSV file, overrides the configured path")
    parser.add_argument("--from", dest="start", metavar="STATION", help="Start station")
    parser.add_argument("--to", dest="end", metavar="STATION", help="Destination station")
    parser.add_argument(
        "--criterion",
        choices=sorted(CRITERIA),
        help="Route objective (default: routing.default_criterion from config)",
    )
    parser.add_argument(
        "--delay",
        nargs=4,
        action="append",
        default=[],
        metavar=("STATION_A", "STATION_B", "LINE", "MINUTES"),
        help="Add a delay to a connection before routing (repeatable)",
    )
    parser.add_argument(
        "--close",
        action="append",
        default=[],
        metavar="STATION",
        help="Close a station before routing (repeatable)",
    )
    parser.add_argument("--list-stations", action="store_true", help="List stations and exit")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line. Returns the process exit code."""
    logger = logging.getLogger(__name__)

    try:
        config_manager = ConfigManager(args.config)
        config = config_manager.load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging, args.verbose)
    logger.info(f"Starting {get_version_string()}")

    network_path = args.network or config_manager.resolve_network_path()
    factory = ServiceFactory(config, network_path)

    try:
        service = factory.get_route_service()

        for station_a, station_b, line, minutes in args.delay:
            try:
                delay = float(minutes)
            except ValueError:
                print(f"Delay must be a valid number: '{minutes}'", file=sys.stderr)
                return 1
            service.apply_delay(station_a, station_b, line, delay)

        for station in args.close:
            service.close_station(station)
    except NetworkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_stations:
        for station in service.graph.stations():
            status = "" if station.is_open else " (closed)"
            print(f"{station.name}{status}")
        return 0

    problems = service.validate_endpoints(args.start, args.end)
    if problems:
        print(factory.get_formatter().format_errors(problems), file=sys.stderr)
        return 1

    criterion = args.criterion or config.routing.default_criterion
    outcomes = [service.compute_route(args.start, args.end, c) for c in CRITERIA[criterion]]

    if args.json:
        print(json.dumps([outcome.to_dict() for outcome in outcomes], indent=2))
    else:
        formatter = factory.get_formatter()
        print("\n\n".join(formatter.format(outcome) for outcome in outcomes))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.list_stations and (not args.start or not args.end):
        parser.error("--from and --to are required unless --list-stations is given")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
