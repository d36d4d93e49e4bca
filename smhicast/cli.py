"""CLI entry point: fetch the SMHI point forecast and print the console report."""

import argparse
import logging
import sys

from smhicast.config.loader import (
    dump_config,
    get_config_value,
    load_config,
    override_location,
)
from smhicast.ingest.decoder import decode_series
from smhicast.ingest.smhi_client import SmhiClient
from smhicast.models.errors import EmptySeriesError, FeedDecodeError, SmhiClientError
from smhicast.reporting.renderer import render_report

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="smhicast",
        description="SMHI point forecast in the terminal",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--lat", type=float, default=None, help="Latitude override")
    parser.add_argument("--lon", type=float, default=None, help="Longitude override")
    parser.add_argument("--name", default=None, help="Location name override")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("report", help="Print the forecast report (default)")
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. location.latitude")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = load_config(args.config)
    config = override_location(config, args.lat, args.lon, args.name)

    if args.command == "config":
        if args.config_command == "show":
            print(dump_config(config), end="")
            return 0
        if args.config_command == "get":
            return _cmd_config_get(config, args.key)
        config_p.print_help()
        return 1
    return _cmd_report(config)


def _cmd_config_get(config, key: str) -> int:
    try:
        value = get_config_value(config, key)
    except KeyError as e:
        logger.error("%s", e.args[0])
        return 1
    print(value)
    return 0


def _cmd_report(config) -> int:
    client = SmhiClient(
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout_seconds,
    )
    loc = config.location
    try:
        raw = client.get_point_forecast(loc.latitude, loc.longitude)
        series = decode_series(raw)
        if series.approved_time is not None:
            logger.debug("Forecast approved at %s", series.approved_time.isoformat())
        report = render_report(series, loc.name)
    except SmhiClientError as e:
        logger.error("Error fetching weather: %s", e)
        return 1
    except FeedDecodeError as e:
        logger.error("Malformed forecast response: %s", e)
        return 1
    except EmptySeriesError:
        logger.error("No forecast data available for %s", loc.name)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
