"""Command-line entry point: `routeclean [options] <input_source>`."""

import argparse
import contextlib
import dataclasses
import logging
import sys
from typing import List, Optional

from routeclean.config import FilterConfig
from routeclean.errors import RouteCleanError
from routeclean.metrics import calculate_removal_ratio
from routeclean.modules.route_filter.filter import RouteFilter
from routeclean.output.writers import CsvPointWriter
from routeclean.pipeline import clean_route
from routeclean.registry import default_registry

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Log to stderr so stdout stays free for the cleaned route."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def build_parser(output_formats: List[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routeclean",
        description="Remove erroneous GPS points from a recorded driving route."
    )
    parser.add_argument(
        "input_source",
        nargs="?",
        help="Input file (.csv with lat,lon,timestamp rows) or '-' for standard input."
    )
    parser.add_argument(
        "--output-format",
        default="csv",
        help=f"The output format, one of: {', '.join(output_formats)}. Default: csv."
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the cleaned route to this file instead of standard output."
    )
    parser.add_argument(
        "--errors-output",
        help="Also write the rejected points to this CSV file."
    )
    parser.add_argument(
        "--tight-angle",
        type=float,
        help="Angle (degrees) at a point below which it may be rejected."
    )
    parser.add_argument(
        "--speed-limit",
        type=float,
        help="Speed (km/h) above which a point at a tight angle is rejected."
    )
    parser.add_argument(
        "--exact-haversine",
        action="store_true",
        help="Use the textbook haversine formula instead of the legacy distances."
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="The input CSV starts with a lat,lon,timestamp header row."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every rejected point."
    )
    return parser


def build_config(args: argparse.Namespace) -> FilterConfig:
    """Environment settings first, then any CLI overrides on top."""
    config = FilterConfig.from_env()
    overrides = {}
    if args.tight_angle is not None:
        overrides['tight_angle_deg'] = args.tight_angle
    if args.speed_limit is not None:
        overrides['speed_limit_kmph'] = args.speed_limit
    if args.exact_haversine:
        overrides['exact_haversine'] = True
    config = dataclasses.replace(config, **overrides)
    config.validate()
    return config


def _open_output(path: Optional[str]):
    if path is None:
        return contextlib.nullcontext(sys.stdout)
    return open(path, 'w', newline='', encoding='utf-8')


def write_error_points(route_filter: RouteFilter, path: str):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = CsvPointWriter(f)
        writer.start()
        for point in route_filter.error_points:
            writer.write(point)
        writer.finish()
    logger.info("Rejected points saved to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    registry = default_registry()
    parser = build_parser(registry.output_formats)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if not args.input_source:
            raise RouteCleanError("No input source specified!")

        config = build_config(args)
        reader = registry.reader_for(args.input_source, has_header=args.header)
        writer_cls = registry.writer_class_for(args.output_format)

        with _open_output(args.output) as out:
            route_filter = clean_route(reader, writer_cls(out), RouteFilter(config))

        if args.errors_output:
            write_error_points(route_filter, args.errors_output)

    except (RouteCleanError, FileNotFoundError) as e:
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    ratio = calculate_removal_ratio(route_filter.points_in, route_filter.points_out)
    logger.info(
        "Read %d points, kept %d, removed %d (%.1f%%)",
        route_filter.points_in, route_filter.points_out,
        route_filter.points_rejected, ratio * 100
    )
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
