"""Command line entry point for the meeting point optimiser."""
import argparse
import logging
import sys
from typing import List, Optional
from pydantic import ValidationError
from app.backend.core.config import settings
from app.backend.core.exceptions import MeetingPointError
from app.backend.core.logging import setup_logging
from app.backend.schemas.meeting import MeetingPointRequest
from app.backend.services.cities import GeoNamesCityDirectory
from app.backend.services.optimiser import OptimiserService
from app.backend.services.report import format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meeting-point",
        description="Find the city minimizing total travel distance for a group meeting."
    )
    parser.add_argument("cities", nargs="*", help="Participant cities")
    parser.add_argument(
        "--dataset",
        default=settings.cities_dataset_path,
        help="GeoNames cities1000 file (default: %(default)s)"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return the exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        request = MeetingPointRequest(cities=args.cities)
    except ValidationError as e:
        print(e.errors()[0]["msg"].removeprefix("Value error, "))
        return 1

    optimiser = OptimiserService(directory=GeoNamesCityDirectory(args.dataset))
    try:
        report = optimiser.optimise(request.cities)
    except (MeetingPointError, OSError) as e:
        logger.debug("Meeting point computation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in format_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
