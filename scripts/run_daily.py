#!/usr/bin/env python3
"""
PVCURVE - Daily Pipeline Runner

Usage:
    python scripts/run_daily.py 2025-04-03
    python scripts/run_daily.py 2025-04-03 2025-04-04 --no-normalize
    python scripts/run_daily.py --input data/20250403.csv
"""

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from pvcurve.core.config import get_settings, load_config
from pvcurve.core.exceptions import PVCurveError
from pvcurve.pipeline.daily import DailyPipeline

# Load environment
load_dotenv(PROJECT_ROOT / ".env")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="PVCURVE - Daily PV Output Curve Shaper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/run_daily.py 2025-04-03
    python scripts/run_daily.py 2025-04-03 --passes 1 --verbose
    python scripts/run_daily.py --input /path/to/20250403.csv --output charts/

Source files are read from $PVCURVE_DATA_DIR/YYYYMMDD.csv.
        """,
    )

    parser.add_argument(
        "dates",
        nargs="*",
        help="Day(s) to process (YYYY-MM-DD format, defaults to today)",
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        default=None,
        help="Explicit telemetry CSV (instead of the dated file)",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output directory for charts and curve documents",
    )

    parser.add_argument(
        "--passes",
        type=int,
        default=None,
        help="Number of smoothing passes (overrides config)",
    )

    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Stop after interpolation (chart in hours)",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't write chart or curve document",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    settings = get_settings()

    # Setup logging
    setup_logging("DEBUG" if args.verbose else settings.log_level)
    logger = logging.getLogger(__name__)

    # Parse dates
    days: list[date | None] = []
    for raw in args.dates:
        try:
            days.append(datetime.strptime(raw, "%Y-%m-%d").date())
        except ValueError:
            logger.error(f"Invalid date format: {raw}. Use YYYY-MM-DD.")
            return 1

    if args.input and len(days) > 1:
        logger.error("--input processes a single file; pass at most one date")
        return 1
    if not days:
        days = [None] if args.input else [date.today()]

    # Initialize pipeline
    try:
        config = load_config("pipeline").with_overrides(
            smoothing_passes=args.passes,
            normalize=False if args.no_normalize else None,
        )
        pipeline = DailyPipeline(settings=settings, config=config)
    except PVCurveError as e:
        logger.error(f"Failed to initialize pipeline: {e}")
        logger.error(f"Make sure {settings.config_dir / 'pipeline.yaml'} exists")
        return 1

    output_dir = Path(args.output) if args.output else None
    failed = 0

    for day in days:
        label = day.isoformat() if day else args.input
        logger.info(f"--- Processing {label} ---")

        try:
            result = pipeline.run(day, source=args.input)

            if not args.no_save:
                chart_path, curve_path = pipeline.save_result(result, output_dir)
                print(f"{result.day}: {len(result.points)} points -> {chart_path}, {curve_path}")
            else:
                print(f"{result.day}: {len(result.points)} points")

        except PVCurveError as e:
            logger.error(f"Failed to process {label}: {e}")
            failed += 1
            continue

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
