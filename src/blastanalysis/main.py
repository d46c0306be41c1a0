"""
Demonstration Driver
====================
Runs the reference scenarios against the sample P-I curves and prints the
results.

Usage:
    $ python -m blastanalysis [--debug] [--log-file PATH] [--plot]
"""
import argparse
import logging
from typing import Optional, Sequence

from blastanalysis import config
from blastanalysis.logging_config import setup_logging
from blastanalysis.model.geometry_utils import do_segments_intersect
from blastanalysis.model.pi_curve import CurveCollection, SingleCurve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blastanalysis",
        description="Check load points against pressure-impulse curves.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--plot", action="store_true", help="Plot the curve collection")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.debug else config.DEFAULT_LOG_LEVEL,
        log_file=args.log_file,
    )

    # 1. Segment crossing
    result = do_segments_intersect(*config.DEMO_SEGMENTS)
    print(f"Do the line segments intersect? {result}")

    # 2. Single curve
    single_curve = SingleCurve(config.DEMO_CURVE_1)
    print(f"Single curve intersects: {single_curve.intersects(config.DEMO_SINGLE_LOAD)}")

    # 3. Multiple curves
    multiple_curves = CurveCollection([
        SingleCurve(config.DEMO_CURVE_1),
        SingleCurve(config.DEMO_CURVE_2),
    ])
    print(f"Multiple curves intersect: {multiple_curves.intersects(config.DEMO_COLLECTION_LOAD)}")
    print(f"Multiple curves intersect count: "
          f"{multiple_curves.count_intersecting_curves(config.DEMO_COUNT_LOAD)}")

    if args.plot:
        logger.info("Plotting curve collection.")
        multiple_curves.plot(load_point=config.DEMO_COUNT_LOAD)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
