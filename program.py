import argparse
import logging
import sys

from graham_scan import GrahamScan, HullConfig
from points_io import generate_random_points, load_points, save_points

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the convex hull of integer points with the Graham scan."
    )
    parser.add_argument("file", nargs="?", help="point file: count on the first line, then 'x y [id]' per line")
    parser.add_argument("--random", type=int, metavar="N", help="generate N uniform random points instead of reading a file")
    parser.add_argument("--low", type=int, default=0, help="lower coordinate bound for --random")
    parser.add_argument("--high", type=int, default=1000, help="upper coordinate bound for --random")
    parser.add_argument("--seed", type=int, default=None, help="random seed for --random")
    parser.add_argument("--strict-collinear", action="store_true", help="fail when all points are collinear")
    parser.add_argument("-o", "--output", help="write the hull to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level",
    )

    args = parser.parse_args(argv)
    if (args.file is None) == (args.random is None):
        parser.error("exactly one of FILE or --random is required")
    if args.random is not None and args.low > args.high:
        parser.error("--low must not exceed --high")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = HullConfig(strict_collinear=args.strict_collinear)
    try:
        if args.random is not None:
            points = generate_random_points(args.random, args.low, args.high, seed=args.seed)
        else:
            points = load_points(args.file)
        hull = GrahamScan(config).compute_hull(points)
    except OSError as e:
        logger.error("Could not read points: %s", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 2

    logger.info("Hull of %d points has %d vertices", len(points), len(hull))
    if args.output:
        try:
            save_points(args.output, hull)
        except OSError as e:
            logger.error("Could not write hull: %s", e)
            return 1
    else:
        for p in hull:
            print(p.x, p.y)
    return 0


if __name__ == "__main__":
    sys.exit(main())
