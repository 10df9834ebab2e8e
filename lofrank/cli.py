"""
Command line entry point

Ranks the points of a CSV file, or of every CSV file in a directory, by
local outlier factor and prints the ranking. When several k values are
given, the ranking is repeated for each of them and the run times are
printed before the ranking of the last k.
"""
import argparse
import logging
import sys
from pathlib import Path

from . import data_io as dio
from .processing import sweep_k, DEFAULT_SWEEP
from .reachability import DEGENERATE_POLICIES
from .scoring import DEFAULT_K

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="lofrank",
        description="Rank points in CSV files by local outlier factor.")
    parser.add_argument("path", type=Path,
                        help="CSV file with a header row, or a directory "
                             "of CSV files")
    parser.add_argument("-k", dest="ks", type=int, action="append",
                        help=f"Neighborhood size, can be repeated. "
                             f"Default: {DEFAULT_K}")
    parser.add_argument("--sweep", action="store_true",
                        help=f"Use k = {', '.join(map(str, DEFAULT_SWEEP))}")
    parser.add_argument("--id-column", default=None,
                        help="Column holding point identifiers. By default "
                             "rows are numbered from 1.")
    parser.add_argument("--precision", type=int,
                        default=dio.DEFAULT_PRECISION,
                        help="Maximum number of decimals printed")
    parser.add_argument("--on-degenerate", choices=DEGENERATE_POLICIES,
                        default="inf",
                        help="Policy for points that coincide with their "
                             "whole neighborhood")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Also write the ranking to a .csv or .xlsx "
                             "file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages")
    return parser.parse_args(argv)


def _output_path(output, name, several):
    if not several:
        return output
    return output.with_name(f"{output.stem}_{Path(name).stem}"
                            f"{output.suffix}")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s")
    ks = list(args.ks or [])
    if args.sweep:
        ks.extend(DEFAULT_SWEEP)
    if not ks:
        ks = [DEFAULT_K]
    try:
        if args.path.is_dir():
            datasets = dio.read_point_directory(args.path,
                                                id_column=args.id_column)
        else:
            datasets = {args.path.name: dio.read_points(
                args.path, id_column=args.id_column)}
        for name, points in datasets.items():
            result = sweep_k(points, ks, on_degenerate=args.on_degenerate)
            print(name)
            if len(ks) > 1:
                for k, t in result.timings.items():
                    print(f"k={k}: {t:.4f} s")
                print(f"total: {result.total:.4f} s")
            for line in dio.format_scores(result.last, args.precision):
                print(line)
            if args.output is not None:
                dio.write_scores(result.last, _output_path(
                    args.output, name, len(datasets) > 1))
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
