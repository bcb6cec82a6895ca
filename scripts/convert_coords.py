"""
Command line coordinate conversion
Usage:
  python scripts/convert_coords.py --from wgs84 --to gcj02 114.397433 22.909235
  python scripts/convert_coords.py --from bd09 --to wgs84 --precise --input points.csv
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from modules.coord_transform import COORD_SYSTEMS, get_point_converter

logger = logging.getLogger(__name__)


def read_rows(lines: Iterable[str]) -> Iterator[Tuple[float, float]]:
    """读取 lng,lat 两列的 CSV，跳过空行与无法解析的表头行"""
    for row in csv.reader(lines):
        if len(row) < 2:
            continue
        try:
            yield float(row[0]), float(row[1])
        except ValueError:
            logger.debug("跳过无法解析的行: %s", row)


def convert_rows(
    rows: Iterable[Sequence[float]],
    source: str,
    target: str,
    precise: bool = False,
) -> List[Tuple[float, float]]:
    converter = get_point_converter(source, target, precise)
    return [converter(a, b) for a, b in rows]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert coordinates between WGS84/GCJ-02/BD-09/WebMercator")
    parser.add_argument("--from", dest="source", choices=COORD_SYSTEMS, default="wgs84")
    parser.add_argument("--to", dest="target", choices=COORD_SYSTEMS, default="gcj02")
    parser.add_argument("--precise", action="store_true", help="iterative inverse for GCJ-02/BD-09 -> WGS84")
    parser.add_argument("--input", help="CSV file with lng,lat columns ('-' for stdin)")
    parser.add_argument("coords", nargs="*", type=float, help="lng lat")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input:
        if args.input == "-":
            rows = list(read_rows(sys.stdin))
        else:
            with open(args.input, newline="", encoding="utf-8") as f:
                rows = list(read_rows(f))
    elif len(args.coords) == 2:
        rows = [(args.coords[0], args.coords[1])]
    else:
        parser.error("provide either --input or exactly two coordinates: lng lat")

    writer = csv.writer(sys.stdout)
    for a, b in convert_rows(rows, args.source, args.target, args.precise):
        writer.writerow([a, b])
    return 0


if __name__ == "__main__":
    sys.exit(main())
