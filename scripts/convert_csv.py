"""
Convert the lng/lat columns of a CSV file between coordinate systems.
Usage:
  python scripts/convert_csv.py input.csv output.csv --from wgs84 --to gcj02
  python scripts/convert_csv.py input.csv output.csv --from bd09 --to wgs84 --lng-col x --lat-col y
"""

import argparse
import csv
import logging
import math
import sys
from pathlib import Path

# Keep imports predictable in local runs
sys.path.append(str(Path(__file__).resolve().parent.parent))

from modules.gpsconv import COORD_SYSTEMS, get_converter

logger = logging.getLogger("convert_csv")


def convert_rows(rows, converter, lng_col, lat_col):
    converted = 0
    skipped = 0
    for row in rows:
        try:
            lng = float(row[lng_col])
            lat = float(row[lat_col])
        except (KeyError, TypeError, ValueError):
            skipped += 1
            yield row
            continue
        new_lng, new_lat = converter(lng, lat)
        if not (math.isfinite(new_lng) and math.isfinite(new_lat)):
            skipped += 1
            yield row
            continue
        row[lng_col] = f"{new_lng:.8f}"
        row[lat_col] = f"{new_lat:.8f}"
        converted += 1
        yield row
    logger.info("converted=%d skipped=%d", converted, skipped)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    parser.add_argument("--from", dest="src", choices=COORD_SYSTEMS, required=True)
    parser.add_argument("--to", dest="dst", choices=COORD_SYSTEMS, required=True)
    parser.add_argument("--lng-col", default="lng")
    parser.add_argument("--lat-col", default="lat")
    parser.add_argument("--encoding", default="utf-8-sig")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    converter = get_converter(args.src, args.dst)
    with args.input.open("r", encoding=args.encoding, newline="") as src_file:
        reader = csv.DictReader(src_file)
        fieldnames = reader.fieldnames or []
        for col in (args.lng_col, args.lat_col):
            if col not in fieldnames:
                parser.error(f"column not found: {col} (available: {', '.join(fieldnames)})")
        with args.output.open("w", encoding="utf-8", newline="") as dst_file:
            writer = csv.DictWriter(dst_file, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(convert_rows(reader, converter, args.lng_col, args.lat_col))

    print(f"{args.src} -> {args.dst}: {args.output}")


if __name__ == "__main__":
    main()
