#!/usr/bin/env python3
"""
Print map labels for rows of a CSV file.

The input needs a header with (some of) the columns name, local_name, int_name,
name_en and optionally country_code. Empty cells count as missing names.

Example:
  python scripts/localize_names.py features.csv --mode street --loc-in-brackets
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from localized_names.localized_names import NameResolver
from localized_names.localized_names_data import RESOLUTION_MODES
from localized_names.transliteration import GeoContext, TransliterationError

NAME_COLUMNS = ("name", "local_name", "int_name", "name_en")


def _cell(row: Dict[str, str], column: str) -> Optional[str]:
    value = row.get(column)
    return value if value else None


def label_for_row(resolver: NameResolver, row: Dict[str, str], mode: str, loc_in_brackets: bool) -> Optional[str]:
    name, local_name, int_name, name_en = (_cell(row, column) for column in NAME_COLUMNS)
    geo_context = GeoContext(country_code=_cell(row, "country_code"))
    method = getattr(resolver, RESOLUTION_MODES[mode])
    if mode in ("place", "street"):
        return method(name, local_name, int_name, name_en, loc_in_brackets, geo_context)
    return method(name, local_name, int_name, name_en, geo_context)


def main() -> None:
    parser = argparse.ArgumentParser(description="Choose display names for map features.")
    parser.add_argument("csv_file", type=Path, help="CSV file with name columns")
    parser.add_argument("--mode", choices=sorted(RESOLUTION_MODES), default="place")
    parser.add_argument("--loc-in-brackets", action="store_true", help="Put the local name in brackets")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(message)s")

    resolver = NameResolver()
    failures = 0
    with args.csv_file.open(encoding="utf-8", newline="") as f:
        for line_no, row in enumerate(csv.DictReader(f), start=2):
            try:
                label = label_for_row(resolver, row, args.mode, args.loc_in_brackets)
            except TransliterationError as e:
                logging.error(f"Line {line_no}: {e}")
                failures += 1
                continue
            print("" if label is None else label)

    if failures:
        print(f"{failures} rows could not be labelled", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
