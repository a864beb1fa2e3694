"""
CLI entry point for Part Match.

Usage:
    python -m partmatch --catalog PIM_product_name_id.csv --mentions extracted.json
    python -m partmatch --catalog pim.xlsx --mentions extracted.json --output-csv review.csv
    python -m partmatch --catalog pim.csv --mentions extracted.json --ledger-only
"""

import argparse
import logging
import sys
from pathlib import Path

from .catalog import load_catalog_file
from .index import build_index
from .matcher import match_mentions, summarize_results
from .mentions import load_mentions_file
from .models import MalformedInputError
from .report import export_csv, format_ledger, format_table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="partmatch",
        description="Part Match - Resolve extracted product mentions against the PIM catalog",
    )

    parser.add_argument(
        "--catalog",
        required=True,
        metavar="FILE",
        help="PIM export with part name and part id columns (CSV or XLSX)",
    )

    parser.add_argument(
        "--mentions",
        required=True,
        metavar="FILE",
        help="Extraction output JSON (object with a 'products' array, or the array itself)",
    )

    parser.add_argument(
        "--output-csv",
        metavar="FILE",
        help="Write the table rows to a CSV file",
    )

    parser.add_argument(
        "--ledger-only",
        action="store_true",
        help="Print only the exact-match ledger",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each tier decision",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index(load_catalog_file(args.catalog))
        mentions = load_mentions_file(args.mentions)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except MalformedInputError as e:
        print(f"Error parsing product data: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = match_mentions(mentions, index)

    if args.ledger_only:
        print(format_ledger(results))
    else:
        print(format_table(results))
        print()
        print("Exact Matches (Part ID: Quantity):")
        print(format_ledger(results))

        summary = summarize_results(results)
        print()
        print(
            f"{summary['total']} mention(s): {summary['exact']} exact, "
            f"{summary['possible']} possible, {summary['no_match']} no match"
        )

    if args.output_csv:
        output_path = Path(args.output_csv)
        with open(output_path, "w", newline="") as f:
            export_csv(results, output=f)
        if not args.ledger_only:
            print(f"\nCSV exported to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
