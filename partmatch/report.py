"""
Report Generator - Format results for review and downstream use.

Two artifacts per batch:
- the table: fixed-width rows for a human to eyeball
- the ledger: "<part id> <quantity>" lines for exact matches only, meant
  for machines (e.g. decrementing inventory)
"""

import csv
import io
import re
from typing import Iterable, TextIO, Union

from .models import ExactMatchRecord, MatchResult, MatchType

TABLE_HEADER = "Match Type    Part Name   Part ID   Quantity"
TABLE_SEPARATOR = "-" * 58

# Minimum column widths; values are left-aligned and padded on the right
TYPE_WIDTH = 12
NAME_WIDTH = 14
ID_WIDTH = 12

PLACEHOLDER = "-"

_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")


def _or_placeholder(value: str) -> str:
    return value if value else PLACEHOLDER


def _format_row(label: str, name: str, identifier: str, quantity: str) -> str:
    return (
        f"{label:<{TYPE_WIDTH}} "
        f"{_or_placeholder(name):<{NAME_WIDTH}} "
        f"{_or_placeholder(identifier):<{ID_WIDTH}} "
        f"{_or_placeholder(quantity)}"
    )


def table_rows(result: MatchResult) -> list[str]:
    """
    Table rows for one result.

    One row per matched entry, the mention's quantity repeated on each.
    NO_MATCH gets a single row built from the mention itself.
    """
    quantity = result.mention.quantity
    if not result.matches:
        return [
            _format_row(
                MatchType.NO_MATCH.value,
                result.mention.name,
                result.mention.identifier,
                quantity,
            )
        ]
    return [
        _format_row(result.match_type.value, entry.name, entry.identifier, quantity)
        for entry in result.matches
    ]


def format_table(results: Iterable[MatchResult]) -> str:
    """
    Format results as the fixed-width table report.

    Example:
        Match Type    Part Name   Part ID   Quantity
        ----------------------------------------------------------
        Exact        Widget A       100          3
        No Match     Gadget         -            1
    """
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for result in results:
        lines.extend(table_rows(result))
    return "\n".join(lines)


def coerce_quantity(quantity: str) -> Union[int, str]:
    """
    Quantity as an int when it is purely numeric, otherwise unchanged.

    Examples:
        "5"       -> 5
        " 12 "    -> 12
        "5 units" -> "5 units"
        ""        -> ""
    """
    if _INTEGER.match(quantity or ""):
        return int(quantity)
    return quantity


def exact_match_records(results: Iterable[MatchResult]) -> list[ExactMatchRecord]:
    """Ledger records for EXACT results, in mention order."""
    return [
        ExactMatchRecord(
            identifier=result.matches[0].identifier,
            quantity=coerce_quantity(result.mention.quantity),
        )
        for result in results
        if result.match_type == MatchType.EXACT
    ]


def format_ledger(results: Iterable[MatchResult]) -> str:
    """Exact-match ledger: one "<part id> <quantity>" line per EXACT result."""
    return "\n".join(str(record) for record in exact_match_records(results))


def export_csv(
    results: Iterable[MatchResult],
    output: TextIO | None = None,
) -> str:
    """
    Export the table rows to CSV format.

    Args:
        results: Match results to export
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow([
        "match_type",
        "part_name",
        "part_id",
        "quantity",
        "mention_name",
        "mention_id",
    ])

    for result in results:
        mention = result.mention
        if not result.matches:
            writer.writerow([
                result.match_type.value,
                mention.name,
                mention.identifier,
                mention.quantity,
                mention.name,
                mention.identifier,
            ])
            continue

        for entry in result.matches:
            writer.writerow([
                result.match_type.value,
                entry.name,
                entry.identifier,
                mention.quantity,
                mention.name,
                mention.identifier,
            ])

    csv_content = buffer.getvalue()

    if output:
        output.write(csv_content)

    return csv_content
