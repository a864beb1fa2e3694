"""
Catalog Loader - Parse PIM part exports into CatalogEntries.

The PIM export is the source of truth for "which parts exist." It is a
two-column delimited file (part name, part id) with a header row. Bad rows
are never fatal: a row without a comma becomes an entry with an empty
identifier so one broken line cannot take down the whole load.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from openpyxl import load_workbook

from .models import CatalogEntry

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\r\n]")

TEXT_SUFFIXES = {".csv", ".txt"}
WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}


def _clean_identifier(value: Optional[str]) -> str:
    """Drop CR/LF anywhere in the value, then surrounding whitespace."""
    if value is None:
        return ""
    return _LINE_BREAKS.sub("", str(value)).strip()


def _clean_name(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_row(row: str) -> CatalogEntry:
    """
    Turn one delimited line into a CatalogEntry.

    Examples:
        "Widget A,100"    -> CatalogEntry("Widget A", "100")
        "Widget A,100\\r"  -> CatalogEntry("Widget A", "100")
        "Widget A"        -> CatalogEntry("Widget A", "")
        "Bolt,1,2"        -> CatalogEntry("Bolt", "1,2")  # split on the first comma only
    """
    fields = row.split(",", 1)
    name = fields[0]
    identifier = fields[1] if len(fields) > 1 else None
    return CatalogEntry(name=_clean_name(name), identifier=_clean_identifier(identifier))


def build_catalog(rows: Iterable[str], has_header: bool = True) -> tuple[CatalogEntry, ...]:
    """
    Build catalog entries from raw delimited rows.

    Args:
        rows: Lines of the export, header first
        has_header: Whether the first row is a header to discard

    Returns:
        Entries in input order (earliest entry wins lookups)
    """
    lines = iter(rows)
    if has_header:
        next(lines, None)
    return tuple(parse_row(row) for row in lines)


def build_catalog_from_pairs(pairs: Iterable[tuple]) -> tuple[CatalogEntry, ...]:
    """Build entries from already-split (name, identifier) pairs."""
    entries = []
    for pair in pairs:
        name = pair[0] if len(pair) > 0 else None
        identifier = pair[1] if len(pair) > 1 else None
        entries.append(CatalogEntry(name=_clean_name(name), identifier=_clean_identifier(identifier)))
    return tuple(entries)


def parse_catalog_text(text: str) -> tuple[CatalogEntry, ...]:
    """Parse the full text of a delimited export (header row included)."""
    return build_catalog(text.split("\n"))


def load_catalog_file(file_path: str | Path) -> tuple[CatalogEntry, ...]:
    """
    Load catalog entries from a PIM export.

    Args:
        file_path: Path to a .csv/.txt export or an .xlsx workbook

    Returns:
        Tuple of CatalogEntry in file order
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        # utf-8-sig eats the BOM Excel puts in front of CSV exports
        text = path.read_text(encoding="utf-8-sig")
        entries = parse_catalog_text(text)
    elif suffix in WORKBOOK_SUFFIXES:
        entries = _load_workbook(path)
    else:
        raise ValueError(f"Unsupported catalog format: {suffix}")

    missing_ids = sum(1 for e in entries if not e.identifier)
    logger.info(f"Loaded {len(entries)} catalog entries from {path.name}")
    if missing_ids:
        logger.warning(f"{missing_ids} catalog entries in {path.name} have no part id")
    return entries


def _load_workbook(path: Path) -> tuple[CatalogEntry, ...]:
    """First worksheet, header row skipped, first two columns. Blank rows are kept."""
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0] if workbook.worksheets else None
        if sheet is None:
            raise ValueError(f"No worksheet found in {path}")

        pairs = []
        for row in sheet.iter_rows(min_row=2, max_col=2, values_only=True):
            pairs.append(tuple(_cell_text(value) for value in row))
    finally:
        workbook.close()

    return build_catalog_from_pairs(pairs)


def _cell_text(value) -> Optional[str]:
    """Render a cell as text; integral floats lose their trailing .0."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
