"""
Catalog Index - Lookup structures for part matching.

Built once per catalog load. Exact tiers become dict lookups:
- by_identifier: trimmed part id -> first entry carrying it
- by_normalized_name: normalized name -> first entry carrying it

The index is a snapshot. Reloading the catalog means building a new index
and swapping the reference, never editing one that a batch may be reading.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .models import CatalogEntry


@dataclass(frozen=True)
class CatalogIndex:
    """
    Indexed catalog for fast lookups.

    Attributes:
        entries: All entries in catalog order (partial matching scans these)
        by_identifier: Trimmed identifier -> CatalogEntry (first write wins)
        by_normalized_name: Normalized name -> CatalogEntry (first write wins)
        entry_count: Total number of entries indexed
    """
    entries: tuple[CatalogEntry, ...] = ()
    by_identifier: dict[str, CatalogEntry] = field(default_factory=dict)
    by_normalized_name: dict[str, CatalogEntry] = field(default_factory=dict)
    entry_count: int = 0

    def lookup_identifier(self, identifier: str) -> Optional[CatalogEntry]:
        """Look up an entry by exact identifier (compared trimmed)."""
        key = identifier.strip()
        if not key:
            return None
        return self.by_identifier.get(key)

    def lookup_name(self, normalized_name: str) -> Optional[CatalogEntry]:
        """Look up an entry by exact normalized name."""
        if not normalized_name:
            return None
        return self.by_normalized_name.get(normalized_name)


def build_index(entries: Iterable[CatalogEntry]) -> CatalogIndex:
    """
    Build lookup index from catalog entries.

    Args:
        entries: CatalogEntry sequence from the catalog loader

    Returns:
        CatalogIndex with identifier and name lookups
    """
    ordered = tuple(entries)
    by_identifier: dict[str, CatalogEntry] = {}
    by_normalized_name: dict[str, CatalogEntry] = {}

    for entry in ordered:
        # Empty keys are never looked up, so they are not indexed
        key = entry.identifier.strip()
        if key:
            by_identifier.setdefault(key, entry)
        if entry.normalized_name:
            by_normalized_name.setdefault(entry.normalized_name, entry)

    return CatalogIndex(
        entries=ordered,
        by_identifier=by_identifier,
        by_normalized_name=by_normalized_name,
        entry_count=len(ordered),
    )
