"""
Data models for catalog part matching.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Catalog entries, mentions and results are frozen: they are created once
and only read afterwards.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Lower-case a part name and drop every whitespace character."""
    if not name:
        return ""
    return _WHITESPACE.sub("", name.lower())


class MalformedInputError(ValueError):
    """A mention batch is not shaped as a sequence of mention-like records."""


class MatchType(Enum):
    """
    Confidence of a mention's resolution against the catalog.

    The value is the label printed in the table report.
    """
    EXACT = "Exact"          # Identifier or normalized name equal to one entry
    POSSIBLE = "Possible"    # Substring relationship with one or more entries
    NO_MATCH = "No Match"    # Nothing in the catalog relates to the mention


@dataclass(frozen=True)
class CatalogEntry:
    """
    A canonical part from the reference catalog (PIM export).

    normalized_name is derived once at construction and used for
    name comparisons.
    """
    name: str
    identifier: str
    normalized_name: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "normalized_name", normalize_name(self.name))


@dataclass(frozen=True)
class ProductMention:
    """A product reference extracted from free text. Any field may be empty."""
    name: str = ""
    identifier: str = ""
    quantity: str = ""


@dataclass(frozen=True)
class MatchResult:
    """
    Output of the matcher for a single mention.

    matches keeps catalog order, which is the order rows are reported in.
    """
    mention: ProductMention
    match_type: MatchType
    matches: tuple[CatalogEntry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "matches", tuple(self.matches))
        if self.match_type == MatchType.NO_MATCH and self.matches:
            raise ValueError("NO_MATCH result cannot carry catalog entries")
        if self.match_type == MatchType.EXACT and len(self.matches) != 1:
            raise ValueError("EXACT result must carry exactly one catalog entry")
        if self.match_type == MatchType.POSSIBLE and not self.matches:
            raise ValueError("POSSIBLE result needs at least one catalog entry")

    @property
    def best_match(self) -> CatalogEntry | None:
        """First matched entry, or None for NO_MATCH."""
        return self.matches[0] if self.matches else None


@dataclass(frozen=True)
class ExactMatchRecord:
    """One ledger line: a confirmed part and the quantity asked for."""
    identifier: str
    quantity: Union[int, str]

    def __str__(self) -> str:
        return f"{self.identifier} {self.quantity}"


@dataclass
class AnalysisReport:
    """Everything produced for one batch of mentions."""
    results: list[MatchResult]
    table: str
    ledger: str
    summary: dict = field(default_factory=dict)
