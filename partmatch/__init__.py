# Part Match: resolve extracted product mentions against the PIM catalog
# Siloed module - no imports from the backend

from .models import (
    CatalogEntry,
    ProductMention,
    MatchType,
    MatchResult,
    ExactMatchRecord,
    AnalysisReport,
    MalformedInputError,
    normalize_name,
)
from .catalog import build_catalog, parse_catalog_text, load_catalog_file
from .index import build_index, CatalogIndex
from .mentions import parse_mentions, load_mentions_file
from .matcher import MATCH_TIERS, match_mention, match_mentions, summarize_results
from .report import format_table, format_ledger, exact_match_records, export_csv
from .analysis import analyze

__version__ = "1.0.0"

__all__ = [
    # Models
    "CatalogEntry",
    "ProductMention",
    "MatchType",
    "MatchResult",
    "ExactMatchRecord",
    "AnalysisReport",
    "MalformedInputError",
    "normalize_name",
    # Catalog
    "build_catalog",
    "parse_catalog_text",
    "load_catalog_file",
    "build_index",
    "CatalogIndex",
    # Mentions
    "parse_mentions",
    "load_mentions_file",
    # Matcher
    "MATCH_TIERS",
    "match_mention",
    "match_mentions",
    "summarize_results",
    # Report
    "format_table",
    "format_ledger",
    "exact_match_records",
    "export_csv",
    "analyze",
]
