"""
One-call batch analysis: mentions in, table and ledger out.
"""

import logging
from typing import Any, Sequence, Union

from .index import CatalogIndex
from .matcher import match_mentions, summarize_results
from .mentions import parse_mentions
from .models import AnalysisReport, CatalogEntry
from .report import format_ledger, format_table

logger = logging.getLogger(__name__)


def analyze(
    payload: Any,
    catalog: Union[CatalogIndex, Sequence[CatalogEntry], None],
) -> AnalysisReport:
    """
    Match a batch of extracted products and render both reports.

    Args:
        payload: Extraction output (JSON text, dict with "products", or a
            list of product records / ProductMentions)
        catalog: Catalog snapshot to match against

    Returns:
        AnalysisReport with results, table, ledger and summary

    Raises:
        MalformedInputError: If the batch is not a sequence of records.
            Nothing is matched in that case.
    """
    mentions = parse_mentions(payload)
    results = match_mentions(mentions, catalog)
    summary = summarize_results(results)

    logger.info(
        f"Analysis: {summary['exact']} exact, {summary['possible']} possible, "
        f"{summary['no_match']} unmatched"
    )

    return AnalysisReport(
        results=results,
        table=format_table(results),
        ledger=format_ledger(results),
        summary=summary,
    )
