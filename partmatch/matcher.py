"""
Part Matcher - Core comparison engine.

Resolves each product mention against the catalog in strict tiers. The
first tier that returns anything decides the result; later tiers never run.

Decision Matrix:
| Tier | Test                                          | Result   |
|------|-----------------------------------------------|----------|
| 1    | trimmed part id == entry part id              | EXACT    |
| 2    | normalized name == entry normalized name      | EXACT    |
| 3    | name containment either way, or id containment| POSSIBLE |
| -    | nothing                                       | NO_MATCH |

Normalized = lower-cased with all whitespace removed. Part ids are always
compared as strings, so "0100" and "100" do not match.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from .index import CatalogIndex, build_index
from .models import CatalogEntry, MatchResult, MatchType, ProductMention, normalize_name

logger = logging.getLogger(__name__)

Strategy = Callable[[ProductMention, CatalogIndex], list[CatalogEntry]]


def _exact_identifier(mention: ProductMention, index: CatalogIndex) -> list[CatalogEntry]:
    entry = index.lookup_identifier(mention.identifier)
    return [entry] if entry is not None else []


def _exact_name(mention: ProductMention, index: CatalogIndex) -> list[CatalogEntry]:
    entry = index.lookup_name(normalize_name(mention.name))
    return [entry] if entry is not None else []


def _partial(mention: ProductMention, index: CatalogIndex) -> list[CatalogEntry]:
    """
    Every entry with a substring relationship to the mention.

    Names are compared normalized; the part id check uses the raw mention
    id against the raw entry id.
    """
    search_name = normalize_name(mention.name)
    search_id = mention.identifier

    if not search_name and not search_id:
        return []

    matches = []
    for entry in index.entries:
        entry_name = entry.normalized_name
        name_match = bool(search_name and entry_name) and (
            search_name in entry_name or entry_name in search_name
        )
        id_match = bool(search_id and entry.identifier) and search_id in entry.identifier
        if name_match or id_match:
            matches.append(entry)
    return matches


@dataclass(frozen=True)
class MatchTier:
    """One step of the tiered lookup."""
    name: str
    match_type: MatchType
    strategy: Strategy


# Order is precedence
MATCH_TIERS: tuple[MatchTier, ...] = (
    MatchTier("exact_identifier", MatchType.EXACT, _exact_identifier),
    MatchTier("exact_name", MatchType.EXACT, _exact_name),
    MatchTier("partial", MatchType.POSSIBLE, _partial),
)


def _as_index(catalog: Union[CatalogIndex, Sequence[CatalogEntry], None]) -> CatalogIndex:
    if isinstance(catalog, CatalogIndex):
        return catalog
    return build_index(catalog or ())


def match_mention(
    mention: ProductMention,
    catalog: Union[CatalogIndex, Sequence[CatalogEntry], None],
    tiers: Sequence[MatchTier] = MATCH_TIERS,
) -> MatchResult:
    """
    Match a single mention against the catalog.

    Args:
        mention: Product mention to resolve
        catalog: CatalogIndex, or plain entries (indexed on the fly)
        tiers: Tier strategies in precedence order

    Returns:
        MatchResult for the mention
    """
    index = _as_index(catalog)

    for tier in tiers:
        found = tier.strategy(mention, index)
        if found:
            logger.debug(f"{tier.name} matched {len(found)} catalog entries for {mention}")
            return MatchResult(mention=mention, match_type=tier.match_type, matches=tuple(found))

    return MatchResult(mention=mention, match_type=MatchType.NO_MATCH)


def match_mentions(
    mentions: Iterable[ProductMention],
    catalog: Union[CatalogIndex, Sequence[CatalogEntry], None],
) -> list[MatchResult]:
    """
    Match a batch of mentions. Output order equals input order.

    The catalog is indexed once for the whole batch.
    """
    index = _as_index(catalog)
    if index.entry_count == 0:
        logger.warning("Matching against an empty catalog; every mention will be NO_MATCH")

    results = [match_mention(mention, index) for mention in mentions]
    logger.info(f"Matched {len(results)} mention(s) against {index.entry_count} catalog entries")
    return results


def report_row_count(results: Iterable[MatchResult]) -> int:
    """Rows the table report will have: one per match, at least one per mention."""
    return sum(max(1, len(r.matches)) for r in results)


def filter_by_type(results: Iterable[MatchResult], match_type: MatchType) -> list[MatchResult]:
    return [r for r in results if r.match_type == match_type]


def summarize_results(results: list[MatchResult]) -> dict:
    """Generate summary statistics for results."""
    counts = {
        "total": len(results),
        "exact": 0,
        "possible": 0,
        "no_match": 0,
    }

    for result in results:
        if result.match_type == MatchType.EXACT:
            counts["exact"] += 1
        elif result.match_type == MatchType.POSSIBLE:
            counts["possible"] += 1
        elif result.match_type == MatchType.NO_MATCH:
            counts["no_match"] += 1

    counts["rows"] = report_row_count(results)
    # Anything short of EXACT needs a human look
    counts["needs_review"] = counts["possible"] + counts["no_match"]

    return counts
