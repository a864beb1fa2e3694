"""
Part match API router.

Text -> extraction (LLM) -> tiered catalog match -> table + exact-match ledger.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from backend.api.models import (
    AnalyzeRequest, AnalyzeResponse, MatchRequest,
    CatalogStatus, CatalogSearchResponse,
)
from backend.core.config import settings
from backend.core.extraction import extract_products

from partmatch import (
    CatalogIndex, MalformedInputError, ProductMention,
    analyze, build_index, load_catalog_file, match_mention,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Part Match"])

# Current catalog snapshot. A reload swaps the whole index; requests read
# the reference once and keep using that snapshot.
_catalog_state = {
    "index": None,
    "source": None,
}


def load_catalog(path: Optional[str | Path] = None) -> CatalogIndex:
    """
    Load the catalog file and make it the current snapshot.

    Raises:
        FileNotFoundError: If the catalog file does not exist
        ValueError: If the file format is unsupported
    """
    catalog_path = Path(path or settings.CATALOG_PATH)
    index = build_index(load_catalog_file(catalog_path))
    _catalog_state["index"] = index
    _catalog_state["source"] = str(catalog_path)
    return index


def set_catalog(index: Optional[CatalogIndex], source: Optional[str] = None):
    """Replace the current snapshot (None clears it)."""
    _catalog_state["index"] = index
    _catalog_state["source"] = source


def get_catalog() -> CatalogIndex:
    """Current snapshot; an empty index when nothing is loaded."""
    index = _catalog_state["index"]
    return index if index is not None else build_index(())


def _run_analysis(payload, raw_result: Optional[str] = None) -> dict:
    catalog = get_catalog()
    try:
        report = analyze(payload, catalog)
    except MalformedInputError as e:
        logger.warning(f"Rejected product batch: {e}")
        raise HTTPException(
            status_code=422,
            detail={"message": "Error parsing product data", "error": str(e), "result": raw_result},
        )

    return {
        "result": raw_result,
        "table": report.table,
        "exact_matches": report.ledger,
        "summary": report.summary,
    }


@router.post("/api/analyze", response_model=AnalyzeResponse)
def analyze_text(request: AnalyzeRequest):
    """
    Extract products from free text and match them against the catalog.

    Returns the raw extraction, the table report and the exact-match ledger.
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Please enter text to analyze")

    raw_result = extract_products(request.text)
    if raw_result is None:
        raise HTTPException(status_code=502, detail="Failed to analyze text")

    return _run_analysis(raw_result, raw_result=raw_result)


@router.post("/api/match", response_model=AnalyzeResponse)
def match_products(request: MatchRequest):
    """Match already-extracted products (no LLM call)."""
    return _run_analysis({"products": request.products})


@router.get("/api/catalog/status", response_model=CatalogStatus)
def catalog_status():
    """Get catalog load status."""
    index = _catalog_state["index"]
    if index is None:
        return {"loaded": False, "entry_count": 0, "source": None}

    return {
        "loaded": True,
        "entry_count": index.entry_count,
        "source": _catalog_state["source"],
        "missing_ids": sum(1 for e in index.entries if not e.identifier),
    }


@router.post("/api/catalog/reload", response_model=CatalogStatus)
def reload_catalog():
    """Reload the catalog from the configured file."""
    try:
        load_catalog()
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return catalog_status()


@router.get("/api/catalog/search", response_model=CatalogSearchResponse)
def search_catalog(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=100),
):
    """Look up catalog entries for a part name or id, best tier first."""
    result = match_mention(ProductMention(name=q, identifier=q.strip()), get_catalog())
    results = [
        {"part_name": entry.name, "part_id": entry.identifier}
        for entry in result.matches[:limit]
    ]
    return {"query": q, "results": results, "count": len(results)}
