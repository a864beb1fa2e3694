"""
Pydantic request/response models for the API.
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional


# ============== Analysis ==============

class AnalyzeRequest(BaseModel):
    text: str


class MatchRequest(BaseModel):
    # Validated by partmatch.parse_mentions so malformed batches
    # surface as MalformedInputError, not a schema error
    products: Any = None


class AnalyzeResponse(BaseModel):
    result: Optional[str] = None
    table: str
    exact_matches: str
    summary: Dict[str, int]


# ============== Catalog ==============

class CatalogStatus(BaseModel):
    loaded: bool
    entry_count: int
    source: Optional[str] = None
    missing_ids: int = 0


class CatalogEntryModel(BaseModel):
    part_name: str
    part_id: str


class CatalogSearchResponse(BaseModel):
    query: str
    results: List[CatalogEntryModel]
    count: int
