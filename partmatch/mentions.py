"""
Mention Parser - Turn extraction output into ProductMentions.

The language model is asked for a JSON object shaped like:

    {
      "customer_name": "", "company_name": "", "company_address": "",
      "products": [{"part_name": "", "part_id": "", "quantity": ""}],
      "competitor_name": "", "discount_mentioned": false
    }

Only "products" matters here. Individual fields may be missing or empty;
that is normal. A batch that is not a sequence of records at all is rejected
with MalformedInputError before anything gets matched.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Mapping

from .models import MalformedInputError, ProductMention

# Accepted keys per field, first present wins
FIELD_KEYS = {
    "name": ("part_name", "name"),
    "identifier": ("part_id", "identifier"),
    "quantity": ("quantity",),
}


def parse_mentions(payload: Any) -> list[ProductMention]:
    """
    Parse a mention batch.

    Args:
        payload: JSON text, the extraction object (dict with "products"),
            or a sequence of product records

    Returns:
        ProductMentions in payload order

    Raises:
        MalformedInputError: If the payload is not a sequence of records
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedInputError(f"Extraction output is not valid JSON: {e}") from e

    if isinstance(payload, Mapping):
        if "products" not in payload:
            raise MalformedInputError("Extraction output has no 'products' array")
        payload = payload["products"]

    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise MalformedInputError(
            f"'products' must be a list, got {type(payload).__name__}"
        )

    return [_parse_record(record, position) for position, record in enumerate(payload)]


def _parse_record(record: Any, position: int) -> ProductMention:
    if isinstance(record, ProductMention):
        return record
    if not isinstance(record, Mapping):
        raise MalformedInputError(
            f"Product #{position + 1} is {type(record).__name__}, expected an object"
        )

    values = {}
    for field_name, keys in FIELD_KEYS.items():
        raw = next((record[k] for k in keys if k in record), None)
        values[field_name] = _field_text(raw, field_name, position)

    return ProductMention(**values)


def _field_text(value: Any, field_name: str, position: int) -> str:
    """Scalar field value as text; None becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise MalformedInputError(
            f"Product #{position + 1} field '{field_name}' must be a scalar"
        )
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def load_mentions_file(file_path: str | Path) -> list[ProductMention]:
    """Read a JSON file of extraction output and parse its mentions."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Mentions file not found: {path}")
    return parse_mentions(path.read_text(encoding="utf-8"))
