"""
Test configuration and fixtures for the Part Match backend test suite.

Provides:
- A small in-memory catalog snapshot
- FastAPI TestClient fixture with the catalog installed
- Canned extraction output for patching the LLM call
"""
import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from partmatch import build_index, parse_catalog_text


CATALOG_CSV = "part_name,part_id\nWidget A,100\nWidget B,200\nHex Bolt M8,0300\n"


def extraction_json(products: list) -> str:
    """Build an extraction response shaped like the model's output."""
    return json.dumps({
        "customer_name": "Dana Reyes",
        "company_name": "Northfield Fabrication",
        "company_address": "",
        "products": products,
        "competitor_name": "",
        "discount_mentioned": False,
    })


@pytest.fixture()
def catalog_index():
    return build_index(parse_catalog_text(CATALOG_CSV))


@pytest.fixture()
def client(catalog_index):
    """
    Provide a FastAPI TestClient with a test catalog installed.

    The startup catalog load is patched out so no file is read.
    """
    from backend.api.main import app
    from backend.api.routers import analyze as analyze_module

    with patch("backend.api.main.load_catalog", side_effect=FileNotFoundError("no catalog")):
        with TestClient(app) as c:
            analyze_module.set_catalog(catalog_index, source="test.csv")
            yield c

    analyze_module.set_catalog(None)


@pytest.fixture()
def empty_client():
    """TestClient with no catalog loaded."""
    from backend.api.main import app
    from backend.api.routers import analyze as analyze_module

    analyze_module.set_catalog(None)
    with patch("backend.api.main.load_catalog", side_effect=FileNotFoundError("no catalog")):
        with TestClient(app) as c:
            yield c
