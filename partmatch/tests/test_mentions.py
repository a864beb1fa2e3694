"""
Tests for mention parsing.

Run with: pytest partmatch/tests/test_mentions.py -v
"""

import json

import pytest
from pathlib import Path

from partmatch.mentions import load_mentions_file, parse_mentions
from partmatch.models import MalformedInputError, ProductMention


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestParseMentions:

    def test_extraction_object(self):
        payload = {
            "customer_name": "Dana",
            "products": [{"part_name": "Widget A", "part_id": "100", "quantity": "3"}],
            "discount_mentioned": False,
        }
        assert parse_mentions(payload) == [ProductMention("Widget A", "100", "3")]

    def test_json_text(self):
        text = json.dumps({"products": [{"part_name": "Gadget", "part_id": "", "quantity": "1"}]})
        assert parse_mentions(text) == [ProductMention("Gadget", "", "1")]

    def test_bare_list(self):
        assert parse_mentions([{"part_id": "200"}]) == [ProductMention("", "200", "")]

    def test_alternate_keys(self):
        mentions = parse_mentions([{"name": "Widget A", "identifier": "100", "quantity": 2}])
        assert mentions == [ProductMention("Widget A", "100", "2")]

    def test_missing_and_null_fields_are_empty(self):
        mentions = parse_mentions({"products": [{"part_name": None}, {}]})
        assert mentions == [ProductMention(), ProductMention()]

    def test_numbers_become_strings(self):
        mentions = parse_mentions([{"part_id": 100, "quantity": 5}])
        assert mentions[0].identifier == "100"
        assert mentions[0].quantity == "5"

    def test_order_preserved(self):
        mentions = parse_mentions([{"part_id": str(i)} for i in range(5)])
        assert [m.identifier for m in mentions] == ["0", "1", "2", "3", "4"]

    def test_empty_products(self):
        assert parse_mentions({"products": []}) == []

    def test_accepts_mentions(self):
        mention = ProductMention("Widget A", "100", "1")
        assert parse_mentions([mention]) == [mention]

    def test_accepts_tuple(self):
        mentions = (ProductMention("widget a", "", "3"), {"part_id": "200"})
        assert parse_mentions(mentions) == [
            ProductMention("widget a", "", "3"),
            ProductMention("", "200", ""),
        ]

    def test_integral_floats_lose_trailing_zero(self):
        mentions = parse_mentions([{"part_id": 100.0, "quantity": 2.0}, {"quantity": 2.5}])
        assert mentions[0] == ProductMention("", "100", "2")
        assert mentions[1].quantity == "2.5"


class TestMalformedBatches:

    @pytest.mark.parametrize("payload", [
        "not json at all",
        '{"products": ',
        {"customer_name": "no products key"},
        {"products": "Widget A"},
        {"products": None},
        42,
        None,
        ["Widget A"],
        [{"part_name": "ok"}, 7],
        [{"part_name": ["nested"]}],
    ])
    def test_rejected(self, payload):
        with pytest.raises(MalformedInputError):
            parse_mentions(payload)


class TestLoadMentionsFile:

    def test_fixture(self):
        mentions = load_mentions_file(FIXTURES_DIR / "extracted.json")
        assert len(mentions) == 4
        assert mentions[0] == ProductMention("widget a", "", "3")

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_mentions_file(tmp_path / "missing.json")
