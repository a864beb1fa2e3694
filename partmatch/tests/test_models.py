"""
Tests for data models.

Run with: pytest partmatch/tests/test_models.py -v
"""

import dataclasses

import pytest

from partmatch.models import (
    CatalogEntry,
    ExactMatchRecord,
    MalformedInputError,
    MatchResult,
    MatchType,
    ProductMention,
    normalize_name,
)


class TestNormalizeName:

    def test_lowercases_and_strips_whitespace(self):
        assert normalize_name("Widget A") == "widgeta"

    def test_removes_inner_tabs_and_newlines(self):
        assert normalize_name(" Hex\tBolt \n M8 ") == "hexboltm8"

    def test_empty(self):
        assert normalize_name("") == ""
        assert normalize_name("   ") == ""


class TestMatchType:

    def test_labels(self):
        assert MatchType.EXACT.value == "Exact"
        assert MatchType.POSSIBLE.value == "Possible"
        assert MatchType.NO_MATCH.value == "No Match"


class TestCatalogEntry:

    def test_normalized_name_derived(self):
        entry = CatalogEntry(name="Gear Box 500", identifier="4501")
        assert entry.normalized_name == "gearbox500"

    def test_immutable(self):
        entry = CatalogEntry(name="Widget A", identifier="100")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.identifier = "200"

    def test_equality_ignores_derived_field(self):
        assert CatalogEntry("Widget A", "100") == CatalogEntry("Widget A", "100")


class TestProductMention:

    def test_defaults_empty(self):
        mention = ProductMention()
        assert mention.name == ""
        assert mention.identifier == ""
        assert mention.quantity == ""


class TestMatchResult:

    @pytest.fixture
    def entry(self):
        return CatalogEntry(name="Widget A", identifier="100")

    def test_no_match_has_no_entries(self, entry):
        result = MatchResult(mention=ProductMention(name="x"), match_type=MatchType.NO_MATCH)
        assert result.matches == ()
        assert result.best_match is None

        with pytest.raises(ValueError):
            MatchResult(mention=ProductMention(), match_type=MatchType.NO_MATCH, matches=(entry,))

    def test_exact_needs_exactly_one(self, entry):
        result = MatchResult(mention=ProductMention(), match_type=MatchType.EXACT, matches=[entry])
        assert result.matches == (entry,)
        assert result.best_match is entry

        with pytest.raises(ValueError):
            MatchResult(mention=ProductMention(), match_type=MatchType.EXACT)
        with pytest.raises(ValueError):
            MatchResult(mention=ProductMention(), match_type=MatchType.EXACT, matches=(entry, entry))

    def test_possible_needs_at_least_one(self, entry):
        with pytest.raises(ValueError):
            MatchResult(mention=ProductMention(), match_type=MatchType.POSSIBLE)


class TestExactMatchRecord:

    def test_str(self):
        assert str(ExactMatchRecord(identifier="100", quantity=3)) == "100 3"
        assert str(ExactMatchRecord(identifier="100", quantity="5 units")) == "100 5 units"


def test_malformed_input_is_value_error():
    assert issubclass(MalformedInputError, ValueError)
