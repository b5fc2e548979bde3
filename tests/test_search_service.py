"""Tests for keyword search."""

import pytest

from shoe_store_api.app.core.exceptions import ValidationError
from shoe_store_api.app.core.result import Ok
from shoe_store_api.app.services.search_service import SearchService


@pytest.fixture
def catalog(storage, sample_shoe):
    """Store three shoes with distinct names."""
    for key, name in [("a", "AirMax"), ("b", "AirForce"), ("c", "Jordan")]:
        storage.insert(key, sample_shoe.model_copy(update={"id": key, "name": name}))
    return storage


class TestSearchShoes:
    """Tests for SearchService.search_shoes."""

    async def test_substring_match(self, catalog):
        """Test that every name containing the keyword is returned."""
        result = await SearchService.search_shoes(catalog, "Air")

        assert sorted(shoe.name for shoe in result.value) == ["AirForce", "AirMax"]

    async def test_match_inside_name(self, catalog):
        result = await SearchService.search_shoes(catalog, "rda")

        assert [shoe.name for shoe in result.value] == ["Jordan"]

    async def test_case_sensitive(self, catalog):
        """Test that matching respects letter case."""
        result = await SearchService.search_shoes(catalog, "air")

        assert result == Ok([])

    async def test_no_match_is_empty_list(self, catalog):
        result = await SearchService.search_shoes(catalog, "Boot")

        assert result == Ok([])

    @pytest.mark.parametrize("keyword", [None, "", "   "])
    async def test_blank_keyword(self, catalog, keyword):
        """Test that a blank keyword is an error, not an empty result."""
        result = await SearchService.search_shoes(catalog, keyword)

        assert isinstance(result.error, ValidationError)
        assert result.message == "Keyword cannot be empty"

    async def test_keyword_not_trimmed(self, catalog):
        """Test that surrounding spaces are part of the keyword."""
        result = await SearchService.search_shoes(catalog, " Air")

        assert result == Ok([])
