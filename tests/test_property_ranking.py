from datetime import datetime, timedelta, timezone

import pytest

from app.models.property import Property
from app.schemas.common import SortOption
from app.services.property_ranking import PropertyRanker, resolve_sort_option

_T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _property(id: int, **overrides) -> Property:
    defaults = {
        "id": id,
        "created_at": _T0 + timedelta(days=id),
        "title": f"Listing {id}",
        "address": f"{id} Main St",
        "city": "Oakland",
        "state": "CA",
        "zip_code": "94607",
        "price": 2000,
        "beds": 1,
        "baths": 1,
        "sqft": 800,
        "description": "",
        "amenities": [],
        "pet_friendly": False,
    }
    defaults.update(overrides)
    return Property(**defaults)


@pytest.fixture
def ranker() -> PropertyRanker:
    return PropertyRanker()


class TestPriceOrdering:
    def test_price_asc_and_desc(self, ranker):
        properties = [
            _property(i, price=price)
            for i, price in enumerate([2800, 1950, 3200, 2500], start=1)
        ]

        ascending = ranker.sort(properties, SortOption.price_asc)
        descending = ranker.sort(properties, SortOption.price_desc)

        assert [p.price for p in ascending] == [1950, 2500, 2800, 3200]
        assert [p.price for p in descending] == [3200, 2800, 2500, 1950]

    def test_equal_prices_keep_input_order(self, ranker):
        properties = [_property(i, price=2000) for i in (5, 2, 9)]

        assert [p.id for p in ranker.sort(properties, "price-asc")] == [5, 2, 9]
        assert [p.id for p in ranker.sort(properties, "price-desc")] == [5, 2, 9]


class TestRecencyOrdering:
    def test_newest_first(self, ranker):
        properties = [_property(i) for i in (1, 3, 2)]
        assert [p.id for p in ranker.sort(properties, "newest")] == [3, 2, 1]

    def test_oldest_first(self, ranker):
        properties = [_property(i) for i in (1, 3, 2)]
        assert [p.id for p in ranker.sort(properties, "oldest")] == [1, 2, 3]


class TestRecommended:
    def test_score_examples(self, ranker):
        strong = _property(
            1, pet_friendly=True, amenities=["a", "b", "c"], sqft=1050
        )
        weak = _property(2, pet_friendly=False, amenities=["a", "b"], sqft=750)

        assert ranker.recommended_score(strong) == 2
        assert ranker.recommended_score(weak) == 0
        assert [p.id for p in ranker.sort([weak, strong])] == [1, 2]

    def test_maximum_score(self, ranker):
        prop = _property(1, pet_friendly=True, amenities=list("abcd"), sqft=901)
        assert ranker.recommended_score(prop) == 3

    def test_thresholds_are_strict(self, ranker):
        prop = _property(1, amenities=list("abc"), sqft=900)
        assert ranker.recommended_score(prop) == 0

    def test_ties_keep_input_order(self, ranker, seeded_store):
        ranked = ranker.sort(seeded_store.properties.list(), "recommended")
        # 1, 3 and 4 all score 2; the Berkeley studio scores 0.
        assert [p.id for p in ranked] == [1, 3, 4, 2]

    def test_recommended_is_the_default(self, ranker, seeded_store):
        properties = seeded_store.properties.list()
        assert ranker.sort(properties) == ranker.sort(properties, "recommended")


class TestResolveSortOption:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("price-low-high", SortOption.price_asc),
            ("price-high-low", SortOption.price_desc),
            ("date-newest", SortOption.newest),
            ("date-oldest", SortOption.oldest),
            ("newest", SortOption.newest),
            (None, SortOption.recommended),
            ("cheapest-first", SortOption.recommended),
        ],
    )
    def test_names_and_aliases(self, name, expected):
        assert resolve_sort_option(name) is expected
