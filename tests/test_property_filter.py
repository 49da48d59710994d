from datetime import datetime, timezone

import pytest

from app.models.alert import Alert
from app.models.property import Property
from app.schemas.search import PropertyFilter
from app.services.property_filter import PropertyFilterEngine


def _property(**overrides) -> Property:
    defaults = {
        "id": 1,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "title": "Test flat",
        "address": "1 Test St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "price": 2800,
        "beds": 2,
        "baths": 1.5,
        "sqft": 900,
        "description": "",
        "amenities": [],
        "pet_friendly": True,
    }
    defaults.update(overrides)
    return Property(**defaults)


@pytest.fixture
def engine() -> PropertyFilterEngine:
    return PropertyFilterEngine()


class TestConjunction:
    def test_all_active_criteria_must_hold(self, engine):
        prop = _property(beds=2, price=2800, pet_friendly=True)

        assert engine.matches(
            prop, PropertyFilter(min_beds=2, max_price=3000, pet_friendly=True)
        )
        assert not engine.matches(prop, PropertyFilter(min_beds=3))
        assert not engine.matches(prop, PropertyFilter(max_price=2000))

    def test_empty_filter_matches_everything_in_order(self, engine, seeded_store):
        properties = seeded_store.properties.list()
        assert engine.apply(properties, PropertyFilter()) == properties

    def test_seeded_combination(self, engine, seeded_store):
        result = engine.apply(
            seeded_store.properties.list(),
            PropertyFilter(min_beds=2, max_price=3000, pet_friendly=True),
        )
        assert [p.id for p in result] == [1, 4]


class TestLocation:
    @pytest.mark.parametrize(
        "text",
        ["test st", "SPRINGFIELD", "il", "627"],
    )
    def test_matches_any_address_field(self, engine, text):
        assert engine.matches(_property(), PropertyFilter(location_text=text))

    def test_no_field_contains_text(self, engine):
        assert not engine.matches(_property(), PropertyFilter(location_text="Boston"))

    def test_seeded_city_and_zip(self, engine, seeded_store):
        properties = seeded_store.properties.list()
        by_city = engine.apply(properties, PropertyFilter(location_text="san francisco"))
        by_zip = engine.apply(properties, PropertyFilter(location_text="947"))

        assert [p.id for p in by_city] == [1, 3]
        assert [p.id for p in by_zip] == [2]


class TestThresholds:
    def test_fractional_baths(self, engine):
        prop = _property(baths=1.5)
        assert engine.matches(prop, PropertyFilter(min_baths=1.5))
        assert not engine.matches(prop, PropertyFilter(min_baths=2))

    def test_price_bounds_are_inclusive(self, engine):
        prop = _property(price=2500)
        assert engine.matches(prop, PropertyFilter(min_price=2500, max_price=2500))
        assert not engine.matches(prop, PropertyFilter(min_price=2501))

    def test_zero_bound_is_still_a_bound(self, engine):
        assert not engine.matches(_property(price=100), PropertyFilter(max_price=0))

    def test_inverted_price_range_matches_nothing(self, engine):
        criteria = PropertyFilter(min_price=3000, max_price=2000)
        for price in (1999, 2000, 2500, 3000, 3001):
            assert not engine.matches(_property(price=price), criteria)


class TestFlags:
    def test_pet_friendly_false_is_no_constraint(self, engine):
        assert engine.matches(_property(pet_friendly=False), PropertyFilter())

    def test_pet_friendly_required(self, engine):
        assert not engine.matches(
            _property(pet_friendly=False), PropertyFilter(pet_friendly=True)
        )

    @pytest.mark.parametrize(
        "amenities,expected",
        [
            (["In-unit Laundry"], True),
            (["Washer/Dryer"], True),
            (["LAUNDRY room"], True),
            (["Dishwasher"], True),
            (["Parking", "Balcony"], False),
            ([], False),
        ],
    )
    def test_laundry(self, engine, amenities, expected):
        prop = _property(amenities=amenities)
        assert engine.matches(prop, PropertyFilter(require_laundry=True)) is expected


class TestStoredCriteria:
    def test_alert_fields_map_onto_filter(self):
        alert = Alert(
            id=1,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            user_id=1,
            name="SF pets",
            location="San Francisco",
            min_price=2000,
            max_price=3000,
            beds=2,
            baths=1.5,
            filters={"petFriendly": True, "inUnitLaundry": True, "parking": True},
        )

        criteria = PropertyFilterEngine.criteria_for(alert)

        assert criteria == PropertyFilter(
            location_text="San Francisco",
            min_beds=2,
            min_baths=1.5,
            min_price=2000,
            max_price=3000,
            pet_friendly=True,
            require_laundry=True,
        )

    def test_inverted_stored_range_translates_without_error(self):
        alert = Alert(
            id=1,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            user_id=1,
            name="Inverted",
            min_price=2500,
            max_price=2000,
        )

        criteria = PropertyFilterEngine.criteria_for(alert)

        assert (criteria.min_price, criteria.max_price) == (2500, 2000)
