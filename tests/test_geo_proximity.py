import math

import pytest

from app.services.geo_proximity import (
    Coordinate,
    GeoProximityFilter,
    PlaceholderLocator,
    haversine_miles,
)

SF = Coordinate(37.7749, -122.4194)
LA = Coordinate(34.0522, -118.2437)


class TestHaversine:
    def test_distance_to_self_is_zero(self):
        assert haversine_miles(SF, SF) == 0

    def test_symmetric(self):
        assert haversine_miles(SF, LA) == pytest.approx(haversine_miles(LA, SF))

    def test_known_distance(self):
        # San Francisco to Los Angeles is roughly 347 miles great-circle.
        assert haversine_miles(SF, LA) == pytest.approx(347.4, abs=1.0)

    def test_one_degree_of_latitude(self):
        expected = 3958.8 * math.pi / 180
        assert haversine_miles(Coordinate(0, 0), Coordinate(1, 0)) == pytest.approx(
            expected
        )


class TestPlaceholderLocator:
    def test_deterministic_offsets(self):
        locator = PlaceholderLocator()

        coord = locator.locate(1)

        assert coord.lat == pytest.approx(37.7849)
        assert coord.lon == pytest.approx(-122.4044)
        assert locator.locate(1) == coord

    def test_offsets_wrap_within_span(self):
        coord = PlaceholderLocator().locate(25)

        assert coord.lat == pytest.approx(37.7749 + 0.05, abs=1e-9)
        assert coord.lon == pytest.approx(-122.4194 + 0.075, abs=1e-9)


class TestWithinRadius:
    @pytest.fixture
    def geo(self) -> GeoProximityFilter:
        return GeoProximityFilter(PlaceholderLocator())

    def test_sorted_by_distance(self, geo, seeded_store):
        nearby = geo.within_radius(seeded_store.properties.list()[::-1], SF, 5)

        assert [n.property.id for n in nearby] == [1, 2, 3, 4]
        distances = [n.distance for n in nearby]
        assert distances == sorted(distances)

    def test_excludes_properties_outside_radius(self, geo, seeded_store):
        properties = seeded_store.properties.list()
        radius = geo.distance_to(SF, properties[1]) - 0.01

        nearby = geo.within_radius(properties, SF, radius)

        assert [n.property.id for n in nearby] == [1]

    def test_boundary_is_inclusive(self, geo, seeded_store):
        properties = seeded_store.properties.list()
        radius = geo.distance_to(SF, properties[2])

        nearby = geo.within_radius(properties, SF, radius)

        assert [n.property.id for n in nearby] == [1, 2, 3]
        assert nearby[-1].distance == radius

    def test_result_is_exactly_those_within_radius(self, geo, seeded_store):
        properties = seeded_store.properties.list()
        origin = Coordinate(37.80, -122.38)
        radius = 2.0

        nearby = geo.within_radius(properties, origin, radius)

        expected = {p.id for p in properties if geo.distance_to(origin, p) <= radius}
        assert {n.property.id for n in nearby} == expected

    def test_negative_radius_rejected(self, geo, seeded_store):
        with pytest.raises(ValueError):
            geo.within_radius(seeded_store.properties.list(), SF, -1)
