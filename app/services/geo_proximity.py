"""Great-circle distance and "near me" radius search."""

import logging
import math
from typing import Iterable, List, NamedTuple, Protocol

from app.core.constants import (
    EARTH_RADIUS_MILES,
    PLACEHOLDER_BASE_LAT,
    PLACEHOLDER_BASE_LON,
    PLACEHOLDER_LAT_SPAN,
    PLACEHOLDER_LAT_STEP,
    PLACEHOLDER_LON_SPAN,
    PLACEHOLDER_LON_STEP,
)
from app.models.property import Property
from app.schemas.search import NearbyProperty

logger = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    lat: float
    lon: float


def haversine_miles(origin: Coordinate, target: Coordinate) -> float:
    """Great-circle distance in miles between two (lat, lon) points."""
    lat1, lat2 = math.radians(origin.lat), math.radians(target.lat)
    d_lat = math.radians(target.lat - origin.lat)
    d_lon = math.radians(target.lon - origin.lon)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class PropertyLocator(Protocol):
    """Resolves a property id to a coordinate."""

    def locate(self, property_id: int) -> Coordinate: ...


class PlaceholderLocator:
    """Deterministic stand-in for a geocoding service.

    Spreads properties over a small box north-east of downtown San
    Francisco using only the property id.  Replace with a real
    geocoder behind the same ``locate`` method.
    """

    def locate(self, property_id: int) -> Coordinate:
        return Coordinate(
            lat=PLACEHOLDER_BASE_LAT
            + (property_id * PLACEHOLDER_LAT_STEP) % PLACEHOLDER_LAT_SPAN,
            lon=PLACEHOLDER_BASE_LON
            + (property_id * PLACEHOLDER_LON_STEP) % PLACEHOLDER_LON_SPAN,
        )


class GeoProximityFilter:
    def __init__(self, locator: PropertyLocator) -> None:
        self._locator = locator

    def distance_to(self, origin: Coordinate, prop: Property) -> float:
        return haversine_miles(origin, self._locator.locate(prop.id))

    def within_radius(
        self,
        properties: Iterable[Property],
        origin: Coordinate,
        radius_miles: float,
    ) -> List[NearbyProperty]:
        """Return properties within *radius_miles* (inclusive), nearest first."""
        if radius_miles < 0:
            raise ValueError("radius_miles must be non-negative")

        nearby = []
        for prop in properties:
            distance = self.distance_to(origin, prop)
            if distance <= radius_miles:
                nearby.append(NearbyProperty(property=prop, distance=distance))

        nearby.sort(key=lambda n: n.distance)
        logger.debug(
            "%d properties within %.2f mi of (%.4f, %.4f)",
            len(nearby),
            radius_miles,
            origin.lat,
            origin.lon,
        )
        return nearby
