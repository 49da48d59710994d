"""Sample listings used to bootstrap a fresh (volatile) store."""

import logging
from datetime import date
from typing import Any, Dict, List

from app.core.store import EntityStore
from app.models.property import Property

logger = logging.getLogger(__name__)

SAMPLE_PROPERTIES: List[Dict[str, Any]] = [
    {
        "title": "Modern 2 Bedroom Apartment",
        "address": "2555 Main St",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94110",
        "price": 2800,
        "beds": 2,
        "baths": 2,
        "sqft": 1050,
        "description": (
            "Beautiful 2 bedroom apartment in the heart of the Mission "
            "District. Stainless steel appliances, hardwood floors, in-unit "
            "laundry and a private balcony with city views."
        ),
        "images": [
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2",
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267",
        ],
        "amenities": ["In-unit Laundry", "Dishwasher", "Pets Allowed"],
        "pet_friendly": True,
        "available_from": date(2023, 9, 1),
        "lease_length": 12,
        "status": "active",
    },
    {
        "title": "Luxury Studio in Berkeley",
        "address": "138 Oak St",
        "city": "Berkeley",
        "state": "CA",
        "zip_code": "94710",
        "price": 1950,
        "beds": 1,
        "baths": 1,
        "sqft": 750,
        "description": (
            "Cozy studio in a great Berkeley location with hardwood floors, "
            "a modern kitchen and lots of natural light."
        ),
        "images": [
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267",
            "https://images.unsplash.com/photo-1493809842364-78817add7ffb",
        ],
        "amenities": ["In-unit Laundry", "Hardwood Floors"],
        "pet_friendly": False,
        "available_from": date(2023, 8, 15),
        "lease_length": 12,
        "status": "active",
    },
    {
        "title": "Spacious 2 Bedroom with Balcony",
        "address": "455 Valencia St",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94103",
        "price": 3200,
        "beds": 2,
        "baths": 2,
        "sqft": 1100,
        "description": (
            "2 bedroom apartment with a private balcony in the Mission "
            "District, stainless steel appliances and hardwood floors "
            "throughout."
        ),
        "images": [
            "https://images.unsplash.com/photo-1493809842364-78817add7ffb",
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2",
        ],
        "amenities": ["Pets Allowed", "Balcony", "Parking"],
        "pet_friendly": True,
        "available_from": date(2023, 9, 1),
        "lease_length": 12,
        "status": "active",
    },
    {
        "title": "Charming 2 Bedroom in Oakland",
        "address": "742 Evergreen Terrace",
        "city": "Oakland",
        "state": "CA",
        "zip_code": "94607",
        "price": 2500,
        "beds": 2,
        "baths": 1,
        "sqft": 950,
        "description": (
            "Charming 2 bedroom, 1 bathroom apartment in Oakland with garden "
            "access and lots of character."
        ),
        "images": [
            "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688",
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2",
        ],
        "amenities": ["Pets Allowed", "Garden Access"],
        "pet_friendly": True,
        "available_from": date(2023, 8, 1),
        "lease_length": 12,
        "status": "active",
    },
]


def seed_sample_properties(store: EntityStore) -> List[Property]:
    """Insert the sample listings into *store* and return them."""
    created = [store.properties.create(**data) for data in SAMPLE_PROPERTIES]
    logger.info("Seeded %d sample properties", len(created))
    return created
