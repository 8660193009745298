"""Shared fixtures backed by an in-memory SQLite store."""
from __future__ import annotations

from datetime import date

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb.db.gateway import StoreGateway
from lightbnb.db.session import create_session_factory
from lightbnb.models import Property, PropertyReview, Reservation, User
from lightbnb.models.base import Base

USERS = [
    {"id": 1, "name": "Devin Sanders", "email": "tristanjacobs@gmail.com", "password": "hash-1"},
    {"id": 2, "name": "Iva Harrison", "email": "allisonjackson@mail.com", "password": "hash-2"},
    {"id": 3, "name": "Lloyd Jefferson", "email": "asherpoole@gmx.com", "password": "hash-3"},
]

# (id, owner_id, title, city, cost_per_night in cents, ratings)
PROPERTIES = [
    (1, 1, "Harbourfront Loft", "Toronto", 22_000, [4, 5]),
    (2, 1, "Annex Room", "Toronto", 9_000, [3, 4]),
    (3, 2, "Scarborough Basement", "Toronto", 6_000, [1, 2]),
    (4, 2, "Kitsilano Suite", "Vancouver", 15_000, [5, 4]),
    (5, 1, "Lonsdale Condo", "North Vancouver", 18_000, [3]),
    (6, 2, "Plateau Walk-up", "Montreal", 11_000, [4, 4]),
    (7, 1, "Beltline Studio", "Calgary", 7_500, [2, 3]),
    (8, 2, "Waterfront Cottage", "Halifax", 30_000, [5]),
]


def make_property(property_id: int, owner_id: int, title: str, city: str, cost: int) -> Property:
    return Property(
        id=property_id,
        owner_id=owner_id,
        title=title,
        description="description",
        thumbnail_photo_url=f"https://images.example.com/{property_id}/thumb.jpg",
        cover_photo_url=f"https://images.example.com/{property_id}/cover.jpg",
        cost_per_night=cost,
        parking_spaces=1,
        number_of_bathrooms=1,
        number_of_bedrooms=2,
        country="Canada",
        street="1 Main Street",
        city=city,
        province="ON",
        post_code="M5V 2T6",
    )


@pytest_asyncio.fixture
async def gateway():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    store = StoreGateway(create_session_factory(engine), engine=engine)
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def seeded_gateway(gateway):
    """Gateway over three users, eight rated properties and two reservations."""

    session_factory = gateway._session_factory
    async with session_factory() as session:
        async with session.begin():
            session.add_all(User(**user) for user in USERS)
            await session.flush()
            for property_id, owner_id, title, city, cost, _ in PROPERTIES:
                session.add(make_property(property_id, owner_id, title, city, cost))
            await session.flush()
            session.add_all(
                [
                    Reservation(
                        id=1,
                        start_date=date(2026, 9, 11),
                        end_date=date(2026, 9, 26),
                        property_id=1,
                        guest_id=3,
                    ),
                    Reservation(
                        id=2,
                        start_date=date(2026, 1, 4),
                        end_date=date(2026, 2, 1),
                        property_id=4,
                        guest_id=3,
                    ),
                ]
            )
            await session.flush()
            for property_id, _, _, _, _, ratings in PROPERTIES:
                for rating in ratings:
                    session.add(
                        PropertyReview(guest_id=3, property_id=property_id, rating=rating, message="ok")
                    )
    return gateway
