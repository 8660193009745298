"""Data access helpers for property listings."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..core.money import to_minor_units
from ..db.gateway import Statement, StoreGateway
from ..schemas.properties import PropertyCreate

DEFAULT_LIMIT = 10

PROPERTY_COLUMNS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

_FILTER_ALIASES = {
    "minimum_price": "minimum_price_per_night",
    "maximum_price": "maximum_price_per_night",
}


@dataclass(slots=True)
class PropertyFilters:
    """Optional search predicates. A filter applies when it is not None.

    Values are not validated here; the store rejects malformed ones.
    """

    owner_id: Any = None
    city: Any = None
    minimum_price_per_night: Any = None
    maximum_price_per_night: Any = None
    minimum_rating: Any = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "PropertyFilters":
        """Build filters from a raw options mapping, ignoring unknown keys."""

        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in options.items():
            key = _FILTER_ALIASES.get(key, key)
            if key in known:
                values[key] = value
        return cls(**values)


def build_property_search(filters: PropertyFilters, limit: int = DEFAULT_LIMIT) -> Statement:
    """Build the search statement for the filters.

    An owner filter overrides every other filter and skips rating
    aggregation. Otherwise rows carry ``average_rating`` and are ordered by
    nightly cost. The price range only applies when both bounds are given.
    """

    if filters.owner_id is not None:
        statement = Statement("SELECT * FROM properties")
        statement.template += f" WHERE owner_id = {statement.bind(filters.owner_id)}"
        statement.template += f" LIMIT {statement.bind(limit)}"
        return statement

    statement = Statement(
        "SELECT properties.*, avg(property_reviews.rating) AS average_rating"
        " FROM properties"
        " JOIN property_reviews ON properties.id = property_reviews.property_id"
    )

    predicates: list[str] = []
    if filters.city is not None:
        predicates.append(f"city LIKE {statement.bind(f'%{filters.city}%')}")

    if filters.minimum_price_per_night is not None and filters.maximum_price_per_night is not None:
        low = statement.bind(to_minor_units(filters.minimum_price_per_night))
        high = statement.bind(to_minor_units(filters.maximum_price_per_night))
        predicates.append(f"cost_per_night BETWEEN {low} AND {high}")

    if predicates:
        statement.template += " WHERE " + " AND ".join(predicates)

    statement.template += " GROUP BY properties.id"

    if filters.minimum_rating is not None:
        statement.template += (
            f" HAVING avg(property_reviews.rating) >= {statement.bind(filters.minimum_rating)}"
        )

    statement.template += f" ORDER BY cost_per_night LIMIT {statement.bind(limit)}"
    return statement


async def search_properties(
    gateway: StoreGateway,
    filters: PropertyFilters | Mapping[str, Any],
    limit: int = DEFAULT_LIMIT,
    *,
    timeout: float | None = None,
) -> list[dict[str, Any]]:
    """Return properties matching the filters, at most ``limit`` rows."""

    if not isinstance(filters, PropertyFilters):
        filters = PropertyFilters.from_mapping(filters)
    statement = build_property_search(filters, limit)
    return await gateway.execute_statement(statement, timeout=timeout)


async def add_property(
    gateway: StoreGateway, listing: PropertyCreate, *, timeout: float | None = None
) -> dict[str, Any]:
    """Insert a listing and return the stored row. Cost is stored in cents."""

    values = listing.model_dump()
    values["cost_per_night"] = to_minor_units(listing.cost_per_night)

    statement = Statement("")
    placeholders = ", ".join(statement.bind(values[column]) for column in PROPERTY_COLUMNS)
    statement.template = (
        f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})"
        f" VALUES ({placeholders})"
        " RETURNING *"
    )
    rows = await gateway.execute_statement(statement, timeout=timeout)
    return rows[0]
