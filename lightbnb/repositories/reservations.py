"""Reservation repository helpers."""
from __future__ import annotations

from typing import Any

from ..db.gateway import StoreGateway

DEFAULT_LIMIT = 10


async def get_all_reservations(
    gateway: StoreGateway,
    guest_id: int,
    limit: int = DEFAULT_LIMIT,
    *,
    timeout: float | None = None,
) -> list[dict[str, Any]]:
    """Return a guest's reservations joined with the reserved property."""

    return await gateway.execute(
        """
        SELECT reservations.id AS reservation_id,
               reservations.start_date,
               reservations.end_date,
               reservations.guest_id,
               properties.*
        FROM reservations
        JOIN properties ON properties.id = reservations.property_id
        WHERE reservations.guest_id = :p1
        LIMIT :p2
        """,
        [guest_id, limit],
        timeout=timeout,
    )
