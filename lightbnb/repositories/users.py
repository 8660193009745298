"""User repository helpers."""
from __future__ import annotations

from typing import Any

from ..db.gateway import StoreGateway
from ..schemas.users import UserCreate


async def get_user_with_email(
    gateway: StoreGateway, email: str, *, timeout: float | None = None
) -> dict[str, Any] | None:
    """Return the user registered under the email, or None."""

    rows = await gateway.execute(
        "SELECT * FROM users WHERE email = :p1",
        [email],
        timeout=timeout,
    )
    return rows[0] if rows else None


async def get_user_with_id(
    gateway: StoreGateway, user_id: int, *, timeout: float | None = None
) -> dict[str, Any] | None:
    """Return a user by identifier, or None."""

    rows = await gateway.execute(
        "SELECT * FROM users WHERE id = :p1",
        [user_id],
        timeout=timeout,
    )
    return rows[0] if rows else None


async def add_user(
    gateway: StoreGateway, user: UserCreate, *, timeout: float | None = None
) -> dict[str, Any]:
    """Insert a user and return the stored row including its new id.

    The password is stored as given; hashing belongs to the caller.
    """

    rows = await gateway.execute(
        """
        INSERT INTO users (name, email, password)
        VALUES (:p1, :p2, :p3)
        RETURNING *
        """,
        [user.name, user.email, user.password],
        timeout=timeout,
    )
    return rows[0]
