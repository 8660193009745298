"""Property model."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .property_review import PropertyReview
    from .reservation import Reservation
    from .user import User


class Property(Base):
    """A listing offered by an owner. Nightly cost is stored in cents."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cost_per_night: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    owner: Mapped["User"] = relationship("User", back_populates="properties")
    reservations: Mapped[list["Reservation"]] = relationship("Reservation", back_populates="property")
    reviews: Mapped[list["PropertyReview"]] = relationship("PropertyReview", back_populates="property")
