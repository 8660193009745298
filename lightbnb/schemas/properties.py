"""Schemas for property listings."""
from __future__ import annotations

from pydantic import BaseModel, Field


class PropertyCreate(BaseModel):
    """New listing as submitted by an owner. Prices are in dollars."""

    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: float = Field(ge=0, allow_inf_nan=False)
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
