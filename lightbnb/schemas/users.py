"""Schemas for user registration."""
from __future__ import annotations

from pydantic import BaseModel


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
