"""Expose ORM models."""
from .property import Property
from .property_review import PropertyReview
from .reservation import Reservation
from .user import User

__all__ = [
    "Property",
    "PropertyReview",
    "Reservation",
    "User",
]
