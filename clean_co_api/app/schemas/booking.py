"""
Pydantic models for bookings.

A booking is a free‑form document: clients may send any fields they
need (service, date, address and so on).  Only ``email`` is required,
because it is what ties a booking to the owner of an access token.
"""

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    email: str = Field(..., json_schema_extra={"example": "user@example.com"})

    model_config = {
        "extra": "allow",
    }


class BookingCreated(BaseModel):
    acknowledged: bool
    insertedId: str


class BookingCancelled(BaseModel):
    acknowledged: bool
    deletedCount: int
