"""
Booking endpoints for API v1.

Creating and cancelling bookings is open to anyone.  Listing bookings
requires a valid access token, and the ``email`` query parameter must
match the e‑mail inside that token.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from clean_co_api.app.core.config import settings
from clean_co_api.app.core.db import get_database
from clean_co_api.app.core.security import authorize_booking_listing, get_current_user
from clean_co_api.app.schemas.booking import BookingCancelled, BookingCreate, BookingCreated
from clean_co_api.app.services.booking_service import BookingService


router = APIRouter()


def get_booking_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> BookingService:
    return BookingService(db[settings.bookings_collection])


@router.post("/create-booking", response_model=BookingCreated)
async def create_booking(
    booking: BookingCreate,
    service: BookingService = Depends(get_booking_service),
) -> Dict[str, Any]:
    """Store a booking exactly as submitted."""
    return await service.create_booking(booking.model_dump())


@router.get("/bookings")
async def list_bookings(
    current_user: dict = Depends(get_current_user),
    email: Optional[str] = Query(None, description="Owner e-mail; must match the token"),
    service: BookingService = Depends(get_booking_service),
) -> List[Dict[str, Any]]:
    """List the bookings that belong to the caller."""
    owner = authorize_booking_listing(email, current_user)
    return await service.list_bookings(owner)


@router.delete("/cancel-booking/{booking_id}", response_model=BookingCancelled)
async def cancel_booking(
    booking_id: str = Path(..., description="ObjectId of the booking"),
    service: BookingService = Depends(get_booking_service),
) -> Dict[str, Any]:
    """Delete a booking.  Unknown or malformed ids give 404."""
    try:
        return await service.cancel_booking(booking_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
