"""
Business logic for bookings.

Bookings are stored as free‑form documents in the ``bookings``
collection; the only field the service relies on is ``email``, which
ties a booking to its owner.  Ownership checks happen in the API layer
(``core.security.authorize_booking_listing``) before ``list_bookings``
is called.
"""

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from clean_co_api.app.core.db import parse_object_id, serialize_document


class BookingService:
    """Service for creating, listing and cancelling bookings."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def create_booking(self, booking: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a booking and report the generated id."""
        logger = logging.getLogger(__name__)
        result = await self.collection.insert_one(dict(booking))
        logger.info("Booking %s created for %s", result.inserted_id, booking.get("email"))
        return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}

    async def list_bookings(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return the bookings of ``email``, or every booking when it is ``None``."""
        query: Dict[str, Any] = {}
        if email:
            query["email"] = email
        documents = await self.collection.find(query).to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def cancel_booking(self, booking_id: str) -> Dict[str, Any]:
        """Delete a booking.

        Raises ``LookupError`` if the id is malformed or nothing was
        deleted.
        """
        logger = logging.getLogger(__name__)
        object_id = parse_object_id(booking_id)
        if object_id is None:
            raise LookupError(f"Booking {booking_id} not found")
        result = await self.collection.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise LookupError(f"Booking {booking_id} not found")
        logger.info("Booking %s cancelled", booking_id)
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
