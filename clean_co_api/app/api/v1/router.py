"""
Top‑level router for version 1 of the API.

Paths follow the public contract used by the Clean Co frontend:
``/services``, ``/user/...`` for bookings and ``/auth/...`` for
credentials.
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, services

router = APIRouter()

router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(bookings.router, prefix="/user", tags=["bookings"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
