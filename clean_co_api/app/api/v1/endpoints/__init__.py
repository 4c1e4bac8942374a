"""
Endpoint modules for API v1: ``services`` (catalog), ``bookings`` and
``auth``.  Each defines an ``APIRouter`` that ``router.py`` mounts.
"""
