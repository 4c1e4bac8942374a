"""
Application package for the Clean Co API.

``core`` holds configuration, logging, security and database wiring,
``services`` the collection‑level business logic, ``schemas`` the
request and response models and ``api`` the versioned routers.
"""

from .main import app  # noqa: F401
