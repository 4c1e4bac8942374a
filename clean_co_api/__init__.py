"""
Top‑level package for the Clean Co API.

All functionality lives in the ``app`` subpackage; importing
``clean_co_api.app`` builds the FastAPI application.
"""

__all__ = []
