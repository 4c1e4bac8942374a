"""
Pydantic models for the services catalog.

Service documents are returned as stored, so individual records are
plain dictionaries; only the envelope of the listing is modelled.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ServiceList(BaseModel):
    """One page of the catalog."""

    # Size of the whole collection, not of the filtered result.
    total: int = Field(..., ge=0, json_schema_extra={"example": 42})
    result: List[Dict[str, Any]]
