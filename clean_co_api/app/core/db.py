"""
MongoDB integration.

A single ``AsyncIOMotorClient`` is created when the application starts
(see ``main.lifespan``) and kept on ``app.state``.  Route handlers never
touch the client directly; they depend on ``get_database`` and hand the
collections they need to the service objects.  Tests override
``get_database`` to plug in an in‑memory database.
"""

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from .config import Settings

logger = logging.getLogger(__name__)


def create_client(config: Settings) -> AsyncIOMotorClient:
    """Build the Motor client using the stable server API (v1, strict)."""
    return AsyncIOMotorClient(
        config.database_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def ping(client: AsyncIOMotorClient) -> None:
    """Round‑trip to the deployment; raises if it cannot be reached."""
    await client.admin.command("ping")
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.database


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Convert a path parameter into an ``ObjectId``; ``None`` if malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a JSON‑friendly copy of a stored document.

    Only the top‑level ``_id`` is converted; it becomes its hex string.
    """
    data = dict(document)
    if isinstance(data.get("_id"), ObjectId):
        data["_id"] = str(data["_id"])
    return data
