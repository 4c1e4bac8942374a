"""
Read access to the services catalog.

``CatalogService`` wraps the ``services`` collection.  Listing applies
the filter first, then the sort, then the skip/limit window.  The
``total`` it reports is the size of the whole collection, regardless of
the active filter; clients paginate against that number.
"""

from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorCollection

from clean_co_api.app.core.db import parse_object_id, serialize_document
from clean_co_api.app.services.query_builder import ServiceQuery


class CatalogService:
    """Queries against the ``services`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def list_services(self, query: ServiceQuery) -> Dict[str, Any]:
        """Return ``{"total": ..., "result": [...]}`` for one page of services."""
        cursor = self.collection.find(
            query.filter,
            sort=query.sort_spec(),
            skip=query.skip,
            limit=query.limit or 0,
        )
        documents = await cursor.to_list(length=None)
        total = await self.collection.count_documents({})
        return {
            "total": total,
            "result": [serialize_document(doc) for doc in documents],
        }

    async def get_service(self, service_id: str) -> Dict[str, Any]:
        """Fetch a single service.

        Raises ``LookupError`` when the id is malformed or unknown.
        """
        object_id = parse_object_id(service_id)
        if object_id is None:
            raise LookupError(f"Service {service_id} not found")
        document = await self.collection.find_one({"_id": object_id})
        if document is None:
            raise LookupError(f"Service {service_id} not found")
        return serialize_document(document)
