"""MongoDB-backed document store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from stay_sphere.domain.errors import StoreError
from stay_sphere.domain.store import DeleteAck, InsertAck, UpdateAck
from stay_sphere.services.store import Document, DocumentStore, SortSpec

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str, collection: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.exception("MongoDB %s on %s failed", operation, collection)
        raise StoreError() from exc


def _stringify_ids(value: object) -> object:
    """Render every ObjectId inside a document as its hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _stringify_ids(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_stringify_ids(item) for item in value]
    return value


@dataclass
class MongoDocumentStore(DocumentStore):
    """pymongo async implementation of the document store."""

    database: AsyncDatabase
    client: AsyncMongoClient | None = None

    @classmethod
    def create(cls, uri: str, database_name: str) -> "MongoDocumentStore":
        """Create a store with a shared client using the Stable API v1."""
        client: AsyncMongoClient = AsyncMongoClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        return cls(database=client[database_name], client=client)

    async def find(
        self,
        collection: str,
        query: Document,
        sort: SortSpec | None = None,
    ) -> list[Document]:
        """Return all documents matching the query."""
        with _store_errors("find", collection):
            cursor = self.database[collection].find(query)
            if sort:
                cursor = cursor.sort(sort)
            documents = await cursor.to_list()
        return [_stringify_ids(document) for document in documents]

    async def find_one(self, collection: str, query: Document) -> Document | None:
        """Return the first matching document, if present."""
        with _store_errors("find_one", collection):
            document = await self.database[collection].find_one(query)
        if document is None:
            return None
        return _stringify_ids(document)

    async def insert_one(self, collection: str, document: Document) -> InsertAck:
        """Insert a copy of the document so the caller's dict is untouched."""
        with _store_errors("insert_one", collection):
            result = await self.database[collection].insert_one(dict(document))
        return InsertAck(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )

    async def update_one(
        self, collection: str, query: Document, changes: Document
    ) -> UpdateAck:
        """Apply a ``$set`` of the given fields to the first match."""
        with _store_errors("update_one", collection):
            result = await self.database[collection].update_one(
                query, {"$set": changes}
            )
        return UpdateAck(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=(
                str(result.upserted_id) if result.upserted_id is not None else None
            ),
        )

    async def delete_one(self, collection: str, query: Document) -> DeleteAck:
        """Delete the first matching document."""
        with _store_errors("delete_one", collection):
            result = await self.database[collection].delete_one(query)
        return DeleteAck(
            acknowledged=result.acknowledged,
            deleted_count=result.deleted_count,
        )

    async def ping(self) -> None:
        """Send a ping command to the admin database."""
        with _store_errors("ping", "admin"):
            await self.database.client.admin.command("ping")

    async def close(self) -> None:
        """Close the underlying client."""
        if self.client is not None:
            await self.client.close()
