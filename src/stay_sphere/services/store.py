"""Document store interface shared by the resource services."""

from typing import Protocol

from stay_sphere.domain.store import DeleteAck, InsertAck, UpdateAck

ROOMS = "rooms"
BOOKINGS = "bookings"
REVIEWS = "reviews"

Document = dict[str, object]
SortSpec = list[tuple[str, int]]

DESCENDING = -1


class DocumentStore(Protocol):
    """Collection-scoped persistence interface."""

    async def find(
        self,
        collection: str,
        query: Document,
        sort: SortSpec | None = None,
    ) -> list[Document]:
        """Return all documents matching the query."""

    async def find_one(self, collection: str, query: Document) -> Document | None:
        """Return the first document matching the query, if any."""

    async def insert_one(self, collection: str, document: Document) -> InsertAck:
        """Insert a document and return the acknowledgment."""

    async def update_one(
        self, collection: str, query: Document, changes: Document
    ) -> UpdateAck:
        """Set the given fields on the first matching document."""

    async def delete_one(self, collection: str, query: Document) -> DeleteAck:
        """Delete the first matching document."""

    async def ping(self) -> None:
        """Confirm the store is reachable."""
