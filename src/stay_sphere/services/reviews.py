"""Review persistence and feeds."""

from dataclasses import dataclass

from stay_sphere.domain.store import InsertAck
from stay_sphere.services.store import (
    DESCENDING,
    REVIEWS,
    Document,
    DocumentStore,
)


@dataclass
class ReviewService:
    """Create reviews and read them per room or as a recency feed."""

    store: DocumentStore

    async def create_review(self, review: Document) -> InsertAck:
        return await self.store.insert_one(REVIEWS, review)

    async def list_for_subject(self, subject_id: str) -> list[Document]:
        """Return reviews whose ``id`` field equals the subject identifier."""
        return await self.store.find(REVIEWS, {"id": subject_id})

    async def list_recent(self) -> list[Document]:
        """Return all reviews, newest first."""
        return await self.store.find(REVIEWS, {}, sort=[("timestamp", DESCENDING)])
