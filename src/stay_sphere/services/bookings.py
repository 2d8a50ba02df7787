"""Booking persistence."""

from dataclasses import dataclass

from stay_sphere.domain.errors import MalformedInputError
from stay_sphere.domain.identifiers import parse_object_id
from stay_sphere.domain.store import DeleteAck, InsertAck, UpdateAck
from stay_sphere.services.store import BOOKINGS, Document, DocumentStore


@dataclass
class BookingService:
    """Create, reschedule, cancel and list bookings."""

    store: DocumentStore

    async def create_booking(self, booking: Document) -> InsertAck:
        """Store a booking exactly as submitted."""
        return await self.store.insert_one(BOOKINGS, booking)

    async def delete_booking(self, booking_id: str) -> DeleteAck:
        """Delete a booking; unknown ids yield a zero-deleted acknowledgment."""
        return await self.store.delete_one(
            BOOKINGS, {"_id": parse_object_id(booking_id)}
        )

    async def update_booking(self, booking_id: str, changes: Document) -> UpdateAck:
        """Set the given fields (usually the booking date) on a booking."""
        query = {"_id": parse_object_id(booking_id)}
        if not changes:
            raise MalformedInputError("No fields to update")
        if "_id" in changes:
            raise MalformedInputError("The _id field cannot be changed")
        return await self.store.update_one(BOOKINGS, query, changes)

    async def list_for_owner(self, email: str) -> list[Document]:
        """Return every booking made with the given email."""
        return await self.store.find(BOOKINGS, {"email": email})
