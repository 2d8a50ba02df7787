"""Room listing and availability updates."""

from dataclasses import dataclass

from stay_sphere.domain.identifiers import parse_object_id
from stay_sphere.domain.rooms import parse_price_filter
from stay_sphere.domain.store import UpdateAck
from stay_sphere.services.store import ROOMS, Document, DocumentStore


@dataclass
class RoomService:
    """Read access to rooms plus the availability toggle."""

    store: DocumentStore

    async def list_rooms(self, price_filter: str | None = None) -> list[Document]:
        """Return rooms, limited to a price range when the filter parses."""
        price_range = parse_price_filter(price_filter)
        query = price_range.as_query() if price_range else {}
        return await self.store.find(ROOMS, query)

    async def get_room(self, room_id: str) -> Document | None:
        """Return a single room, if present."""
        return await self.store.find_one(ROOMS, {"_id": parse_object_id(room_id)})

    async def set_availability(self, room_id: str, availability: bool) -> UpdateAck:
        """Set only the availability flag of a room."""
        return await self.store.update_one(
            ROOMS,
            {"_id": parse_object_id(room_id)},
            {"availability": availability},
        )
