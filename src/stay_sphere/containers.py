"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from stay_sphere.adapters.mongo_document_store import MongoDocumentStore
from stay_sphere.config import Settings, build_mongodb_uri
from stay_sphere.services.auth import SessionTokenService
from stay_sphere.services.bookings import BookingService
from stay_sphere.services.reviews import ReviewService
from stay_sphere.services.rooms import RoomService
from stay_sphere.services.store import DocumentStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: DocumentStore
    token_service: SessionTokenService
    room_service: RoomService
    booking_service: BookingService
    review_service: ReviewService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = MongoDocumentStore.create(
        uri=build_mongodb_uri(resolved_settings),
        database_name=resolved_settings.database_name,
    )

    async def close_resources() -> None:
        await store.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        token_service=SessionTokenService(resolved_settings.access_token_secret),
        room_service=RoomService(store),
        booking_service=BookingService(store),
        review_service=ReviewService(store),
        close_resources=close_resources,
    )
