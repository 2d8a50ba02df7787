"""Shared test fixtures."""

import copy
from dataclasses import dataclass, field

import pytest
from bson import ObjectId

from stay_sphere.config import Settings
from stay_sphere.containers import AppContainer
from stay_sphere.domain.store import DeleteAck, InsertAck, UpdateAck
from stay_sphere.services.auth import SessionTokenService
from stay_sphere.services.bookings import BookingService
from stay_sphere.services.reviews import ReviewService
from stay_sphere.services.rooms import RoomService
from stay_sphere.services.store import Document, DocumentStore, SortSpec


def _matches(document: Document, query: Document) -> bool:
    for key, expected in query.items():
        actual = document.get(key)
        if isinstance(expected, dict):
            if actual is None:
                return False
            if "$gte" in expected and not actual >= expected["$gte"]:
                return False
            if "$lte" in expected and not actual <= expected["$lte"]:
                return False
        elif actual != expected:
            return False
    return True


def _export(document: Document) -> Document:
    exported = copy.deepcopy(document)
    if isinstance(exported.get("_id"), ObjectId):
        exported["_id"] = str(exported["_id"])
    return exported


@dataclass
class InMemoryDocumentStore(DocumentStore):
    """In-memory document store supporting the queries the services issue."""

    collections: dict[str, list[Document]] = field(default_factory=dict)
    queries: list[tuple[str, str, Document]] = field(default_factory=list)
    fail_with: Exception | None = None
    ping_error: Exception | None = None
    pinged: bool = False

    def seed(self, collection: str, document: Document) -> str:
        stored = {"_id": ObjectId(), **copy.deepcopy(document)}
        self.collections.setdefault(collection, []).append(stored)
        return str(stored["_id"])

    def _check(self, operation: str, collection: str, query: Document) -> None:
        self.queries.append((operation, collection, query))
        if self.fail_with is not None:
            raise self.fail_with

    def _first(self, collection: str, query: Document) -> Document | None:
        for document in self.collections.get(collection, []):
            if _matches(document, query):
                return document
        return None

    async def find(
        self,
        collection: str,
        query: Document,
        sort: SortSpec | None = None,
    ) -> list[Document]:
        self._check("find", collection, query)
        documents = [
            document
            for document in self.collections.get(collection, [])
            if _matches(document, query)
        ]
        for key, direction in reversed(sort or []):
            documents.sort(key=lambda document: document[key], reverse=direction < 0)
        return [_export(document) for document in documents]

    async def find_one(self, collection: str, query: Document) -> Document | None:
        self._check("find_one", collection, query)
        document = self._first(collection, query)
        return _export(document) if document else None

    async def insert_one(self, collection: str, document: Document) -> InsertAck:
        self._check("insert_one", collection, document)
        inserted_id = self.seed(collection, document)
        return InsertAck(acknowledged=True, inserted_id=inserted_id)

    async def update_one(
        self, collection: str, query: Document, changes: Document
    ) -> UpdateAck:
        self._check("update_one", collection, query)
        document = self._first(collection, query)
        if document is None:
            return UpdateAck(acknowledged=True, matched_count=0, modified_count=0)
        modified = any(document.get(key) != value for key, value in changes.items())
        document.update(copy.deepcopy(changes))
        return UpdateAck(
            acknowledged=True, matched_count=1, modified_count=int(modified)
        )

    async def delete_one(self, collection: str, query: Document) -> DeleteAck:
        self._check("delete_one", collection, query)
        document = self._first(collection, query)
        if document is None:
            return DeleteAck(acknowledged=True, deleted_count=0)
        self.collections[collection].remove(document)
        return DeleteAck(acknowledged=True, deleted_count=1)

    async def ping(self) -> None:
        if self.ping_error is not None:
            raise self.ping_error
        self.pinged = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        access_token_secret="test-secret",
        mongodb_uri="mongodb://localhost:27017",
        environment="local",
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def token_service(settings: Settings) -> SessionTokenService:
    return SessionTokenService(settings.access_token_secret)


@pytest.fixture
def closed() -> list[bool]:
    return []


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryDocumentStore,
    token_service: SessionTokenService,
    closed: list[bool],
) -> AppContainer:
    async def close_resources() -> None:
        closed.append(True)

    return AppContainer(
        settings=settings,
        store=store,
        token_service=token_service,
        room_service=RoomService(store),
        booking_service=BookingService(store),
        review_service=ReviewService(store),
        close_resources=close_resources,
    )
