"""Room endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from stay_sphere.api.schemas import AvailabilityPatch, UpdateAckResponse

if TYPE_CHECKING:
    from stay_sphere.containers import AppContainer

router = APIRouter(tags=["rooms"])


@router.get("/rooms")
async def list_rooms(
    request: Request,
    price_filter: str | None = Query(default=None, alias="filter"),
) -> list[dict[str, object]]:
    """Return all rooms, optionally within a ``<low>-<high>`` price range."""
    container: AppContainer = request.app.state.container
    return await container.room_service.list_rooms(price_filter)


@router.get("/room/{room_id}")
async def get_room(room_id: str, request: Request) -> dict[str, object] | None:
    """Return a single room or null."""
    container: AppContainer = request.app.state.container
    return await container.room_service.get_room(room_id)


@router.patch("/rooms/{room_id}")
async def patch_room_availability(
    room_id: str, patch: AvailabilityPatch, request: Request
) -> UpdateAckResponse:
    """Update only the availability flag of a room."""
    container: AppContainer = request.app.state.container
    ack = await container.room_service.set_availability(room_id, patch.availability)
    return UpdateAckResponse.from_ack(ack)
