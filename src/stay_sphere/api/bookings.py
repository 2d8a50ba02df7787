"""Booking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request

from stay_sphere.api.auth import require_session
from stay_sphere.api.schemas import (
    DeleteAckResponse,
    InsertAckResponse,
    UpdateAckResponse,
)
from stay_sphere.services.auth import authorize_owner

if TYPE_CHECKING:
    from stay_sphere.containers import AppContainer

router = APIRouter(tags=["bookings"])


@router.post("/booking")
async def create_booking(
    request: Request, booking: dict[str, object] = Body(...)
) -> InsertAckResponse:
    container: AppContainer = request.app.state.container
    ack = await container.booking_service.create_booking(booking)
    return InsertAckResponse.from_ack(ack)


@router.delete("/booking/{booking_id}")
async def delete_booking(booking_id: str, request: Request) -> DeleteAckResponse:
    container: AppContainer = request.app.state.container
    ack = await container.booking_service.delete_booking(booking_id)
    return DeleteAckResponse.from_ack(ack)


@router.patch("/booking-update/{booking_id}")
async def update_booking(
    booking_id: str,
    request: Request,
    changes: dict[str, object] = Body(...),
) -> UpdateAckResponse:
    """Set the posted fields, typically the booking date, on a booking."""
    container: AppContainer = request.app.state.container
    ack = await container.booking_service.update_booking(booking_id, changes)
    return UpdateAckResponse.from_ack(ack)


@router.get("/bookings/{email}")
async def list_bookings(
    email: str,
    request: Request,
    claims: dict[str, object] = Depends(require_session),
) -> list[dict[str, object]]:
    """Return the bookings of the signed-in owner."""
    authorize_owner(claims, email)
    container: AppContainer = request.app.state.container
    return await container.booking_service.list_for_owner(email)
