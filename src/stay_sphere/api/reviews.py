"""Review endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Request

from stay_sphere.api.schemas import InsertAckResponse

if TYPE_CHECKING:
    from stay_sphere.containers import AppContainer

router = APIRouter(tags=["reviews"])


@router.post("/reviews")
async def create_review(
    request: Request, review: dict[str, object] = Body(...)
) -> InsertAckResponse:
    container: AppContainer = request.app.state.container
    ack = await container.review_service.create_review(review)
    return InsertAckResponse.from_ack(ack)


@router.get("/reviews/{subject_id}")
async def list_subject_reviews(
    subject_id: str, request: Request
) -> list[dict[str, object]]:
    """Return reviews attached to one room."""
    container: AppContainer = request.app.state.container
    return await container.review_service.list_for_subject(subject_id)


@router.get("/reviews")
async def list_reviews(request: Request) -> list[dict[str, object]]:
    """Return every review, newest first."""
    container: AppContainer = request.app.state.container
    return await container.review_service.list_recent()
