"""Session cookie endpoints and the session guard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Cookie, Request, Response

from stay_sphere.api.schemas import SuccessResponse

if TYPE_CHECKING:
    from stay_sphere.config import Settings
    from stay_sphere.containers import AppContainer

SESSION_COOKIE = "token"

router = APIRouter(tags=["auth"])


def _cookie_attributes(settings: Settings) -> dict[str, object]:
    """Cross-site cookies in production, strict same-site elsewhere."""
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


async def require_session(
    request: Request,
    token: str | None = Cookie(default=None),
) -> dict[str, object]:
    """Verify the session cookie and return the decoded claims."""
    container: AppContainer = request.app.state.container
    claims = container.token_service.verify(token)
    request.state.user = claims
    return claims


@router.post("/jwt")
async def issue_session(
    request: Request,
    response: Response,
    user: dict[str, object] = Body(...),
) -> SuccessResponse:
    """Sign the posted user object and store it as the session cookie."""
    container: AppContainer = request.app.state.container
    token = container.token_service.issue(user)
    response.set_cookie(
        SESSION_COOKIE, token, **_cookie_attributes(container.settings)
    )
    return SuccessResponse()


@router.get("/logout")
async def clear_session(request: Request, response: Response) -> SuccessResponse:
    """Expire the session cookie on the client."""
    container: AppContainer = request.app.state.container
    response.delete_cookie(SESSION_COOKIE, **_cookie_attributes(container.settings))
    return SuccessResponse()
