"""Session token issuing and verification."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import jwt

from stay_sphere.domain.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

TOKEN_LIFETIME = timedelta(days=7)
_ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionTokenService:
    """Signs and verifies self-contained session tokens."""

    secret: str
    lifetime: timedelta = TOKEN_LIFETIME
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, payload: dict[str, object]) -> str:
        """Sign the payload with an expiry and return the encoded token."""
        issued_at = self.clock()
        claims = {
            **payload,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(claims, self.secret, algorithm=_ALGORITHM)

    def verify(self, token: str | None) -> dict[str, object]:
        """Return the decoded claims or raise UnauthorizedError."""
        if not token:
            raise UnauthorizedError()
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options={
                    "require": ["exp"],
                    "verify_aud": False,
                    "verify_sub": False,
                    "verify_jti": False,
                },
            )
        except jwt.PyJWTError as exc:
            logger.debug("Rejected session token: %s", type(exc).__name__)
            raise UnauthorizedError() from exc


def authorize_owner(claims: dict[str, object], owner_email: str) -> None:
    """Ensure the authenticated principal owns the requested resource."""
    if claims.get("email") != owner_email:
        raise ForbiddenError()
