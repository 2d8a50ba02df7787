"""Domain errors surfaced to API clients."""


class StaySphereError(Exception):
    """Base class for errors with a client-safe message."""

    message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnauthorizedError(StaySphereError):
    """Session credential is missing, invalid or expired."""

    message = "Unauthorized access"


class ForbiddenError(StaySphereError):
    """Valid credential that does not own the requested resource."""

    message = "Forbidden access"


class MalformedInputError(StaySphereError):
    """Request input the store cannot act on."""

    message = "Malformed request"


class InvalidIdentifierError(MalformedInputError):
    """Identifier that is not a valid store object id."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid identifier: {raw!r}")


class StoreError(StaySphereError):
    """Document store failed to execute an operation."""

    message = "Internal server error"
