"""Store identifier parsing."""

from bson import ObjectId
from bson.errors import InvalidId

from stay_sphere.domain.errors import InvalidIdentifierError


def parse_object_id(raw: str) -> ObjectId:
    """Convert a client-supplied identifier into an ObjectId or fail."""
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(raw) from exc
