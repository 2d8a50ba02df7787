"""Pydantic models for request and response bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from stay_sphere.domain.store import DeleteAck, InsertAck, UpdateAck


class AvailabilityPatch(BaseModel):
    """Body of a room availability update."""

    availability: bool


class SuccessResponse(BaseModel):
    """Plain success acknowledgment for session endpoints."""

    success: bool = True


class _AckResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertAckResponse(_AckResponse):
    """Insert acknowledgment in MongoDB driver wire format."""

    acknowledged: bool
    inserted_id: str

    @classmethod
    def from_ack(cls, ack: InsertAck) -> "InsertAckResponse":
        return cls(acknowledged=ack.acknowledged, inserted_id=ack.inserted_id)


class UpdateAckResponse(_AckResponse):
    """Update acknowledgment in MongoDB driver wire format."""

    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_count: int
    upserted_id: str | None = None

    @classmethod
    def from_ack(cls, ack: UpdateAck) -> "UpdateAckResponse":
        return cls(
            acknowledged=ack.acknowledged,
            matched_count=ack.matched_count,
            modified_count=ack.modified_count,
            upserted_count=ack.upserted_count,
            upserted_id=ack.upserted_id,
        )


class DeleteAckResponse(_AckResponse):
    """Delete acknowledgment in MongoDB driver wire format."""

    acknowledged: bool
    deleted_count: int

    @classmethod
    def from_ack(cls, ack: DeleteAck) -> "DeleteAckResponse":
        return cls(acknowledged=ack.acknowledged, deleted_count=ack.deleted_count)
