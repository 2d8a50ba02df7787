"""Write acknowledgments returned by the document store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InsertAck:
    """Outcome of a single-document insert."""

    acknowledged: bool
    inserted_id: str


@dataclass(frozen=True)
class UpdateAck:
    """Outcome of a single-document update."""

    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_id: str | None = None

    @property
    def upserted_count(self) -> int:
        return 0 if self.upserted_id is None else 1


@dataclass(frozen=True)
class DeleteAck:
    """Outcome of a single-document delete."""

    acknowledged: bool
    deleted_count: int
