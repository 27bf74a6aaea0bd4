from dataclasses import dataclass


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of a single-document update as reported by the store"""
    acknowledged: bool
    matched_count: int
    modified_count: int


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of a delete (single or bulk) as reported by the store"""
    acknowledged: bool
    deleted_count: int
