"""Claim schema: student identity, neighbor assertions and seat state.

A Claim is a student's statement about one neighbor direction:
- Claim(direction=RIGHT, target=bob): "Bob sits to my right"
- Claim.empty(RIGHT): "the seat to my right is empty" (absent-claim)

Absent-claims carry no target. They can never be reciprocated and are
never flagged as spatially impossible, so every consumer checks
``is_absent_claim`` before looking at ``target``.

Students, positions and claims are immutable once created. A
LocatedStudent owns its claim list; it is append-only while claims are
being entered and must not change during an analysis pass.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from attendance_system.data_management.schemas.spatial_schema import Direction, Position


class Student(BaseModel):
    """Student identity. Two students are equal iff id and name match."""

    id: str = Field(..., description="Stable student identifier, e.g. roster number")
    name: str = Field(..., description="Display name")

    model_config = {
        "frozen": True,
        "json_schema_extra": {"examples": [{"id": "S001", "name": "Alice"}]},
    }


class Claim(BaseModel):
    """A directional assertion authored by one student about a neighbor seat."""

    direction: Direction = Field(..., description="Direction relative to the author")
    target: Optional[Student] = Field(
        default=None,
        description="Student claimed in that direction; None declares the seat empty",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"direction": "right", "target": {"id": "S002", "name": "Bob"}},
                {"direction": "front", "target": None},
            ]
        },
    }

    @classmethod
    def empty(cls, direction: Direction) -> "Claim":
        """Declare that the seat in ``direction`` is empty."""
        return cls(direction=direction, target=None)

    @property
    def is_absent_claim(self) -> bool:
        return self.target is None

    def names(self, student: Student) -> bool:
        """True if this is a non-absent claim whose target is ``student``."""
        if self.is_absent_claim:
            return False
        return self.target == student


class SeatStatus(str, Enum):
    """Data-entry state of a located student, set by the caller.

    Analysis never changes this value.
    """

    UNKNOWN = "unknown"
    PLACED = "placed"
    ABSENT = "absent"
    CONFLICTING = "conflicting"


class LocatedStudent(BaseModel):
    """A student, where they sit (if known) and the claims they made."""

    student: Student
    position: Optional[Position] = Field(
        default=None, description="Seat, or None if not yet placed/seen"
    )
    claims: list[Claim] = Field(
        default_factory=list, description="Claims authored by this student, in entry order"
    )
    status: SeatStatus = Field(default=SeatStatus.UNKNOWN)

    model_config = {"validate_assignment": True}

    @property
    def is_placed(self) -> bool:
        return self.position is not None

    @property
    def has_claims(self) -> bool:
        return bool(self.claims)

    def set_position(self, position: Position) -> None:
        """Seat the student and mark them PLACED."""
        self.position = position
        self.status = SeatStatus.PLACED

    def add_claim(self, claim: Claim) -> None:
        """Append a claim. No validation happens here; see ConflictDetector."""
        self.claims.append(claim)

    def non_absent_claims(self) -> list[Claim]:
        return [claim for claim in self.claims if not claim.is_absent_claim]

    def mark_absent(self) -> None:
        self.status = SeatStatus.ABSENT

    def mark_conflicting(self) -> None:
        self.status = SeatStatus.CONFLICTING
