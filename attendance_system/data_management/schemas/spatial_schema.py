"""Spatial schema for classroom seating geometry.

Seats form a grid indexed by (row, col), both zero-based. Row 0 is the
front of the room and column 0 is the leftmost seat, so:

- LEFT decreases col, RIGHT increases col
- FRONT decreases row, BACK increases row

Positions are pure coordinates. Whether a coordinate is a real seat is
decided by the Classroom bounds, not by the Position itself.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Cardinal direction of a neighbor relative to a seated student."""

    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    BACK = "back"

    @property
    def opposite(self) -> "Direction":
        """The direction a reciprocating neighbor would claim."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.FRONT: Direction.BACK,
    Direction.BACK: Direction.FRONT,
}


class Position(BaseModel):
    """Immutable seat coordinate. Equality and hashing are by value."""

    row: int = Field(..., ge=0, description="Zero-based row, 0 = front of room")
    col: int = Field(..., ge=0, description="Zero-based column, 0 = leftmost seat")

    model_config = {
        "frozen": True,
        "json_schema_extra": {"examples": [{"row": 1, "col": 2}]},
    }

    def neighbor(self, direction: Direction) -> Optional["Position"]:
        """Adjacent coordinate in ``direction``.

        Returns None when the step would produce a negative coordinate
        (LEFT from col 0, FRONT from row 0). RIGHT and BACK always return a
        Position; callers check classroom bounds.
        """
        if direction == Direction.LEFT:
            return Position(row=self.row, col=self.col - 1) if self.col > 0 else None
        if direction == Direction.RIGHT:
            return Position(row=self.row, col=self.col + 1)
        if direction == Direction.FRONT:
            return Position(row=self.row - 1, col=self.col) if self.row > 0 else None
        return Position(row=self.row + 1, col=self.col)

    def manhattan_distance(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def is_adjacent(self, other: "Position") -> bool:
        """True for horizontal or vertical neighbors only (no diagonals)."""
        return self.manhattan_distance(other) == 1

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
