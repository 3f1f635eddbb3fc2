"""Classroom seating plan with exclusive seat occupancy.

The classroom is the ground truth every analysis reads:
- Fixed (rows, cols) grid, both > 0
- At most one LocatedStudent per seat
- Placements are append-only; there is no move or remove

Analyses treat the classroom as a read-only snapshot. Callers must not
place students while an analysis pass is running over the same instance.

Usage:
    from attendance_system.data_management.classroom import Classroom

    classroom = Classroom(3, 4)
    classroom.place(alice)
    classroom.get_at(Position(row=0, col=0))
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from attendance_system.data_management.schemas import (
    Direction,
    LocatedStudent,
    Position,
    Student,
)


class Classroom:
    """Seating grid mapping positions to located students.

    Data structure:
    {
        Position(row, col): LocatedStudent,
        ...
    }
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize an empty classroom.

        Args:
            rows: Number of seat rows (> 0).
            cols: Number of seats per row (> 0).

        Raises:
            ValueError: If either dimension is not positive.
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Rows and columns must be > 0, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._placements: dict[Position, LocatedStudent] = {}

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def is_inside(self, position: Position) -> bool:
        return 0 <= position.row < self._rows and 0 <= position.col < self._cols

    def is_occupied(self, position: Position) -> bool:
        return position in self._placements

    def get_at(self, position: Position) -> Optional[LocatedStudent]:
        return self._placements.get(position)

    def place(self, located_student: LocatedStudent) -> None:
        """Seat a student at their own position.

        Args:
            located_student: Student whose ``position`` is already set.

        Raises:
            ValueError: If the position is missing, out of bounds, or taken.
        """
        position = located_student.position
        if position is None:
            raise ValueError(
                f"Student {located_student.student.name} has no position to place"
            )
        if not self.is_inside(position):
            raise ValueError(
                f"Position {position} out of classroom bounds {self._rows}x{self._cols}"
            )
        if self.is_occupied(position):
            raise ValueError(f"Seat {position} already occupied")

        self._placements[position] = located_student

    def all_placements(self) -> Mapping[Position, LocatedStudent]:
        """Read-only snapshot of the current seating plan."""
        return MappingProxyType(dict(self._placements))

    def located_students(self) -> list[LocatedStudent]:
        return list(self._placements.values())

    def find(self, student: Student) -> Optional[LocatedStudent]:
        """Placed LocatedStudent for ``student`` (matched by id and name)."""
        for located in self._placements.values():
            if located.student == student:
                return located
        return None

    def neighbors_of(self, position: Position) -> dict[Direction, LocatedStudent]:
        """Occupied in-bounds cardinal neighbors of ``position``."""
        neighbors: dict[Direction, LocatedStudent] = {}
        for direction in Direction:
            neighbor_pos = position.neighbor(direction)
            if neighbor_pos is None or not self.is_inside(neighbor_pos):
                continue
            occupant = self.get_at(neighbor_pos)
            if occupant is not None:
                neighbors[direction] = occupant
        return neighbors

    def has_all_neighbors_declared(self, located_student: LocatedStudent) -> bool:
        """Check that every occupied neighbor seat is named in a matching claim.

        A student satisfies a neighbor by claiming that exact student in that
        exact direction. Claims about empty seats are accepted as long as they
        do not stand in for an occupied neighbor. Unplaced students have no
        neighbors to declare.
        """
        if located_student.position is None:
            return True

        for direction, neighbor in self.neighbors_of(located_student.position).items():
            declared = any(
                claim.direction == direction and claim.names(neighbor.student)
                for claim in located_student.claims
            )
            if not declared:
                return False
        return True

    def validate_all_neighbors_declared(self) -> None:
        """Raise if any placed student skipped an occupied neighbor.

        Raises:
            ValueError: Naming the first student with an undeclared neighbor.
        """
        for located in self._placements.values():
            if not self.has_all_neighbors_declared(located):
                raise ValueError(
                    f"Student {located.student.name} has not declared all neighbors"
                )

    def __len__(self) -> int:
        return len(self._placements)

    def __iter__(self) -> Iterator[LocatedStudent]:
        return iter(list(self._placements.values()))

    def __repr__(self) -> str:
        return f"Classroom(rows={self._rows}, cols={self._cols}, placed={len(self)})"
