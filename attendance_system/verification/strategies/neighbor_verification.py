"""Neighbor verification: do adjacent students confirm this one, by direction?

For each of the four cardinal directions the neighbor seat is considered
when it lies inside the classroom (LEFT requires col > 0, FRONT requires
row > 0). Every such seat counts toward total_neighbors, occupied or not.
A seat counts toward confirmed_neighbors only when its occupant claims this
student in the exact opposite direction:

| Neighbor seat | Required reciprocal claim |
|---------------|---------------------------|
| LEFT          | RIGHT = student           |
| RIGHT         | LEFT = student            |
| FRONT         | BACK = student            |
| BACK          | FRONT = student           |

Score = confirmed_neighbors / total_neighbors. An empty seat can never
confirm, so it lowers the score without being a contradiction.

Neutral 0.5 when there is no one who could confirm: the student is
unplaced, has no in-bounds neighbor seat, or every neighbor seat is empty.
"""

from loguru import logger

from attendance_system.config.verification_defaults import (
    NEIGHBOR_VERIFICATION,
    NEUTRAL_SCORE,
)
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import Direction, LocatedStudent
from attendance_system.verification.strategies.base_strategy import VerificationStrategy


class NeighborVerificationStrategy(VerificationStrategy):
    """Scores the fraction of neighbor seats whose occupant reciprocates."""

    name = NEIGHBOR_VERIFICATION

    def __init__(self) -> None:
        self.logger = logger.bind(component="NeighborVerification")

    def score(self, student: LocatedStudent, classroom: Classroom) -> float:
        position = student.position
        if position is None:
            return NEUTRAL_SCORE

        total_neighbors = 0
        occupied_neighbors = 0
        confirmed_neighbors = 0

        for direction in Direction:
            neighbor_pos = position.neighbor(direction)
            if neighbor_pos is None or not classroom.is_inside(neighbor_pos):
                continue

            total_neighbors += 1
            neighbor = classroom.get_at(neighbor_pos)
            if neighbor is None:
                continue

            occupied_neighbors += 1
            # The neighbor sees us in the opposite direction
            if any(
                claim.direction == direction.opposite and claim.names(student.student)
                for claim in neighbor.claims
            ):
                confirmed_neighbors += 1

        if total_neighbors == 0 or occupied_neighbors == 0:
            return NEUTRAL_SCORE

        result = confirmed_neighbors / total_neighbors
        self.logger.debug(
            f"Neighbor verification: {confirmed_neighbors}/{total_neighbors}",
            student_id=student.student.id,
            occupied=occupied_neighbors,
        )
        return result
