"""Seat occupancy: structural signal independent of claim content.

Students who place themselves and engage with peers are more likely to be
in the room:

| placed? | has claims? | score |
|---------|-------------|-------|
| yes     | yes         | 0.95  |
| yes     | no          | 0.85  |
| no      | yes         | 0.60  |
| no      | no          | 0.10  |
"""

from attendance_system.config.verification_defaults import (
    SEAT_OCCUPANCY,
    SEAT_OCCUPANCY_SCORES,
)
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import LocatedStudent
from attendance_system.verification.strategies.base_strategy import VerificationStrategy


class SeatOccupancyStrategy(VerificationStrategy):
    """Looks up the score for (placed, has_claims); ignores the classroom."""

    name = SEAT_OCCUPANCY

    def __init__(self, scores: dict[tuple[bool, bool], float] | None = None) -> None:
        self.scores = scores or SEAT_OCCUPANCY_SCORES

    def score(self, student: LocatedStudent, classroom: Classroom) -> float:
        return self.scores[(student.is_placed, student.has_claims)]
