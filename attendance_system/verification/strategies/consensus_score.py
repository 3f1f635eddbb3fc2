"""Consensus score: how many adjacent students mention this one at all?

Potential confirmers are the other placed students at Manhattan distance
exactly 1 (horizontal or vertical, never diagonal). A confirmer counts when
any of its non-absent claims names this student, in any direction.

Unlike NeighborVerificationStrategy this ignores directional exactness and
only considers seats that are actually occupied.

Score = confirmations / potential_confirmers, neutral 0.5 when the student
is unplaced or has no adjacent students.
"""

from loguru import logger

from attendance_system.config.verification_defaults import CONSENSUS_SCORE, NEUTRAL_SCORE
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import LocatedStudent
from attendance_system.verification.strategies.base_strategy import VerificationStrategy


class ConsensusScoreStrategy(VerificationStrategy):
    """Scores the fraction of adjacent students who name this student."""

    name = CONSENSUS_SCORE

    def __init__(self) -> None:
        self.logger = logger.bind(component="ConsensusScore")

    def score(self, student: LocatedStudent, classroom: Classroom) -> float:
        position = student.position
        if position is None:
            return NEUTRAL_SCORE

        potential_confirmers = 0
        confirmations = 0

        for other in classroom.located_students():
            if other is student or other.position is None:
                continue
            if not other.position.is_adjacent(position):
                continue

            potential_confirmers += 1
            if any(claim.names(student.student) for claim in other.claims):
                confirmations += 1

        if potential_confirmers == 0:
            return NEUTRAL_SCORE

        self.logger.debug(
            f"Consensus: {confirmations}/{potential_confirmers}",
            student_id=student.student.id,
        )
        return confirmations / potential_confirmers
