"""Conflict detection: claims checked against the seating ground truth.

Every non-absent claim of every placed student runs through two
independent checks:

| Conflict                 | Trigger                                         |
|--------------------------|-------------------------------------------------|
| CLAIMING_ABSENT_STUDENT  | target is not seated anywhere in the classroom  |
| SPATIAL_IMPOSSIBILITY    | target is seated, but not in claimed direction  |

The spatial check compares row/column ordering and alignment only:

- LEFT:  same row, target col < claimer col
- RIGHT: same row, target col > claimer col
- FRONT: same col, target row < claimer row
- BACK:  same col, target row > claimer row

Distance is deliberately not checked: a student two seats to the right
still satisfies RIGHT. A claimer without a position cannot be falsified.

Separately, find_suspicious_students flags placed students whose
reciprocity ratio is strictly below a threshold. That is a data-quality
signal, not a conflict between two specific claims.
"""

from typing import Optional

from attendance_system.config.logging import get_logger
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import (
    AttendanceConflict,
    Claim,
    ConflictType,
    Direction,
    LocatedStudent,
    Position,
    Student,
)
from attendance_system.verification.peer_verifier import PeerVerifier


class ConflictDetector:
    """
    Detects lies and impossibilities in student claims.

    Stateless apart from the classroom it reads; every call is a full,
    idempotent re-scan.

    Usage:
        detector = ConflictDetector(classroom)
        conflicts = detector.detect_all_conflicts()
        suspicious = detector.find_suspicious_students(0.5)
    """

    def __init__(
        self,
        classroom: Classroom,
        peer_verifier: Optional[PeerVerifier] = None,
    ):
        """
        Initialize conflict detector.

        Args:
            classroom: Seating plan holding the ground truth.
            peer_verifier: Verifier for reciprocity ratios. Built from
                           ``classroom`` if not provided.
        """
        self.classroom = classroom
        self.peer_verifier = peer_verifier or PeerVerifier(classroom)
        self.logger = get_logger("ConflictDetector")

    def detect_all_conflicts(self) -> list[AttendanceConflict]:
        """Run both checks over every placed student's claims."""
        conflicts: list[AttendanceConflict] = []
        for located in self.classroom.located_students():
            conflicts.extend(self.detect_student_conflicts(located))

        if conflicts:
            self.logger.info(
                f"Detected {len(conflicts)} conflicts",
                students=len(self.classroom),
            )
        return conflicts

    def detect_student_conflicts(self, student: LocatedStudent) -> list[AttendanceConflict]:
        """
        Check one student's claims.

        Args:
            student: Claim author.

        Returns:
            Conflicts in claim order. A claim naming an absent student
            yields only CLAIMING_ABSENT_STUDENT.
        """
        conflicts: list[AttendanceConflict] = []

        for claim in student.non_absent_claims():
            target = self.classroom.find(claim.target)

            if target is None:
                conflicts.append(
                    AttendanceConflict(
                        student=student.student,
                        involved_student=claim.target,
                        conflict_type=ConflictType.CLAIMING_ABSENT_STUDENT,
                        description=(
                            f"Student claimed to see {claim.target.name} but they are absent"
                        ),
                    )
                )
                self.logger.warning(
                    f"{student.student.name} claims absent student {claim.target.name}"
                )
                continue

            if not self._is_claim_spatially_valid(student, claim, target):
                conflicts.append(
                    AttendanceConflict(
                        student=student.student,
                        involved_student=claim.target,
                        conflict_type=ConflictType.SPATIAL_IMPOSSIBILITY,
                        description=(
                            f"Claim about {claim.target.name} in direction "
                            f"{claim.direction.name} is spatially impossible from "
                            f"position {student.position}"
                        ),
                    )
                )
                self.logger.warning(
                    f"{student.student.name} at {student.position} cannot see "
                    f"{claim.target.name} at {target.position} to the {claim.direction.value}"
                )

        return conflicts

    def find_suspicious_students(self, threshold: float) -> list[Student]:
        """
        Placed students whose reciprocity ratio is strictly below ``threshold``.

        Students with no claims have the neutral ratio 0.5, so they are
        never flagged at threshold 0.5.
        """
        return [
            located.student
            for located in self.classroom.located_students()
            if self.peer_verifier.get_reciprocity_ratio(located) < threshold
        ]

    def suspicious_conflicts(self, threshold: float) -> list[AttendanceConflict]:
        """SUSPICIOUS_PATTERN conflicts for every student below ``threshold``."""
        conflicts: list[AttendanceConflict] = []
        for located in self.classroom.located_students():
            ratio = self.peer_verifier.get_reciprocity_ratio(located)
            if ratio < threshold:
                conflicts.append(
                    AttendanceConflict(
                        student=located.student,
                        involved_student=None,
                        conflict_type=ConflictType.SUSPICIOUS_PATTERN,
                        description=(
                            f"Only {ratio:.0%} of claims reciprocated "
                            f"(threshold {threshold:.0%})"
                        ),
                    )
                )
        return conflicts

    def _is_claim_spatially_valid(
        self,
        claimer: LocatedStudent,
        claim: Claim,
        target: LocatedStudent,
    ) -> bool:
        if claimer.position is None:
            return True
        return self._is_in_direction(claimer.position, target.position, claim.direction)

    @staticmethod
    def _is_in_direction(origin: Position, other: Position, direction: Direction) -> bool:
        if direction == Direction.LEFT:
            return other.row == origin.row and other.col < origin.col
        if direction == Direction.RIGHT:
            return other.row == origin.row and other.col > origin.col
        if direction == Direction.FRONT:
            return other.col == origin.col and other.row < origin.row
        return other.col == origin.col and other.row > origin.row
