"""Reciprocity statistics between paired claims.

A claim is reciprocated when the named target is seated in the classroom
and independently claims the author in the exact opposite direction
(Alice: RIGHT = Bob, Bob: LEFT = Alice).

- is_claim_reciprocated: per-claim check, never true for absent-claims
- count_confirmations: other placed students naming a student, any direction
- get_reciprocity_ratio: reciprocated / authored claims, 0.5 with no claims
"""

from attendance_system.config.logging import get_logger
from attendance_system.config.verification_defaults import NEUTRAL_SCORE
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import Claim, LocatedStudent


class PeerVerifier:
    """Cross-validates claims against the claims of the students they name.

    Attributes:
        classroom: Seating plan used to resolve claim targets.
    """

    def __init__(self, classroom: Classroom):
        self.classroom = classroom
        self.logger = get_logger("PeerVerifier")

    def is_claim_reciprocated(self, claimer: LocatedStudent, claim: Claim) -> bool:
        """
        Check whether the claimed target claims the claimer back.

        Args:
            claimer: Student who authored the claim.
            claim: The claim to check.

        Returns:
            True if the seated target has a non-absent claim naming the
            claimer in the opposite direction.
        """
        if claim.is_absent_claim:
            return False

        target = self.classroom.find(claim.target)
        if target is None:
            return False

        opposite = claim.direction.opposite
        return any(
            target_claim.direction == opposite and target_claim.names(claimer.student)
            for target_claim in target.claims
        )

    def count_confirmations(self, student: LocatedStudent) -> int:
        """Number of other placed students with any claim naming ``student``."""
        return sum(
            1
            for other in self.classroom.located_students()
            if other is not student
            and any(claim.names(student.student) for claim in other.claims)
        )

    def count_student_claims(self, student: LocatedStudent) -> int:
        return len(student.claims)

    def count_reciprocal_claims(self, student: LocatedStudent) -> int:
        return sum(
            1 for claim in student.claims if self.is_claim_reciprocated(student, claim)
        )

    def get_reciprocity_ratio(self, student: LocatedStudent) -> float:
        """
        Fraction of a student's claims that are reciprocated.

        Absent-claims count toward the total but can never be reciprocated.
        A student with no claims gets the neutral 0.5 rather than a penalty.

        Args:
            student: Student whose authored claims are checked.

        Returns:
            Ratio between 0.0 and 1.0.
        """
        total_claims = self.count_student_claims(student)
        if total_claims == 0:
            return NEUTRAL_SCORE

        reciprocal_claims = self.count_reciprocal_claims(student)
        ratio = reciprocal_claims / total_claims
        self.logger.debug(
            f"Reciprocity {reciprocal_claims}/{total_claims} = {ratio:.2f}",
            student_id=student.student.id,
        )
        return ratio
