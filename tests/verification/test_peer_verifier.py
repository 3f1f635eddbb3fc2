"""Tests for PeerVerifier reciprocity statistics."""

import pytest

from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import (
    Claim,
    Direction,
    LocatedStudent,
    Position,
    Student,
)
from attendance_system.verification.peer_verifier import PeerVerifier


def _seat(classroom: Classroom, student_id: str, name: str, row: int, col: int) -> LocatedStudent:
    located = LocatedStudent(student=Student(id=student_id, name=name))
    located.set_position(Position(row=row, col=col))
    classroom.place(located)
    return located


@pytest.fixture
def row_of_three():
    classroom = Classroom(1, 3)
    alice = _seat(classroom, "A", "Alice", 0, 0)
    bob = _seat(classroom, "B", "Bob", 0, 1)
    carol = _seat(classroom, "C", "Carol", 0, 2)
    return classroom, alice, bob, carol


class TestIsClaimReciprocated:
    def test_opposite_direction_reciprocates(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        claim = Claim(direction=Direction.RIGHT, target=bob.student)
        alice.add_claim(claim)
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))

        assert PeerVerifier(classroom).is_claim_reciprocated(alice, claim)

    def test_same_direction_does_not_reciprocate(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        claim = Claim(direction=Direction.RIGHT, target=bob.student)
        alice.add_claim(claim)
        bob.add_claim(Claim(direction=Direction.RIGHT, target=alice.student))

        assert not PeerVerifier(classroom).is_claim_reciprocated(alice, claim)

    def test_absent_claim_never_reciprocated(self, row_of_three):
        classroom, alice, _, _ = row_of_three
        claim = Claim.empty(Direction.LEFT)
        alice.add_claim(claim)

        assert not PeerVerifier(classroom).is_claim_reciprocated(alice, claim)

    def test_unseated_target_never_reciprocates(self, row_of_three):
        classroom, alice, _, _ = row_of_three
        claim = Claim(direction=Direction.RIGHT, target=Student(id="Z", name="Zed"))
        alice.add_claim(claim)

        assert not PeerVerifier(classroom).is_claim_reciprocated(alice, claim)


class TestCounts:
    def test_count_confirmations_any_direction(self, row_of_three):
        classroom, alice, bob, carol = row_of_three
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))
        carol.add_claim(Claim(direction=Direction.FRONT, target=alice.student))

        assert PeerVerifier(classroom).count_confirmations(alice) == 2

    def test_confirmer_counted_once(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))
        bob.add_claim(Claim(direction=Direction.FRONT, target=alice.student))

        assert PeerVerifier(classroom).count_confirmations(alice) == 1

    def test_self_claims_not_confirmations(self, row_of_three):
        classroom, alice, _, _ = row_of_three
        alice.add_claim(Claim(direction=Direction.LEFT, target=alice.student))

        assert PeerVerifier(classroom).count_confirmations(alice) == 0

    def test_claim_counts(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        alice.add_claim(Claim.empty(Direction.FRONT))
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))
        verifier = PeerVerifier(classroom)

        assert verifier.count_student_claims(alice) == 2
        assert verifier.count_reciprocal_claims(alice) == 1


class TestReciprocityRatio:
    def test_no_claims_is_neutral(self, row_of_three):
        classroom, alice, _, _ = row_of_three
        assert PeerVerifier(classroom).get_reciprocity_ratio(alice) == 0.5

    def test_fully_reciprocated(self, row_of_three):
        classroom, alice, bob, carol = row_of_three
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))
        bob.add_claim(Claim(direction=Direction.RIGHT, target=carol.student))
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        carol.add_claim(Claim(direction=Direction.LEFT, target=bob.student))

        assert PeerVerifier(classroom).get_reciprocity_ratio(bob) == 1.0

    def test_absent_claims_dilute_ratio(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        alice.add_claim(Claim.empty(Direction.FRONT))
        alice.add_claim(Claim.empty(Direction.BACK))
        alice.add_claim(Claim.empty(Direction.LEFT))
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))

        assert PeerVerifier(classroom).get_reciprocity_ratio(alice) == pytest.approx(0.25)

    def test_unanswered_claims(self, row_of_three):
        classroom, alice, bob, _ = row_of_three
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))

        assert PeerVerifier(classroom).get_reciprocity_ratio(alice) == 0.0
