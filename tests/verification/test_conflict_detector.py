"""Tests for ConflictDetector.

Tests cover:
- CLAIMING_ABSENT_STUDENT for unseated targets (exactly one conflict)
- SPATIAL_IMPOSSIBILITY for misaligned or wrong-side targets
- Distance never checked
- Unplaced claimers and absent-claims never flagged
- Suspicious students at strict-below threshold
"""

import pytest

from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import (
    Claim,
    ConflictType,
    Direction,
    LocatedStudent,
    Position,
    Student,
)
from attendance_system.verification.conflict_detector import ConflictDetector


def _seat(classroom: Classroom, student_id: str, name: str, row: int, col: int) -> LocatedStudent:
    located = LocatedStudent(student=Student(id=student_id, name=name))
    located.set_position(Position(row=row, col=col))
    classroom.place(located)
    return located


# ── Absent Targets ───────────────────────────────────────────────────────


class TestClaimingAbsentStudent:
    def test_unseated_target_flagged_once(self):
        classroom = Classroom(2, 2)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        zed = Student(id="Z", name="Zed")
        alice.add_claim(Claim(direction=Direction.RIGHT, target=zed))

        conflicts = ConflictDetector(classroom).detect_all_conflicts()

        assert len(conflicts) == 1
        conflict = conflicts[0]
        assert conflict.conflict_type == ConflictType.CLAIMING_ABSENT_STUDENT
        assert conflict.student == alice.student
        assert conflict.involved_student == zed
        assert conflict.description == "Student claimed to see Zed but they are absent"

    def test_same_name_different_id_is_absent(self):
        classroom = Classroom(1, 2)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        _seat(classroom, "B", "Bob", 0, 1)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=Student(id="B2", name="Bob")))

        conflicts = ConflictDetector(classroom).detect_all_conflicts()
        assert [c.conflict_type for c in conflicts] == [ConflictType.CLAIMING_ABSENT_STUDENT]


# ── Spatial Checks ───────────────────────────────────────────────────────


class TestSpatialImpossibility:
    def test_valid_claims_produce_nothing(self):
        classroom = Classroom(1, 2)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        bob = _seat(classroom, "B", "Bob", 0, 1)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))

        assert ConflictDetector(classroom).detect_all_conflicts() == []

    def test_two_seats_away_still_valid(self):
        classroom = Classroom(1, 3)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        carol = _seat(classroom, "C", "Carol", 0, 2)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=carol.student))

        # Not adjacent, but same row and to the right: the check is
        # alignment only, so this is accepted
        assert ConflictDetector(classroom).detect_all_conflicts() == []

    def test_different_row_is_impossible(self):
        classroom = Classroom(2, 2)
        bob = _seat(classroom, "B", "Bob", 0, 0)
        alice = _seat(classroom, "A", "Alice", 1, 0)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))

        conflicts = ConflictDetector(classroom).detect_all_conflicts()

        assert len(conflicts) == 1
        assert conflicts[0].conflict_type == ConflictType.SPATIAL_IMPOSSIBILITY
        assert conflicts[0].description == (
            "Claim about Bob in direction RIGHT is spatially impossible from position (1,0)"
        )

    def test_wrong_side_is_impossible(self):
        classroom = Classroom(1, 2)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        bob = _seat(classroom, "B", "Bob", 0, 1)
        alice.add_claim(Claim(direction=Direction.LEFT, target=bob.student))

        conflicts = ConflictDetector(classroom).detect_all_conflicts()
        assert [c.conflict_type for c in conflicts] == [ConflictType.SPATIAL_IMPOSSIBILITY]

    @pytest.mark.parametrize(
        "direction,target_pos,valid",
        [
            (Direction.FRONT, (0, 1), True),
            (Direction.BACK, (2, 1), True),
            (Direction.LEFT, (1, 0), True),
            (Direction.RIGHT, (1, 2), True),
            (Direction.FRONT, (2, 1), False),
            (Direction.BACK, (0, 1), False),
            (Direction.FRONT, (0, 0), False),
            (Direction.LEFT, (0, 0), False),
        ],
    )
    def test_direction_semantics(self, direction, target_pos, valid):
        classroom = Classroom(3, 3)
        center = _seat(classroom, "C", "Cleo", 1, 1)
        other = _seat(classroom, "O", "Omar", *target_pos)
        center.add_claim(Claim(direction=direction, target=other.student))

        conflicts = ConflictDetector(classroom).detect_student_conflicts(center)
        assert (conflicts == []) is valid

    def test_unplaced_claimer_never_spatially_flagged(self):
        classroom = Classroom(1, 2)
        bob = _seat(classroom, "B", "Bob", 0, 1)
        ghost = LocatedStudent(student=Student(id="G", name="Ghost"))
        ghost.add_claim(Claim(direction=Direction.FRONT, target=bob.student))

        assert ConflictDetector(classroom).detect_student_conflicts(ghost) == []

    def test_absent_claims_ignored(self):
        classroom = Classroom(1, 2)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        alice.add_claim(Claim.empty(Direction.RIGHT))
        alice.add_claim(Claim.empty(Direction.FRONT))

        assert ConflictDetector(classroom).detect_all_conflicts() == []

    def test_detection_is_idempotent(self):
        classroom = Classroom(2, 2)
        bob = _seat(classroom, "B", "Bob", 0, 0)
        alice = _seat(classroom, "A", "Alice", 1, 0)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        detector = ConflictDetector(classroom)

        assert detector.detect_all_conflicts() == detector.detect_all_conflicts()


# ── Suspicious Students ──────────────────────────────────────────────────


class TestSuspiciousStudents:
    @pytest.fixture
    def classroom(self):
        classroom = Classroom(1, 3)
        alice = _seat(classroom, "A", "Alice", 0, 0)
        bob = _seat(classroom, "B", "Bob", 0, 1)
        _seat(classroom, "C", "Carol", 0, 2)
        alice.add_claim(Claim(direction=Direction.RIGHT, target=bob.student))
        bob.add_claim(Claim(direction=Direction.LEFT, target=alice.student))
        # Bob also claims Carol, who never answers
        bob.add_claim(Claim(direction=Direction.RIGHT, target=Student(id="C", name="Carol")))
        return classroom

    def test_strictly_below_threshold(self, classroom):
        # Alice 1.0, Bob 0.5, Carol neutral 0.5
        detector = ConflictDetector(classroom)
        assert detector.find_suspicious_students(0.5) == []
        assert [s.name for s in detector.find_suspicious_students(0.6)] == ["Bob", "Carol"]

    def test_no_claims_not_flagged_at_half(self):
        classroom = Classroom(1, 1)
        _seat(classroom, "A", "Alice", 0, 0)
        assert ConflictDetector(classroom).find_suspicious_students(0.5) == []

    def test_suspicious_conflicts(self, classroom):
        conflicts = ConflictDetector(classroom).suspicious_conflicts(0.6)

        assert {c.student.name for c in conflicts} == {"Bob", "Carol"}
        assert all(c.conflict_type == ConflictType.SUSPICIOUS_PATTERN for c in conflicts)
        assert all(c.involved_student is None for c in conflicts)
