"""Schema package for seating, claim and attendance report data structures.

Design principles:
- Value objects (Position, Student, Claim) are frozen and compare by value
- LocatedStudent owns an append-only claim list and a caller-managed status
- Reports and conflicts are produced fresh by every analysis pass

Usage:
    from attendance_system.data_management.schemas import (
        Claim, Direction, LocatedStudent, Position, Student,
    )

    alice = LocatedStudent(student=Student(id="S001", name="Alice"))
    alice.set_position(Position(row=0, col=0))
    alice.add_claim(Claim(direction=Direction.RIGHT, target=Student(id="S002", name="Bob")))
"""

# Spatial schemas
from attendance_system.data_management.schemas.spatial_schema import (
    Direction,
    Position,
)

# Claim schemas
from attendance_system.data_management.schemas.claim_schema import (
    Claim,
    LocatedStudent,
    SeatStatus,
    Student,
)

# Report schemas
from attendance_system.data_management.schemas.report_schema import (
    AttendanceAnalysisResult,
    AttendanceConflict,
    AttendanceReport,
    AttendanceStatus,
    ConflictType,
)

__all__ = [
    # Spatial
    "Direction",
    "Position",
    # Claims
    "Claim",
    "LocatedStudent",
    "SeatStatus",
    "Student",
    # Reports
    "AttendanceAnalysisResult",
    "AttendanceConflict",
    "AttendanceReport",
    "AttendanceStatus",
    "ConflictType",
]
