"""Verification engine for peer-reported classroom attendance.

Core workflow:
1. Strategies score each student's presence from different evidence
2. AttendanceAggregator combines weighted scores into PRESENT/ABSENT/UNCERTAIN
3. PeerVerifier computes claim reciprocity
4. ConflictDetector surfaces claims that contradict the seating plan

Every component reads the classroom and claim lists without mutating them.
"""

from attendance_system.verification.attendance_aggregator import AttendanceAggregator
from attendance_system.verification.conflict_detector import ConflictDetector
from attendance_system.verification.peer_verifier import PeerVerifier
from attendance_system.verification.strategies import (
    ConsensusScoreStrategy,
    NeighborVerificationStrategy,
    SeatOccupancyStrategy,
    VerificationStrategy,
    default_strategies,
)

__all__ = [
    "AttendanceAggregator",
    "ConflictDetector",
    "PeerVerifier",
    "VerificationStrategy",
    "NeighborVerificationStrategy",
    "SeatOccupancyStrategy",
    "ConsensusScoreStrategy",
    "default_strategies",
]
