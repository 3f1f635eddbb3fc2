"""Verification strategies scoring one student's presence in [0.0, 1.0].

Every strategy exposes a stable ``name`` used as its weight key:
- NeighborVerificationStrategy ("NeighborVerification")
- SeatOccupancyStrategy ("SeatOccupancy")
- ConsensusScoreStrategy ("ConsensusScore")
"""

from attendance_system.verification.strategies.base_strategy import VerificationStrategy
from attendance_system.verification.strategies.consensus_score import ConsensusScoreStrategy
from attendance_system.verification.strategies.neighbor_verification import (
    NeighborVerificationStrategy,
)
from attendance_system.verification.strategies.seat_occupancy import SeatOccupancyStrategy


def default_strategies() -> list[VerificationStrategy]:
    """Fresh instances of the three standard strategies, in report order."""
    return [
        NeighborVerificationStrategy(),
        SeatOccupancyStrategy(),
        ConsensusScoreStrategy(),
    ]


__all__ = [
    "VerificationStrategy",
    "NeighborVerificationStrategy",
    "SeatOccupancyStrategy",
    "ConsensusScoreStrategy",
    "default_strategies",
]
