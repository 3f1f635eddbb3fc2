"""Default verification parameters for attendance scoring.

Strategy weights (must total > 0, normalized to 1.0 by default):
1. NeighborVerification: 0.4 (directional reciprocity from adjacent seats)
2. SeatOccupancy: 0.35 (structural signal: placed / has claims)
3. ConsensusScore: 0.25 (direction-agnostic peer mentions)

Status thresholds:
- confidence >= 0.65: PRESENT
- confidence <= 0.35: ABSENT
- otherwise: UNCERTAIN
"""

from typing import Dict

# Stable strategy names, used as configuration keys
NEIGHBOR_VERIFICATION = "NeighborVerification"
SEAT_OCCUPANCY = "SeatOccupancy"
CONSENSUS_SCORE = "ConsensusScore"

DEFAULT_STRATEGY_WEIGHTS: Dict[str, float] = {
    NEIGHBOR_VERIFICATION: 0.4,
    SEAT_OCCUPANCY: 0.35,
    CONSENSUS_SCORE: 0.25,
}

# Weight applied to a strategy missing from the weight mapping
UNLISTED_STRATEGY_WEIGHT = 1.0

PRESENT_THRESHOLD = 0.65
ABSENT_THRESHOLD = 0.35

# Reciprocity ratio below which a student is reported as suspicious
SUSPICIOUS_RECIPROCITY_THRESHOLD = 0.5

# Score returned when evidence is structurally absent
NEUTRAL_SCORE = 0.5

# SeatOccupancy table keyed by (placed, has_claims)
SEAT_OCCUPANCY_SCORES: Dict[tuple[bool, bool], float] = {
    (True, True): 0.95,   # Seated and engaged with peers
    (True, False): 0.85,
    (False, True): 0.60,  # Reported neighbors without placing themselves
    (False, False): 0.10,
}
