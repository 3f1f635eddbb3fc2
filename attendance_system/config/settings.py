"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from attendance_system.config.verification_defaults import (
    ABSENT_THRESHOLD,
    CONSENSUS_SCORE,
    DEFAULT_STRATEGY_WEIGHTS,
    NEIGHBOR_VERIFICATION,
    PRESENT_THRESHOLD,
    SEAT_OCCUPANCY,
    SUSPICIOUS_RECIPROCITY_THRESHOLD,
)


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        neighbor_weight: Weight of the NeighborVerification strategy
        occupancy_weight: Weight of the SeatOccupancy strategy
        consensus_weight: Weight of the ConsensusScore strategy
        present_threshold: Confidence at or above which a student is PRESENT
        absent_threshold: Confidence at or below which a student is ABSENT
        suspicious_threshold: Reciprocity ratio below which a student is suspicious
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
    """

    neighbor_weight: float = Field(
        default=DEFAULT_STRATEGY_WEIGHTS[NEIGHBOR_VERIFICATION],
        ge=0.0,
        description="Weight of the NeighborVerification strategy"
    )
    occupancy_weight: float = Field(
        default=DEFAULT_STRATEGY_WEIGHTS[SEAT_OCCUPANCY],
        ge=0.0,
        description="Weight of the SeatOccupancy strategy"
    )
    consensus_weight: float = Field(
        default=DEFAULT_STRATEGY_WEIGHTS[CONSENSUS_SCORE],
        ge=0.0,
        description="Weight of the ConsensusScore strategy"
    )
    present_threshold: float = Field(
        default=PRESENT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Confidence at or above which a student is PRESENT"
    )
    absent_threshold: float = Field(
        default=ABSENT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Confidence at or below which a student is ABSENT"
    )
    suspicious_threshold: float = Field(
        default=SUSPICIOUS_RECIPROCITY_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Reciprocity ratio below which a student is flagged"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def check_weights_and_thresholds(self) -> "Settings":
        """Reject configurations that cannot drive an aggregation run."""
        if sum(self.strategy_weights.values()) <= 0:
            raise ValueError("Strategy weights must sum to a positive value")
        if self.absent_threshold > self.present_threshold:
            raise ValueError(
                f"absent_threshold ({self.absent_threshold}) must not exceed "
                f"present_threshold ({self.present_threshold})"
            )
        return self

    @property
    def strategy_weights(self) -> dict[str, float]:
        """Strategy name -> weight mapping consumed by the aggregator."""
        return {
            NEIGHBOR_VERIFICATION: self.neighbor_weight,
            SEAT_OCCUPANCY: self.occupancy_weight,
            CONSENSUS_SCORE: self.consensus_weight,
        }


# Singleton instance - import this throughout the application
settings = Settings()
