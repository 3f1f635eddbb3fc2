"""Weighted aggregation of verification strategies into an attendance status.

Each configured strategy scores the student; scores are combined as a
weighted mean and clamped into [0, 1]:

    confidence = clamp(sum(score_i * weight_i) / sum(weight_i))

A strategy missing from the weight mapping gets weight 1.0. Weights do not
need to sum to 1.0, only to a positive total; normalizing them is the
caller's choice (AttendancePipeline.set_strategy_weights does).

Status decision, in order:
- confidence >= present_threshold (0.65): PRESENT
- confidence <= absent_threshold (0.35): ABSENT
- otherwise: UNCERTAIN

CONFLICTING is never assigned here; it is reserved for manual override.

Usage:
    from attendance_system.verification.attendance_aggregator import AttendanceAggregator

    aggregator = AttendanceAggregator()
    aggregator.set_classroom(classroom)
    report = aggregator.score_student(located_student)
"""

from typing import Mapping, Optional, Sequence

import structlog

from attendance_system.config.settings import settings
from attendance_system.config.verification_defaults import UNLISTED_STRATEGY_WEIGHT
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import (
    AttendanceReport,
    AttendanceStatus,
    LocatedStudent,
)
from attendance_system.verification.strategies import (
    VerificationStrategy,
    default_strategies,
)


class AttendanceAggregator:
    """Combines strategy scores into one AttendanceReport per student.

    The aggregator keeps no state between calls other than its
    configuration and the bound classroom, so scoring an unchanged
    classroom twice yields equal reports.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[VerificationStrategy]] = None,
        strategy_weights: Optional[Mapping[str, float]] = None,
        present_threshold: Optional[float] = None,
        absent_threshold: Optional[float] = None,
    ) -> None:
        """Initialize AttendanceAggregator.

        Args:
            strategies: Strategies to run, in reason-string order.
                        Defaults to the three standard strategies.
            strategy_weights: Strategy name -> weight. Defaults to settings.
            present_threshold: PRESENT cut-off. Defaults to settings.
            absent_threshold: ABSENT cut-off. Defaults to settings.

        Raises:
            ValueError: If total weight is not positive or thresholds are invalid.
        """
        self._strategies: list[VerificationStrategy] = (
            list(strategies) if strategies is not None else default_strategies()
        )
        self._strategy_weights: dict[str, float] = {}
        self._present_threshold = settings.present_threshold
        self._absent_threshold = settings.absent_threshold
        self._classroom: Optional[Classroom] = None
        self._logger = structlog.get_logger().bind(component="AttendanceAggregator")

        self.set_weights(
            strategy_weights if strategy_weights is not None else settings.strategy_weights
        )
        self.set_thresholds(
            present_threshold if present_threshold is not None else settings.present_threshold,
            absent_threshold if absent_threshold is not None else settings.absent_threshold,
        )

    @property
    def strategies(self) -> list[VerificationStrategy]:
        return list(self._strategies)

    @property
    def strategy_weights(self) -> dict[str, float]:
        return dict(self._strategy_weights)

    @property
    def present_threshold(self) -> float:
        return self._present_threshold

    @property
    def absent_threshold(self) -> float:
        return self._absent_threshold

    @property
    def classroom(self) -> Optional[Classroom]:
        return self._classroom

    def set_classroom(self, classroom: Classroom) -> None:
        """Bind the classroom context used by subsequent scoring."""
        self._classroom = classroom

    def set_weights(self, strategy_weights: Mapping[str, float]) -> None:
        """Replace strategy weights after validating their effective total.

        Raises:
            ValueError: If the configured strategies' weights do not sum to > 0.
        """
        weights = dict(strategy_weights)
        total = sum(
            weights.get(strategy.name, UNLISTED_STRATEGY_WEIGHT)
            for strategy in self._strategies
        )
        if total <= 0:
            raise ValueError(
                f"Strategy weights must sum to a positive value, got {total}"
            )
        self._strategy_weights = weights

    def set_thresholds(self, present_threshold: float, absent_threshold: float) -> None:
        """Replace status thresholds.

        Raises:
            ValueError: If a threshold is outside [0, 1] or absent > present.
        """
        for label, value in (("present", present_threshold), ("absent", absent_threshold)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{label} threshold must be within [0, 1], got {value}")
        if absent_threshold > present_threshold:
            raise ValueError(
                f"absent threshold ({absent_threshold}) must not exceed "
                f"present threshold ({present_threshold})"
            )
        self._present_threshold = present_threshold
        self._absent_threshold = absent_threshold

    def score_student(self, student: LocatedStudent) -> AttendanceReport:
        """Score one student with every strategy.

        Args:
            student: Student to score; need not be placed.

        Returns:
            A fresh AttendanceReport with clamped confidence and a
            "<Name>: <score> | ..." reason string.

        Raises:
            RuntimeError: If no classroom has been bound.
        """
        if self._classroom is None:
            raise RuntimeError("Classroom must be set before scoring students")

        total_score = 0.0
        total_weight = 0.0
        details: list[str] = []

        for strategy in self._strategies:
            strategy_score = strategy.score(student, self._classroom)
            weight = self._strategy_weights.get(strategy.name, UNLISTED_STRATEGY_WEIGHT)

            total_score += strategy_score * weight
            total_weight += weight
            details.append(f"{strategy.name}: {strategy_score:.2f}")

        confidence = total_score / total_weight if total_weight > 0 else 0.0
        confidence = max(0.0, min(1.0, confidence))
        status = self._determine_status(confidence)

        self._logger.debug(
            "student_scored",
            student_id=student.student.id,
            confidence=round(confidence, 4),
            status=status.value,
        )

        return AttendanceReport(
            located_student=student,
            status=status,
            confidence=confidence,
            reason=" | ".join(details),
        )

    def generate_report(self, classroom: Classroom) -> list[AttendanceReport]:
        """Bind ``classroom`` and score every placed student.

        Args:
            classroom: Classroom to analyze.

        Returns:
            One report per placed student, in placement order.
        """
        self.set_classroom(classroom)
        reports = [self.score_student(located) for located in classroom.located_students()]

        self._logger.info(
            "classroom_scored",
            students=len(reports),
            present=sum(1 for r in reports if r.status == AttendanceStatus.PRESENT),
            absent=sum(1 for r in reports if r.status == AttendanceStatus.ABSENT),
        )
        return reports

    def _determine_status(self, confidence: float) -> AttendanceStatus:
        if confidence >= self._present_threshold:
            return AttendanceStatus.PRESENT
        if confidence <= self._absent_threshold:
            return AttendanceStatus.ABSENT
        return AttendanceStatus.UNCERTAIN
