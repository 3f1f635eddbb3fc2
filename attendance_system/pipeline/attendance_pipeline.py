"""Attendance analysis pipeline: one call from seating plan to results.

Wires the verification engine together for the collaborator layer (UI,
import, persistence):

1. Score every roster student with the AttendanceAggregator
2. Replace overridden students' reports with manual decisions
3. Detect conflicts and suspicious students over the same classroom

The classroom must stay unchanged while analyze_attendance() runs.

Usage:
    from attendance_system.pipeline import AttendancePipeline

    pipeline = AttendancePipeline()
    pipeline.set_classroom(classroom)
    result = pipeline.analyze_attendance()
    print(result.status_counts())
"""

from typing import Iterable, Mapping, Optional

from attendance_system.config.settings import Settings, settings as default_settings
from attendance_system.config.verification_defaults import (
    CONSENSUS_SCORE,
    NEIGHBOR_VERIFICATION,
    SEAT_OCCUPANCY,
)
from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import (
    AttendanceAnalysisResult,
    AttendanceReport,
    AttendanceStatus,
    LocatedStudent,
)
from attendance_system.utils.logging import analysis_context, get_structured_logger
from attendance_system.verification.attendance_aggregator import AttendanceAggregator
from attendance_system.verification.conflict_detector import ConflictDetector


class AttendancePipeline:
    """Orchestrates scoring, overrides and conflict detection for a classroom.

    Holds configuration and the last result between runs; each run is a
    full re-analysis.
    """

    def __init__(
        self,
        aggregator: Optional[AttendanceAggregator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize AttendancePipeline.

        Args:
            aggregator: Pre-configured aggregator. Built from settings if None.
            settings: Configuration source. Defaults to the global settings.
        """
        self._settings = settings or default_settings
        self._aggregator = aggregator or AttendanceAggregator(
            strategy_weights=self._settings.strategy_weights,
            present_threshold=self._settings.present_threshold,
            absent_threshold=self._settings.absent_threshold,
        )
        self._classroom: Optional[Classroom] = None
        self._conflict_detector: Optional[ConflictDetector] = None
        self._located_students: Optional[list[LocatedStudent]] = None
        self._manual_overrides: dict[str, AttendanceStatus] = {}
        self._last_result: Optional[AttendanceAnalysisResult] = None
        self._logger = get_structured_logger("AttendancePipeline")

    @property
    def aggregator(self) -> AttendanceAggregator:
        return self._aggregator

    @property
    def last_result(self) -> Optional[AttendanceAnalysisResult]:
        """Result of the most recent analyze_attendance() call, if any."""
        return self._last_result

    def set_classroom(self, classroom: Classroom) -> None:
        self._classroom = classroom
        self._aggregator.set_classroom(classroom)
        self._conflict_detector = ConflictDetector(classroom)

    def set_located_students(self, students: Iterable[LocatedStudent]) -> None:
        """Set the roster to score; may include students without a seat.

        When never set, the classroom's placed students are scored.
        """
        self._located_students = list(students)

    def set_manual_overrides(
        self, overrides: Optional[Mapping[str, AttendanceStatus]]
    ) -> None:
        """Force statuses by student name, e.g. after an instructor's head count."""
        self._manual_overrides = dict(overrides) if overrides else {}

    def set_strategy_weights(
        self,
        neighbor_weight: float,
        occupancy_weight: float,
        consensus_weight: float,
    ) -> None:
        """Normalize the three weights to sum to 1.0 and rebuild the aggregator.

        Raises:
            ValueError: If the weights do not sum to a positive value.
        """
        total = neighbor_weight + occupancy_weight + consensus_weight
        if total <= 0:
            raise ValueError(f"Strategy weights must sum to a positive value, got {total}")

        weights = {
            NEIGHBOR_VERIFICATION: neighbor_weight / total,
            SEAT_OCCUPANCY: occupancy_weight / total,
            CONSENSUS_SCORE: consensus_weight / total,
        }
        self._aggregator = AttendanceAggregator(
            strategies=self._aggregator.strategies,
            strategy_weights=weights,
            present_threshold=self._aggregator.present_threshold,
            absent_threshold=self._aggregator.absent_threshold,
        )
        if self._classroom is not None:
            self._aggregator.set_classroom(self._classroom)

        self._logger.info("strategy_weights_updated", weights=weights)

    def set_thresholds(self, present_threshold: float, absent_threshold: float) -> None:
        self._aggregator.set_thresholds(present_threshold, absent_threshold)

    def analyze_attendance(self) -> AttendanceAnalysisResult:
        """Run a full analysis pass over the current classroom.

        Returns:
            AttendanceAnalysisResult with reports, conflicts and suspicious
            students. Also kept as ``last_result``.

        Raises:
            RuntimeError: If no classroom has been set.
        """
        if self._classroom is None or self._conflict_detector is None:
            raise RuntimeError("Classroom must be set before analysis")

        roster = (
            self._located_students
            if self._located_students is not None
            else self._classroom.located_students()
        )
        threshold = self._settings.suspicious_threshold

        with analysis_context(self._classroom.rows, self._classroom.cols):
            reports = [
                self._apply_override(self._aggregator.score_student(student))
                for student in roster
            ]
            result = AttendanceAnalysisResult(
                reports=reports,
                conflicts=self._conflict_detector.detect_all_conflicts(),
                suspicious_students=self._conflict_detector.find_suspicious_students(
                    threshold
                ),
            )
            self._logger.info(
                "analysis_complete",
                reports=len(result.reports),
                conflicts=len(result.conflicts),
                suspicious=len(result.suspicious_students),
                overrides=len(self._manual_overrides),
            )

        self._last_result = result
        return result

    def _apply_override(self, report: AttendanceReport) -> AttendanceReport:
        override = self._manual_overrides.get(report.student.name)
        if override is None:
            return report
        return AttendanceReport(
            located_student=report.located_student,
            status=override,
            confidence=1.0,
            reason=f"Manual override: {override.name}",
        )
