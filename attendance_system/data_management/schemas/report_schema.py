"""Report schemas produced by an attendance analysis pass.

Reports and conflicts are transient: they are recomputed on every analysis
and never mutated afterwards. Nothing here survives a re-placement.

- AttendanceReport: one student's status, clamped confidence and reason
- AttendanceConflict: a claim that contradicts classroom ground truth
- AttendanceAnalysisResult: everything one pipeline run produced
"""

from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from attendance_system.data_management.schemas.claim_schema import LocatedStudent, Student


class AttendanceStatus(str, Enum):
    """Inferred attendance status.

    PRESENT: confidence >= present threshold.
    ABSENT: confidence <= absent threshold.
    UNCERTAIN: between the two thresholds.
    CONFLICTING: never produced by scoring; reserved for manual override.
    """

    PRESENT = "present"
    ABSENT = "absent"
    CONFLICTING = "conflicting"
    UNCERTAIN = "uncertain"


class ConflictType(str, Enum):
    """Kinds of inconsistency between claims and the seating plan.

    CLAIMING_ABSENT_STUDENT: claimed target is not seated anywhere.
    SPATIAL_IMPOSSIBILITY: target is seated, but not in the claimed direction.
    CONTRADICTORY_CLAIMS: reserved, no detector emits it.
    SUSPICIOUS_PATTERN: low reciprocity, a data-quality signal for one student.
    """

    CLAIMING_ABSENT_STUDENT = "claiming_absent_student"
    SPATIAL_IMPOSSIBILITY = "spatial_impossibility"
    CONTRADICTORY_CLAIMS = "contradictory_claims"
    SUSPICIOUS_PATTERN = "suspicious_pattern"


class AttendanceReport(BaseModel):
    """Attendance result for a single student."""

    located_student: LocatedStudent = Field(..., description="The scored student")
    status: AttendanceStatus
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Aggregate confidence, clamped into [0, 1]"
    )
    reason: str = Field(default="", description="Per-strategy score breakdown")

    model_config = {"frozen": True}

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value: float) -> float:
        """Clamp into [0, 1] before range validation."""
        return max(0.0, min(1.0, float(value)))

    @property
    def student(self) -> Student:
        return self.located_student.student

    def __str__(self) -> str:
        return (
            f"{self.student.name}: {self.status.name} "
            f"(confidence: {self.confidence * 100:.2f}%) - {self.reason}"
        )


class AttendanceConflict(BaseModel):
    """A detected inconsistency raised against the accusing student."""

    student: Student = Field(..., description="Student whose claim is inconsistent")
    involved_student: Optional[Student] = Field(
        default=None, description="Student named by the claim, if any"
    )
    conflict_type: ConflictType
    description: str

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "student": {"id": "S001", "name": "Alice"},
                    "involved_student": {"id": "S003", "name": "Carol"},
                    "conflict_type": "claiming_absent_student",
                    "description": "Student claimed to see Carol but they are absent",
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"[{self.conflict_type.name}] {self.student.name}: {self.description}"


class AttendanceAnalysisResult(BaseModel):
    """Output of one full analysis pass over a classroom."""

    reports: list[AttendanceReport] = Field(default_factory=list)
    conflicts: list[AttendanceConflict] = Field(default_factory=list)
    suspicious_students: list[Student] = Field(
        default_factory=list,
        description="Placed students whose reciprocity ratio fell below the threshold",
    )
    analyzed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the analysis ran",
    )

    model_config = {"frozen": True}

    def status_counts(self) -> dict[AttendanceStatus, int]:
        """Number of reports per status; every status is present as a key."""
        counts = Counter(report.status for report in self.reports)
        return {status: counts.get(status, 0) for status in AttendanceStatus}

    def conflict_counts(self) -> dict[ConflictType, int]:
        counts = Counter(conflict.conflict_type for conflict in self.conflicts)
        return {conflict_type: counts.get(conflict_type, 0) for conflict_type in ConflictType}

    def report_for(self, student: Student) -> Optional[AttendanceReport]:
        for report in self.reports:
            if report.student == student:
                return report
        return None
