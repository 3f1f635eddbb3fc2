"""Pipeline orchestration from seating plan to attendance results.

- AttendancePipeline: scoring + manual overrides + conflict detection
"""

from attendance_system.pipeline.attendance_pipeline import AttendancePipeline

__all__ = ["AttendancePipeline"]
