"""Seating data: schemas plus the Classroom ground-truth container."""

from attendance_system.data_management.classroom import Classroom

__all__ = ["Classroom"]
