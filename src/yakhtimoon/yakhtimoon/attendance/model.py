from __future__ import annotations

from dataclasses import dataclass

ATTENDANCE_RESOURCE = "attendance"
LESSONS_RESOURCE = "lessons"
STUDENTS_RESOURCE = "students"

# student_attendance: None until marked, then AttendanceMark (1 present / 0 absent).
ATTENDANCE_DEFAULTS = {
    "lesson_id": 0,
    "student_id": 0,
    "student_attendance": None,
    "student_attendance_time": None,
}


@dataclass(frozen=True)
class QrPayload:
    """Content of a student attendance card."""

    student_id: int
    lesson_id: int
