from __future__ import annotations

from enum import Enum, IntEnum


class AttendanceMark(IntEnum):
    """Attendance status values as stored by the API."""

    ABSENT = 0
    PRESENT = 1


class ScanState(str, Enum):
    """QR scanner lifecycle of the attendance form."""

    IDLE = "idle"
    SCANNING = "scanning"
    RESOLVED = "resolved"


class RecitationEvaluation(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    SO_BAD = "So Bad"


class Section(str, Enum):
    """Sidebar sections, in display order."""

    COURSES = "courses"
    STUDENTS = "students"
    INSTRUCTORS = "instructors"
    LESSONS = "lessons"
    EXAMS = "exams"
    ATTENDANCE = "attendance"
    STUDENT_EXAMS = "studentExams"
    RECITATION = "recitation"
    COURSE_FILES = "courseFiles"
