from __future__ import annotations

EXAMS_RESOURCE = "exams"
COURSES_RESOURCE = "courses"

EXAM_DEFAULTS = {
    "title": "",
    "exam_date": "",
    "max_mark": 0,
    "passing_mark": 0,
    "course_id": 0,
}
