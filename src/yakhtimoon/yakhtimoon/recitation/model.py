from __future__ import annotations

RECITATIONS_RESOURCE = "recitations"

RECITATION_DEFAULTS = {
    "lesson_id": 0,
    "student_id": 0,
    "recitation_per_page": [],
    "recitation_evaluation": "",
    "current_juz": "",
    "current_juz_page": 1,
    "recitation_notes": "",
    "homework": [],
}

# A session is first anchored to a lesson; outcomes are annotated once it exists.
CREATE_FIELDS = ("lesson_id",)

COURSES_RESOURCE = "courses"
LESSONS_RESOURCE = "lessons"
STUDENTS_RESOURCE = "students"
