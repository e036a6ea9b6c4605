from __future__ import annotations

INSTRUCTORS_RESOURCE = "instructors"

INSTRUCTOR_DEFAULTS = {
    "name": "",
    "email": "",
    "password": "",
    "password_confirmation": "",
    "certificate": "",
    # URL of the stored image; a new upload travels separately as a file part.
    "instructor_img": "",
    "birth_date": "",
    "phone_number": "",
    "address": "",
    "quran_memorized_parts": [],
    "quran_passed_parts": [],
    "religious_qualifications": [],
}

TEXT_FIELDS = (
    "name",
    "email",
    "password",
    "password_confirmation",
    "certificate",
    "birth_date",
    "phone_number",
    "address",
)

LIST_FIELDS = (
    "religious_qualifications",
    "quran_memorized_parts",
    "quran_passed_parts",
)
