from __future__ import annotations

import io

from werkzeug.datastructures import FileStorage

from src.yakhtimoon.yakhtimoon.forms.payload import build_multipart


def test_scalars_become_text_parts():
    payload = build_multipart({"name": "Ahmad", "certificate": None, "age": 40})

    assert payload.getlist("name") == ["Ahmad"]
    assert payload.getlist("certificate") == [""]
    assert payload.getlist("age") == ["40"]


def test_lists_become_repeated_bracketed_parts():
    payload = build_multipart({}, {"quran_memorized_parts": [1, 3], "quran_passed_parts": []})

    assert payload.getlist("quran_memorized_parts[]") == ["1", "3"]
    assert "quran_passed_parts[]" not in payload
    assert "quran_memorized_parts" not in payload


def test_file_part_only_when_a_file_was_chosen():
    image = FileStorage(stream=io.BytesIO(b"\x89PNG"), filename="me.png", content_type="image/png")

    with_file = build_multipart({}, files={"instructor_img": image})
    without_file = build_multipart({}, files={"instructor_img": None})

    assert with_file["instructor_img"] is image
    assert "instructor_img" not in without_file
