from __future__ import annotations

import base64
import io

import pytest

from src.yakhtimoon.yakhtimoon.attendance.model import QrPayload
from src.yakhtimoon.yakhtimoon.attendance.qr import (
    decode_data_url,
    decode_image,
    encode_qr_payload,
    parse_qr_payload,
    render_qr_png,
)


def test_parse_accepts_numeric_strings():
    assert parse_qr_payload('{"student_id": "7", "lesson_id": 3}') == QrPayload(student_id=7, lesson_id=3)


@pytest.mark.parametrize("data", ["", "7", "null", '{"lesson_id": 3}', '{"student_id": true, "lesson_id": 3}'])
def test_parse_rejects_invalid_cards(data):
    with pytest.raises(ValueError):
        parse_qr_payload(data)


def test_rendered_card_decodes_from_uploaded_image():
    png = render_qr_png(encode_qr_payload(student_id=7, lesson_id=3))

    assert png.startswith(b"\x89PNG")
    assert parse_qr_payload(decode_image(io.BytesIO(png))) == QrPayload(student_id=7, lesson_id=3)


def test_rendered_card_decodes_from_camera_frame():
    png = render_qr_png(encode_qr_payload(student_id=12, lesson_id=5))
    frame = "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    assert parse_qr_payload(decode_data_url(frame)) == QrPayload(student_id=12, lesson_id=5)


def test_unreadable_images_decode_to_none():
    assert decode_image(io.BytesIO(b"not an image")) is None
    assert decode_data_url("data:image/png;base64,@@@") is None
    assert decode_data_url("") is None
