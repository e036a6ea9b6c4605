"""QR attendance cards: payload format, image rendering and decoding.

Cards carry a JSON object ``{"student_id": ..., "lesson_id": ...}``. Decoding
accepts either an uploaded snapshot (Pillow) or a camera frame posted by the
browser as a base64 data URL (numpy + OpenCV); both go through pyzbar.
"""

from __future__ import annotations

import base64
import binascii
import io
import json
from typing import IO, Optional, Sequence

import cv2
import numpy as np
import qrcode
from PIL import Image, UnidentifiedImageError
from pyzbar.pyzbar import decode as pyzbar_decode

from ..common.validators import require_positive_int
from .model import QrPayload


def encode_qr_payload(student_id: int, lesson_id: int) -> str:
    return json.dumps({"student_id": int(student_id), "lesson_id": int(lesson_id)}, separators=(",", ":"))


def parse_qr_payload(data: str) -> QrPayload:
    """Parse a scanned string; ``ValueError`` when it is not a valid card."""
    try:
        parsed = json.loads(data)
    except (TypeError, ValueError) as exc:
        raise ValueError("QR payload is not JSON") from exc

    if not isinstance(parsed, dict):
        raise ValueError("QR payload is not an object")

    return QrPayload(
        student_id=require_positive_int(parsed.get("student_id")),
        lesson_id=require_positive_int(parsed.get("lesson_id")),
    )


def render_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def decode_image(stream: IO[bytes]) -> Optional[str]:
    """Decode the first QR code of an uploaded image, ``None`` when there is none."""
    try:
        img = Image.open(stream).convert("RGB")
    except (UnidentifiedImageError, OSError):
        return None
    return _first_symbol(pyzbar_decode(img))


def decode_data_url(data_url: str) -> Optional[str]:
    """Decode the first QR code of a camera frame sent as ``data:image/...;base64,...``."""
    encoded = data_url.split(",", 1)[1] if data_url.startswith("data:") and "," in data_url else data_url
    try:
        raw = base64.b64decode(encoded)
    except (binascii.Error, ValueError):
        return None
    if not raw:
        return None

    img = cv2.imdecode(np.frombuffer(raw, np.uint8), cv2.IMREAD_UNCHANGED)
    if img is None:
        return None
    if len(img.shape) == 3 and img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
    gray = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY) if len(img.shape) == 3 else img
    return _first_symbol(pyzbar_decode(np.ascontiguousarray(gray, dtype=np.uint8)))


def _first_symbol(decoded: Sequence) -> Optional[str]:
    if not decoded:
        return None
    text = decoded[0].data.decode("utf-8", errors="replace").strip()
    return text or None
