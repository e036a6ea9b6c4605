from __future__ import annotations

import io
import re

import pytest

from src.yakhtimoon.yakhtimoon.attendance.qr import encode_qr_payload, render_qr_png
from src.yakhtimoon.yakhtimoon.container import build_container
from src.yakhtimoon.yakhtimoon.core.exceptions import ApiError, ApiValidationError
from src.yakhtimoon.yakhtimoon.main import create_app


class InMemoryApi:
    def __init__(self):
        self.lists = {
            "courses": [{"id": 5, "title": "Hifz A"}],
            "lessons": [{"id": 3, "lesson_title": "Al-Mulk", "lesson_date": "2025-03-01", "course_id": 5}],
            "students": [{"id": 7, "name": "Yusuf", "course_id": 5}],
        }
        self.records = {("exams", 11): {"id": 11, "title": "Final", "exam_date": "2025-06-01", "max_mark": 100,
                                         "passing_mark": 60, "course_id": 5}}
        self.saved = []
        self.save_error = None

    def get_all(self, resource):
        return list(self.lists.get(resource, []))

    def get(self, resource, record_id):
        try:
            return dict(self.records[(resource, record_id)])
        except KeyError:
            raise ApiError(f"GET {resource}/{record_id} failed with HTTP 404", status=404)

    def save(self, resource, payload, *, record_id=None):
        if self.save_error is not None:
            raise self.save_error
        self.saved.append((resource, payload, record_id))
        return {"id": record_id or 1}


@pytest.fixture
def api():
    return InMemoryApi()


@pytest.fixture
def client(api, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(api_base_url="http://api.test/api", repository=api, locale="en")
    app = create_app(container)
    return app.test_client()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_navigation_is_kept_in_the_session(client):
    page = client.get("/")
    assert b"This section is managed elsewhere." in page.data

    response = client.post("/navigate", data={"section": "exams"})
    assert response.status_code == 302

    page = client.get("/")
    assert b'href="/exams/new"' in page.data


def test_unknown_section_is_flashed(client):
    client.post("/navigate", data={"section": "payroll"})

    assert b"Unknown section: payroll" in client.get("/").data


def test_sidebar_toggle_json(client):
    assert client.post("/sidebar/toggle", json={}).get_json() == {"success": True, "is_open": True}
    assert client.post("/sidebar/toggle", json={}).get_json() == {"success": True, "is_open": False}


def test_exam_create_and_edit(client, api):
    page = client.get("/exams/new")
    assert b"Add New Exam" in page.data
    assert b"Hifz A" in page.data

    response = client.post(
        "/exams/save",
        data={"record_id": "", "title": "Midterm", "exam_date": "2025-04-01", "max_mark": "50",
              "passing_mark": "25", "course_id": "5"},
    )
    assert response.status_code == 302
    assert api.saved[-1] == (
        "exams",
        {"title": "Midterm", "exam_date": "2025-04-01", "max_mark": 50, "passing_mark": 25, "course_id": 5},
        None,
    )

    page = client.get("/exams/11/edit")
    assert b"Edit Exam" in page.data
    assert b'value="Final"' in page.data


def test_exam_validation_errors_are_rendered_next_to_fields(client, api):
    api.save_error = ApiValidationError("The given data was invalid.", {"title": ["The title field is required."]})

    response = client.post("/exams/save", data={"record_id": "11", "title": ""})

    assert response.status_code == 422
    assert b"The title field is required." in response.data
    assert b"Please correct the highlighted fields." in response.data


def test_missing_record_redirects_with_notice(client):
    response = client.get("/exams/999/edit", follow_redirects=True)

    assert b"The record could not be loaded." in response.data


def test_instructor_password_mismatch_is_not_saved(client, api):
    response = client.post(
        "/instructors/save",
        data={"record_id": "", "name": "Ahmad", "password": "a1", "password_confirmation": "b2"},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert b"Passwords do not match" in response.data
    assert api.saved == []


def test_instructor_save_sends_repeated_parts_and_image(client, api):
    response = client.post(
        "/instructors/save",
        data={
            "record_id": "",
            "name": "Ahmad",
            "password": "s3cret",
            "password_confirmation": "s3cret",
            "quran_memorized_parts[]": ["1", "3"],
            "instructor_img": (io.BytesIO(b"\x89PNG"), "ahmad.png"),
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 302
    resource, payload, record_id = api.saved[0]
    assert resource == "instructors" and record_id is None
    assert payload.getlist("quran_memorized_parts[]") == ["1", "3"]
    assert payload["instructor_img"].filename == "ahmad.png"


def test_instructor_password_toggle_rerenders_without_saving(client, api):
    response = client.post(
        "/instructors/save",
        data={"record_id": "", "action": "toggle_password", "password": "abc"},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    password_input = re.search(rb'<input type="(\w+)"[^>]*id="password"', response.data)
    assert password_input.group(1) == b"text"
    assert api.saved == []


def test_recitation_form_is_scoped_to_the_course(client, api):
    page = client.get("/recitation/new?course_id=5")

    assert b"Al-Mulk - 2025-03-01" in page.data
    assert b"Hifz A" in page.data
    assert b'name="homework[]"' not in page.data

    response = client.post("/recitation/save", data={"record_id": "", "course_id": "5", "lesson_id": "3"})
    assert response.status_code == 302
    assert api.saved[-1] == ("recitations", {"lesson_id": 3}, None)


def test_attendance_scan_flow(client):
    state = {"lesson_id": 0, "student_id": 0, "student_attendance": None, "student_attendance_time": None}

    toggled = client.post("/api/attendance/qr/toggle", json={"state": state, "scan_state": "idle"}).get_json()
    assert toggled["scan_state"] == "scanning"

    scanned = client.post(
        "/api/attendance/qr/scan",
        json={"state": toggled["state"], "scan_state": "scanning", "data": encode_qr_payload(7, 3)},
    ).get_json()
    assert scanned["resolved"] is True
    assert scanned["scan_state"] == "resolved"
    assert scanned["state"]["student_id"] == 7
    assert scanned["state"]["student_attendance"] == 1
    assert scanned["state"]["student_attendance_time"]


def test_attendance_invalid_scan_is_rejected(client):
    response = client.post("/api/attendance/qr/scan", json={"state": {}, "scan_state": "scanning", "data": "{oops"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid QR code format"
    assert response.get_json()["state"]["student_id"] == 0


def test_attendance_manual_lookup(client):
    found = client.post("/api/attendance/qr/manual", json={"state": {}, "qr_input": "7"})
    missing = client.post("/api/attendance/qr/manual", json={"state": {}, "qr_input": "70"})

    assert found.get_json()["student"]["name"] == "Yusuf"
    assert found.get_json()["state"]["student_attendance"] == 1
    assert missing.status_code == 400
    assert missing.get_json()["message"] == "Student not found"


def test_attendance_card_png_and_upload(client):
    card = client.get("/api/attendance/qr/7/3.png")
    assert card.mimetype == "image/png"

    response = client.post(
        "/api/attendance/qr/image",
        data={"image": (io.BytesIO(card.data), "card.png"), "state": "{}", "scan_state": "idle"},
        content_type="multipart/form-data",
    )
    body = response.get_json()
    assert body["resolved"] is True
    assert body["state"]["lesson_id"] == 3


def test_attendance_upload_without_qr(client):
    response = client.post(
        "/api/attendance/qr/image",
        data={"image": (io.BytesIO(b"not an image"), "x.png"), "state": "{}"},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "No QR code detected in the image"


def test_attendance_save_stamps_time(client, api):
    response = client.post(
        "/attendance/save",
        data={"record_id": "", "lesson_id": "3", "student_id": "7", "student_attendance": "1"},
    )

    assert response.status_code == 302
    resource, payload, _ = api.saved[0]
    assert resource == "attendance"
    assert payload["student_attendance_time"].endswith("Z")


def test_attendance_page_renders_scanner(client):
    page = client.get("/attendance/new")

    assert b"QR Attendance Options" in page.data
    assert b"Yusuf" in page.data
    assert render_qr_png(encode_qr_payload(7, 3)).startswith(b"\x89PNG")


def test_rejected_card_upload_keeps_the_scanner_state(client):
    card = render_qr_png('{"student_id": 7}')

    response = client.post(
        "/api/attendance/qr/image",
        data={"image": (io.BytesIO(card), "card.png"), "state": "{}", "scan_state": "idle"},
        content_type="multipart/form-data",
    )

    body = response.get_json()
    assert response.status_code == 400
    assert body["message"] == "Invalid QR code format"
    assert body["scan_state"] == "idle"
    assert body["state"]["student_attendance"] is None


def test_api_failure_on_save_is_reported_and_the_form_rerendered(client, api):
    api.save_error = ApiError("POST exams failed: timed out")

    response = client.post("/exams/save", data={"record_id": "", "title": "Midterm"})

    assert response.status_code == 502
    assert b"Something went wrong, please try again." in response.data
    assert b'value="Midterm"' in response.data


def test_recitation_edit_rerender_keeps_student_info(client, api):
    api.save_error = ApiValidationError("The given data was invalid.", {"lesson_id": ["The lesson id is invalid."]})

    response = client.post(
        "/recitation/save",
        data={"record_id": "30", "course_id": "5", "student_id": "7", "lesson_id": "3"},
    )

    assert response.status_code == 422
    assert b"Student Information" in response.data
    assert b"Yusuf" in response.data
    assert b"The lesson id is invalid." in response.data


def test_camera_polling_sends_one_frame_at_a_time(client):
    page = client.get("/attendance/new").data

    assert b"if (scanInFlight || !video.videoWidth) { return; }" in page
    assert b'if (clientState.scan_state === "scanning") { apply(body); }' in page
