from __future__ import annotations

import io
import json
import socket
from urllib.error import HTTPError, URLError

import pytest
from werkzeug.datastructures import FileStorage, MultiDict

from src.yakhtimoon.yakhtimoon.api.http_repository import HttpResourceRepository, unwrap_collection
from src.yakhtimoon.yakhtimoon.core.exceptions import ApiError, ApiValidationError


class FakeResponse:
    def __init__(self, body):
        self._raw = json.dumps(body).encode("utf-8")

    def read(self):
        return self._raw

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeOpener:
    def __init__(self, *responses):
        self._responses = list(responses)
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return FakeResponse(response)


def _http_error(code, body):
    return HTTPError("http://api.test/api/exams", code, "error", {}, io.BytesIO(json.dumps(body).encode("utf-8")))


@pytest.mark.parametrize(
    "body",
    [
        [{"id": 1}, {"id": 2}],
        {"data": [{"id": 1}, {"id": 2}]},
        {"lessons": [{"id": 1}, {"id": 2}]},
    ],
)
def test_collection_envelopes_normalize_to_the_same_list(body):
    repo = HttpResourceRepository("http://api.test/api/", opener=FakeOpener(body))

    assert repo.get_all("lessons") == [{"id": 1}, {"id": 2}]


def test_unexpected_collection_shape_is_empty():
    assert unwrap_collection("lessons", {"message": "ok"}) == []
    assert unwrap_collection("lessons", None) == []


def test_get_unwraps_data_and_sends_auth_header():
    opener = FakeOpener({"data": {"id": 4, "name": "Ahmad"}})
    repo = HttpResourceRepository("http://api.test/api", token="abc", opener=opener)

    assert repo.get("instructors", 4) == {"id": 4, "name": "Ahmad"}
    req = opener.requests[0]
    assert req.full_url == "http://api.test/api/instructors/4"
    assert req.get_method() == "GET"
    assert req.get_header("Authorization") == "Bearer abc"


def test_json_save_uses_post_to_create_and_put_to_update():
    opener = FakeOpener({"data": {"id": 9}}, {"id": 9})
    repo = HttpResourceRepository("http://api.test/api", opener=opener)

    repo.save("exams", {"title": "Final"})
    repo.save("exams", {"title": "Final"}, record_id=9)

    create, update = opener.requests
    assert (create.get_method(), create.full_url) == ("POST", "http://api.test/api/exams")
    assert (update.get_method(), update.full_url) == ("PUT", "http://api.test/api/exams/9")
    assert json.loads(update.data) == {"title": "Final"}
    assert update.get_header("Content-type") == "application/json"


def test_multipart_update_is_spoofed_over_post():
    opener = FakeOpener({"data": {"id": 4}})
    repo = HttpResourceRepository("http://api.test/api", opener=opener)
    payload = MultiDict([("name", "Ahmad"), ("quran_memorized_parts[]", "1"), ("quran_memorized_parts[]", "3")])
    payload.add("instructor_img", FileStorage(io.BytesIO(b"\x89PNG"), filename="a.png", content_type="image/png"))

    repo.save("instructors", payload, record_id=4)

    req = opener.requests[0]
    assert req.get_method() == "POST"
    assert req.get_header("Content-type").startswith("multipart/form-data; boundary=")
    assert req.data.count(b'name="quran_memorized_parts[]"') == 2
    assert b'name="_method"' in req.data and b"PUT" in req.data
    assert b'filename="a.png"' in req.data
    assert "_method" not in payload


def test_422_raises_validation_error_with_field_map():
    body = {"message": "The given data was invalid.", "errors": {"email": ["The email has already been taken."]}}
    repo = HttpResourceRepository("http://api.test/api", opener=FakeOpener(_http_error(422, body)))

    with pytest.raises(ApiValidationError) as exc:
        repo.save("instructors", {"email": "taken@example.org"})

    assert exc.value.status == 422
    assert exc.value.errors == {"email": ["The email has already been taken."]}


def test_other_failures_raise_api_error():
    repo = HttpResourceRepository(
        "http://api.test/api",
        opener=FakeOpener(_http_error(500, {}), URLError("connection refused")),
    )

    with pytest.raises(ApiError) as server:
        repo.get_all("courses")
    with pytest.raises(ApiError) as network:
        repo.get_all("courses")

    assert server.value.status == 500
    assert not isinstance(server.value, ApiValidationError)
    assert network.value.status is None


class TimingOutResponse(FakeResponse):
    def read(self):
        raise socket.timeout("timed out")


def test_read_timeout_raises_api_error():
    repo = HttpResourceRepository("http://api.test/api", opener=lambda req, timeout=None: TimingOutResponse({}))

    with pytest.raises(ApiError) as exc:
        repo.save("exams", {"title": "Final"})

    assert "timed out" in str(exc.value)
    assert exc.value.status is None
