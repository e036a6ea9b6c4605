from __future__ import annotations

import json
from http.client import HTTPException
from typing import Any, Callable, Dict, List, Optional
from urllib import request as urlrequest
from urllib.error import HTTPError, URLError

from werkzeug.datastructures import MultiDict
# Werkzeug's public multipart form encoder; it lives in the test module but has no client dependency.
from werkzeug.test import encode_multipart

from ..common.logging import get_logger
from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError, ApiValidationError
from .repository import Payload

logger = get_logger(__name__)


def unwrap_collection(resource: str, body: Any) -> List[Dict[str, Any]]:
    """Normalize the API's collection envelopes to a plain list.

    Depending on the resource the API answers ``{"data": [...]}``,
    ``{"<resource>": [...]}`` or a bare list.
    """
    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        for key in ("data", resource):
            items = body.get(key)
            if isinstance(items, list):
                return items
    return []


def unwrap_record(body: Any) -> Dict[str, Any]:
    if isinstance(body, dict):
        data = body.get("data")
        if isinstance(data, dict):
            return data
        return body
    return {}


class HttpResourceRepository:
    """``ResourceRepository`` backed by the school REST API."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = DEFAULT_API_TIMEOUT,
        opener: Optional[Callable[..., Any]] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token or None
        self._timeout = float(timeout)
        self._opener = opener or urlrequest.urlopen

    def get_all(self, resource: str) -> List[Dict[str, Any]]:
        return unwrap_collection(resource, self._request("GET", resource))

    def get(self, resource: str, record_id: int) -> Dict[str, Any]:
        return unwrap_record(self._request("GET", f"{resource}/{int(record_id)}"))

    def save(self, resource: str, payload: Payload, *, record_id: Optional[int] = None) -> Dict[str, Any]:
        path = resource if record_id is None else f"{resource}/{int(record_id)}"

        if isinstance(payload, MultiDict):
            parts = payload.copy()
            # Multi-part bodies are only parsed on POST; updates are spoofed.
            if record_id is not None:
                parts.add("_method", "PUT")
            boundary, data = encode_multipart(parts)
            body = self._request("POST", path, data=data, content_type=f"multipart/form-data; boundary={boundary}")
        else:
            data = json.dumps(dict(payload), default=str).encode("utf-8")
            method = "POST" if record_id is None else "PUT"
            body = self._request(method, path, data=data, content_type="application/json")

        return unwrap_record(body)

    def _request(
        self,
        method: str,
        path: str,
        *,
        data: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        req = urlrequest.Request(url, data=data, method=method)
        req.add_header("Accept", "application/json")
        if content_type:
            req.add_header("Content-Type", content_type)
        if self._token:
            req.add_header("Authorization", f"Bearer {self._token}")

        try:
            with self._opener(req, timeout=self._timeout) as resp:
                raw = resp.read()
        except HTTPError as exc:
            body = _decode_json(exc.read() if exc.fp is not None else b"", strict=False)
            logger.warning("API request failed", extra={"method": method, "path": path, "status": exc.code})
            if exc.code == 422:
                errors = body.get("errors") if isinstance(body, dict) else None
                message = body.get("message") if isinstance(body, dict) else None
                raise ApiValidationError(message or "The given data was invalid.", errors or {}) from exc
            raise ApiError(f"{method} {path} failed with HTTP {exc.code}", status=exc.code) from exc
        except URLError as exc:
            logger.warning("API unreachable", extra={"method": method, "path": path, "error": str(exc.reason)})
            raise ApiError(f"{method} {path} failed: {exc.reason}") from exc
        except (OSError, HTTPException) as exc:
            # Timeouts and dropped connections while reading the response.
            logger.warning("API connection failed", extra={"method": method, "path": path, "error": str(exc)})
            raise ApiError(f"{method} {path} failed: {exc}") from exc

        logger.debug("API request ok", extra={"method": method, "path": path})
        return _decode_json(raw)


def _decode_json(raw: Optional[bytes], *, strict: bool = True) -> Any:
    if not raw:
        return {}
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        if not strict:
            return {}
        raise ApiError("API returned a non-JSON response") from exc
