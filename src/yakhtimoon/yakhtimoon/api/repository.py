from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

from werkzeug.datastructures import MultiDict

Payload = Union[Mapping[str, Any], MultiDict]


class ResourceRepository(Protocol):
    """Data-access interface the forms depend on.

    Note (DIP): forms depend on this interface, never on a concrete HTTP client.
    Collections are already normalized to a plain list of records.
    """

    def get_all(self, resource: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def get(self, resource: str, record_id: int) -> Dict[str, Any]:
        raise NotImplementedError

    def save(self, resource: str, payload: Payload, *, record_id: Optional[int] = None) -> Dict[str, Any]:
        """Create (no ``record_id``) or update a record; returns the stored record."""

        raise NotImplementedError
