"""Input coercion used by the form field bindings.

Raw values arrive as strings from form posts, as lists from multi-selects or
as JSON scalars from the scanner endpoints; each field converts them through
one of these helpers before the state is updated.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any, default: int = 0) -> int:
    """Leading integer of ``value`` (``"12px"`` -> 12), ``default`` when there is none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else default
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


def optional_int(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_int(value, default=-1)
    return None if parsed < 0 else parsed


def int_list(values: Any) -> List[int]:
    return [parse_int(v) for v in _as_iterable(values) if optional_int(v) is not None]


def str_list(values: Any) -> List[str]:
    return [str(v) for v in _as_iterable(values) if v is not None and str(v) != ""]


def text(value: Any) -> str:
    return "" if value is None else str(value)


def require_positive_int(value: Any) -> int:
    """Strict variant used for scanned identifiers: positive int or numeric string only."""
    if isinstance(value, bool):
        raise ValueError("boolean is not an identifier")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
    else:
        raise ValueError(f"not an identifier: {value!r}")
    if parsed <= 0:
        raise ValueError(f"not an identifier: {value!r}")
    return parsed


def passwords_match(password: str, confirmation: str) -> bool:
    """Equal, or both empty (an edit that keeps the stored password)."""
    if not password and not confirmation:
        return True
    return password == confirmation


def _as_iterable(values: Any) -> Iterable[Any]:
    if values is None:
        return []
    if isinstance(values, (str, bytes, int)):
        return [values]
    return values
