from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Create:
    """Form opened without an existing record."""

    record_id: None = None


@dataclass(frozen=True)
class Edit:
    """Form opened on an existing record; ``record_id`` is the API id when the record has one."""

    record_id: Optional[int] = None


FormMode = Union[Create, Edit]


def mode_for(initial: Optional[Mapping[str, Any]]) -> FormMode:
    """Decide the mode once, from whether an existing record was supplied."""
    if not initial:
        return Create()
    record_id = initial.get("id")
    return Edit(record_id=int(record_id) if record_id not in (None, "") else None)


def is_edit(mode: FormMode) -> bool:
    return isinstance(mode, Edit)


def mode_from_record_id(value: Any) -> FormMode:
    """Mode of a posted form, from its hidden ``record_id`` field (blank on create)."""
    text = "" if value is None else str(value).strip()
    return Edit(record_id=int(text)) if text.isdigit() else Create()
