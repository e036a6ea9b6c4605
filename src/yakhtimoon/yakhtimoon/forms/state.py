"""Bindable form state shared by every entity form.

A ``FormState`` is the private working copy of one record: a fixed field
schema with defaults, seeded from an optional existing record, updated one
field at a time and snapshotted when the payload is shaped.
"""

from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

from ..core.exceptions import SubmissionInProgressError
from .mode import FormMode, mode_for

Coercer = Callable[[Any], Any]


@dataclass(frozen=True)
class ChoiceOption:
    value: Any
    label: str


@dataclass(frozen=True)
class FieldView:
    """Render descriptor of one input, labels already translated."""

    name: str
    label: str
    kind: str
    value: Any = None
    options: Tuple[ChoiceOption, ...] = ()
    required: bool = False
    error: Optional[str] = None
    placeholder: Optional[str] = None
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def is_selected(self, option_value: Any) -> bool:
        if isinstance(self.value, (list, tuple)):
            return str(option_value) in {str(v) for v in self.value}
        return self.value is not None and str(option_value) == str(self.value)


def first_error(errors: Optional[Mapping[str, Sequence[str]]], name: str) -> Optional[str]:
    messages = (errors or {}).get(name) or []
    return messages[0] if messages else None


def choice_options(
    records: Iterable[Mapping[str, Any]],
    *,
    label: Union[str, Callable[[Mapping[str, Any]], str]],
) -> Tuple[ChoiceOption, ...]:
    """Options for reference records: value is the record id, label a field or a callable."""
    options = []
    for record in records:
        if record.get("id") is None:
            continue
        text = label(record) if callable(label) else str(record.get(label) or "")
        options.append(ChoiceOption(value=record["id"], label=text))
    return tuple(options)


class FormState:
    def __init__(
        self,
        defaults: Mapping[str, Any],
        initial: Optional[Mapping[str, Any]] = None,
        *,
        mode: Optional[FormMode] = None,
        coercers: Optional[Mapping[str, Coercer]] = None,
    ):
        self._defaults = copy.deepcopy(dict(defaults))
        self._coercers = dict(coercers or {})
        self.mode: FormMode = mode if mode is not None else mode_for(initial)
        self._values: Dict[str, Any] = self._seed(initial)
        self.loading = False

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def values(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def update(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(f"Unknown form field: {name}")
        self._values[name] = value

    def set_from_input(self, name: str, raw: Any) -> None:
        coerce = self._coercers.get(name)
        self.update(name, coerce(raw) if coerce else raw)

    def bind(self, source: Mapping[str, Any]) -> None:
        """Apply every schema field present in a form post or JSON mapping."""
        for name in self.fields:
            is_list = isinstance(self._defaults[name], list)
            for key in (name, f"{name}[]") if is_list else (name,):
                if key not in source:
                    continue
                if is_list and hasattr(source, "getlist"):
                    raw = source.getlist(key)
                else:
                    raw = source[key]
                self.set_from_input(name, raw)
                break

    def restore(self, values: Mapping[str, Any]) -> None:
        """Re-apply a snapshot taken with ``values()``; keys outside the schema are ignored."""
        for name in self.fields:
            if name in values:
                self.update(name, copy.deepcopy(values[name]))

    @contextmanager
    def submitting(self) -> Iterator[None]:
        if self.loading:
            raise SubmissionInProgressError("A save for this form is already in progress")
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    def _seed(self, initial: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        values = copy.deepcopy(self._defaults)
        for name in values:
            if initial and initial.get(name) is not None:
                values[name] = copy.deepcopy(initial[name])
        return values
