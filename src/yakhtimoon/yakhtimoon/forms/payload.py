from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from werkzeug.datastructures import FileStorage, MultiDict


def build_multipart(
    scalars: Mapping[str, Any],
    lists: Optional[Mapping[str, Iterable[Any]]] = None,
    files: Optional[Mapping[str, Optional[FileStorage]]] = None,
) -> MultiDict:
    """Shape a multi-part submission.

    Scalars become one text part each; list fields become repeated ``name[]``
    parts so the API reads them as a native list; a file part is only added
    when a new file was chosen, so an omitted file keeps the stored one.
    """
    payload: MultiDict = MultiDict()
    for name, value in scalars.items():
        payload.add(name, "" if value is None else str(value))
    for name, values in (lists or {}).items():
        for value in values:
            payload.add(f"{name}[]", str(value))
    for name, file in (files or {}).items():
        if file is not None:
            payload.add(name, file)
    return payload
