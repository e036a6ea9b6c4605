from __future__ import annotations

from typing import Any, Mapping, Optional

from .catalog import CATALOG


class Translator:
    """Map dotted keys (``attendance.present``) to strings of the active locale.

    Missing keys fall back to ``fallback_locale`` and finally to the key itself,
    so a missing translation never breaks a form.
    """

    def __init__(
        self,
        catalog: Optional[Mapping[str, Mapping[str, Any]]] = None,
        locale: str = "en",
        fallback_locale: str = "en",
    ):
        self._catalog = catalog if catalog is not None else CATALOG
        self.locale = locale if locale in self._catalog else fallback_locale
        self.fallback_locale = fallback_locale

    @property
    def direction(self) -> str:
        return "rtl" if self.locale == "ar" else "ltr"

    def t(self, key: str, **params: Any) -> str:
        text = self._lookup(self.locale, key)
        if text is None and self.fallback_locale != self.locale:
            text = self._lookup(self.fallback_locale, key)
        if text is None:
            return key
        return text.format(**params) if params else text

    __call__ = t

    def with_locale(self, locale: str) -> "Translator":
        return Translator(self._catalog, locale, self.fallback_locale)

    def _lookup(self, locale: str, key: str) -> Optional[str]:
        node: Any = self._catalog.get(locale)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None
