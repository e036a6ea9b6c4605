from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.http_repository import HttpResourceRepository
from .api.repository import ResourceRepository
from .core.constants import DEFAULT_API_TIMEOUT, DEFAULT_REFERENCE_WORKERS, QR_SCAN_DELAY_MS
from .forms.reference import ReferenceDataLoader
from .i18n.translator import Translator


@dataclass(frozen=True)
class Container:
    repository: ResourceRepository
    translator: Translator
    reference_loader: ReferenceDataLoader

    qr_scan_delay_ms: int = QR_SCAN_DELAY_MS


def build_container(
    *,
    api_base_url: str,
    api_token: Optional[str] = None,
    api_timeout: float = DEFAULT_API_TIMEOUT,
    locale: str = "en",
    reference_workers: int = DEFAULT_REFERENCE_WORKERS,
    qr_scan_delay_ms: int = QR_SCAN_DELAY_MS,
    repository: Optional[ResourceRepository] = None,
) -> Container:
    if repository is None:
        repository = HttpResourceRepository(api_base_url, token=api_token, timeout=api_timeout)

    translator = Translator(locale=locale)
    reference_loader = ReferenceDataLoader(repository, max_workers=reference_workers)

    return Container(
        repository=repository,
        translator=translator,
        reference_loader=reference_loader,
        qr_scan_delay_ms=int(qr_scan_delay_ms),
    )
