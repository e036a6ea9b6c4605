from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List

from ..api.repository import ResourceRepository
from ..common.logging import get_logger
from ..core.constants import DEFAULT_REFERENCE_WORKERS

logger = get_logger(__name__)


class ReferenceDataLoader:
    """Fetch the reference lists a form needs for its choice fields.

    Lists are fetched in parallel; each populates a disjoint key of the result
    so ordering between them does not matter. A failed fetch is logged and that
    list degrades to empty, leaving the form usable without options.
    """

    def __init__(self, repository: ResourceRepository, *, max_workers: int = DEFAULT_REFERENCE_WORKERS):
        self._repository = repository
        self._max_workers = max(1, int(max_workers))

    def load(self, *resources: str) -> Dict[str, List[Dict[str, Any]]]:
        if not resources:
            return {}

        workers = min(self._max_workers, len(resources))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="reference") as pool:
            futures = {resource: pool.submit(self._repository.get_all, resource) for resource in resources}

        results: Dict[str, List[Dict[str, Any]]] = {}
        for resource, future in futures.items():
            try:
                results[resource] = list(future.result() or [])
            except Exception:
                logger.exception("Failed to fetch reference list", extra={"resource": resource})
                results[resource] = []
        return results
