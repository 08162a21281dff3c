from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional
from .exceptions import ErrorKind, PinataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchItemResult:
    """Outcome of one item in a batch call."""
    item: str
    status: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self, label: str) -> Dict[str, str]:
        return {label: self.item, 'status': self.status}


def failure_status(item: str, error: Exception, error_prefix: str) -> str:
    kind = getattr(error, 'kind', None)
    if kind is ErrorKind.AUTHENTICATION:
        return 'Authentication failed'
    if kind is ErrorKind.NETWORK:
        return f"HTTP error! status: {error.status_code}"  # type: ignore[attr-defined]
    # report the underlying cause, not the "Error processing ..." wrapper
    root = error.__cause__ or error
    reason = root.message if isinstance(root, PinataError) else str(root)
    return f"{error_prefix} {item}: {reason}"


def run_batch(items: Iterable[str], call: Callable[[str], str], error_prefix: str) -> List[BatchItemResult]:
    """Apply ``call`` to each item in order, one request at a time.

    A failing item never stops the batch: its error is captured into the
    item's result and the next item runs. The result list has one entry per
    input, in input order.
    """
    results: List[BatchItemResult] = []
    for item in items:
        try:
            status = call(item)
        except Exception as e:
            logger.debug("pinata.batch.item_failed item=%s error=%r", item, e)
            results.append(BatchItemResult(item, failure_status(item, e, error_prefix), e))
            continue
        results.append(BatchItemResult(item, status))
    return results
