from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence, Tuple

from app.services.sms_service import SmsSendError, SmsSender

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 10


@dataclass(frozen=True)
class DispatchResult:
    sent: Tuple[str, ...]
    failed: Tuple[str, ...]
    total: int


class DispatchCollector:
    """Collects per-recipient outcomes reported by concurrent workers."""

    def __init__(self, total: int) -> None:
        self.total = total
        self._sent: list[str] = []
        self._failed: list[str] = []
        self._lock = threading.Lock()

    def record_sent(self, to: str) -> None:
        with self._lock:
            self._sent.append(to)

    def record_failed(self, to: str) -> None:
        with self._lock:
            self._failed.append(to)

    def result(self) -> DispatchResult:
        with self._lock:
            return DispatchResult(
                sent=tuple(self._sent),
                failed=tuple(self._failed),
                total=self.total,
            )


class BulkDispatcher:
    """
    Sends one message to many recipients, at most ``max_concurrency`` provider calls at a time.

    Every recipient is attempted exactly once, duplicates included. ``dispatch`` returns only
    after all sends have finished; a failed recipient never stops the others.
    """

    def __init__(self, sender: SmsSender, max_concurrency: int = DEFAULT_MAX_CONCURRENCY) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.sender = sender
        self.max_concurrency = max_concurrency

    def dispatch(self, recipients: Sequence[str], message: str) -> DispatchResult:
        collector = DispatchCollector(total=len(recipients))
        if not recipients:
            return collector.result()

        # The pool size is the admission gate: at most max_concurrency sends in flight.
        workers = min(len(recipients), self.max_concurrency)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sms-dispatch") as executor:
            for to in recipients:
                executor.submit(self._send_one, collector, to, message)

        result = collector.result()
        logger.info(
            "Bulk SMS dispatch finished (total=%s, sent=%s, failed=%s)",
            result.total,
            len(result.sent),
            len(result.failed),
        )
        return result

    def _send_one(self, collector: DispatchCollector, to: str, message: str) -> None:
        try:
            self.sender.send(to, message)
        except SmsSendError as exc:
            logger.warning("SMS send failed (to=%s): %s", to, exc)
            collector.record_failed(to)
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while sending SMS (to=%s)", to)
            collector.record_failed(to)
        else:
            logger.info("SMS sent (to=%s)", to)
            collector.record_sent(to)
