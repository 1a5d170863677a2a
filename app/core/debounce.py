"""Per-key debouncing on top of APScheduler one-shot jobs."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.date import DateTrigger

logger = logging.getLogger(__name__)


class KeyedDebouncer:
    """Run the latest call for each key once the key has been quiet for ``delay`` seconds.

    Submitting again for a key replaces its pending call and restarts the
    timer. ``flush`` runs pending calls immediately; ``cancel`` drops them so
    nothing fires after the owner is torn down.
    """

    def __init__(self, scheduler: BaseScheduler, delay: float, prefix: str = "debounce"):
        self.scheduler = scheduler
        self.delay = delay
        self.prefix = prefix
        self._pending: dict[str, tuple[Callable[..., Any], tuple]] = {}
        self._lock = threading.RLock()

    def _job_id(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    @property
    def has_pending(self) -> bool:
        with self._lock:
            return bool(self._pending)

    @property
    def pending_keys(self) -> list[str]:
        with self._lock:
            return list(self._pending)

    def submit(self, key: str, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)`` for ``key``, replacing any pending call."""
        run_date = datetime.now(timezone.utc) + timedelta(seconds=self.delay)
        with self._lock:
            self._pending[key] = (fn, args)
            self.scheduler.add_job(
                self._fire,
                trigger=DateTrigger(run_date=run_date),
                args=[key],
                id=self._job_id(key),
                replace_existing=True,
            )

    def flush(self, key: str | None = None) -> int:
        """Run pending calls now (one key or all).

        A failing call is logged and the remaining keys still run. Returns how
        many calls succeeded.
        """
        keys = [key] if key is not None else self.pending_keys
        ran = 0
        for k in keys:
            call = self._take(k)
            if call is None:
                continue
            fn, args = call
            try:
                fn(*args)
            except Exception:
                logger.exception(f"Flushed call for {k} failed")
                continue
            ran += 1
        return ran

    def cancel(self, key: str | None = None) -> int:
        """Drop pending calls (one key or all) without running them."""
        keys = [key] if key is not None else self.pending_keys
        dropped = 0
        for k in keys:
            if self._take(k) is not None:
                dropped += 1
        if dropped:
            logger.debug(f"Cancelled {dropped} pending {self.prefix} call(s)")
        return dropped

    def _take(self, key: str) -> tuple[Callable[..., Any], tuple] | None:
        with self._lock:
            call = self._pending.pop(key, None)
            if call is not None:
                try:
                    self.scheduler.remove_job(self._job_id(key))
                except JobLookupError:
                    pass  # already fired
            return call

    def _fire(self, key: str) -> None:
        with self._lock:
            call = self._pending.pop(key, None)
        if call is None:
            return
        fn, args = call
        try:
            fn(*args)
        except Exception:
            logger.exception(f"Debounced call for {key} failed")
