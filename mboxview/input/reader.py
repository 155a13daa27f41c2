"""Background key capture.

One daemon thread reads key tokens and forwards them, in capture order,
through a queue to the main loop. It exits after forwarding a quit key
(closed input counts as one) or when ``stop`` is called.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Collection
from queue import Queue

from .bindings import QUIT_KEYS
from .keys import read_key

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 100


class KeyReader:
    """Single-producer key pump feeding ``self.events``."""

    def __init__(
        self,
        stdin_fd: int,
        *,
        quit_keys: Collection[str] = QUIT_KEYS,
        read: Callable[[int, int | None], str] = read_key,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.quit_keys = frozenset(quit_keys)
        self.events: Queue[str] = Queue()
        self._read = read
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        while not self._stop.is_set():
            key = self._read(self.stdin_fd, POLL_TIMEOUT_MS)
            if key == "":
                continue
            self.events.put(key)
            if key in self.quit_keys:
                return

    def start(self) -> KeyReader:
        if self._thread is not None:
            return self
        self._thread = threading.Thread(target=self._run, name="mboxview-key-reader", daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout: float = 0.5) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.debug("key reader did not stop within %.2fs", timeout)


__all__ = ["POLL_TIMEOUT_MS", "KeyReader"]
