"""Error-handling policies attached to registry operations.

Lookups are fail-open: a failed read degrades to "no existing listing" and the
run goes on to create. Submissions are fail-closed: errors propagate, with a
bounded retry for transport failures only.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

from ..errors import NetworkError, RegistryError
from ..logging import get_logger

T = TypeVar("T")


class FailOpenPolicy:
    """Run an operation and substitute ``None`` for any registry failure."""

    def __init__(self) -> None:
        self.logger = get_logger("registry.policy")

    def call(self, operation: Callable[[], Optional[T]], *, action: str) -> Optional[T]:
        try:
            return operation()
        except RegistryError as exc:
            self.logger.debug("%s failed (treated as no match): %s", action, exc)
            return None


class FailClosedPolicy:
    """Run an operation, retrying transport failures a bounded number of times.

    Remote (HTTP status) errors are never retried. A retried create can
    duplicate a listing when the first attempt succeeded server-side but its
    response was lost; the wire contract has no idempotency key to prevent it.
    """

    def __init__(
        self,
        retries: int = 1,
        backoff: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.retries = max(0, retries)
        self.backoff = max(0.0, backoff)
        self._sleep = sleep
        self.logger = get_logger("registry.policy")

    def call(self, operation: Callable[[], T], *, action: str) -> T:
        attempt = 0
        while True:
            try:
                return operation()
            except NetworkError as exc:
                if attempt >= self.retries:
                    raise
                attempt += 1
                delay = self.backoff * (2 ** (attempt - 1))
                self.logger.warning(
                    "%s failed (%s); retrying in %.1fs (attempt %d of %d)",
                    action,
                    exc,
                    delay,
                    attempt,
                    self.retries,
                )
                if delay > 0:
                    self._sleep(delay)


__all__ = ["FailClosedPolicy", "FailOpenPolicy"]
