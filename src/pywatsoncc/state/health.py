"""Connection health indicator."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pywatsoncc.models.health import HealthStatus

_logger = logging.getLogger(__name__)


class HealthMonitor:
    """Last-writer-wins health flag.

    Written by both the status poller and the command dispatcher.  There is
    no history and no aggregation: whichever write happened last is the
    current status.
    """

    def __init__(self, *, on_change: Callable[[HealthStatus], None] | None = None) -> None:
        self._status = HealthStatus.ok()
        self._on_change = on_change

    @property
    def status(self) -> HealthStatus:
        return self._status

    def set_ok(self) -> None:
        self._write(HealthStatus.ok())

    def set_error(self, detail: str) -> None:
        self._write(HealthStatus.error(detail))

    def _write(self, status: HealthStatus) -> None:
        self._status = status
        if self._on_change is None:
            return
        try:
            self._on_change(status)
        except Exception:
            _logger.debug("on_health callback failed", exc_info=True)
