"""Recurring status polling."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pywatsoncc._constants import STATUS_PATH
from pywatsoncc._context import ConnectionContext
from pywatsoncc.exceptions import WatsonTransportError
from pywatsoncc.ingestion.status import build_variable_patch
from pywatsoncc.models.status import StatusSnapshot

_logger = logging.getLogger(__name__)


class StatusPoller:
    """Keep the variable store in step with the server's status document.

    At most one timer is active at a time.  Timer ticks never overlap: if
    the previous timer-driven request is still in flight when the timer
    fires, that tick is skipped.  Stopping cancels the timer only; a
    request already in flight still applies its result when it resolves.
    """

    def __init__(
        self,
        context: ConnectionContext,
        *,
        on_update: Callable[[], None] | None = None,
    ) -> None:
        self._context = context
        self._on_update = on_update
        self._timer: asyncio.Task[None] | None = None
        self._inflight: asyncio.Task[bool] | None = None

    @property
    def is_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self, interval: float | None = None) -> None:
        """Start (or restart) the recurring timer.

        Must be called from a running event loop.  The first tick fires one
        *interval* after the call.
        """
        period = self._context.config.poll_interval if interval is None else interval
        if period <= 0:
            raise ValueError(f"interval must be positive, got {period}")
        self.stop()
        loop = asyncio.get_running_loop()
        self._timer = loop.create_task(self._run(period), name="pywatsoncc-status-poller")
        _logger.debug("Status polling started every %.3fs", period)

    def stop(self) -> None:
        """Cancel the timer.  Safe to call when not running."""
        timer = self._timer
        self._timer = None
        if timer is not None and not timer.done():
            timer.cancel()
            _logger.debug("Status polling stopped")

    async def drain(self) -> None:
        """Wait for the in-flight timer-driven tick, if any."""
        inflight = self._inflight
        if inflight is not None and not inflight.done():
            await asyncio.wait({inflight})

    async def _run(self, interval: float) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            deadline += interval
            now = loop.time()
            if deadline < now:
                # Fell behind (blocked loop); resume the cadence from now.
                deadline = now
            await asyncio.sleep(deadline - now)
            if self._inflight is not None and not self._inflight.done():
                _logger.debug("Previous status poll still in flight, skipping tick")
                continue
            self._inflight = loop.create_task(self.tick())

    async def tick(self) -> bool:
        """Fetch the status document once and fold it into the store.

        Returns ``True`` on success.  Failures are recorded on the health
        monitor and never raised; the store is left untouched.
        """
        context = self._context
        try:
            payload = await context.require_transport().get_json(STATUS_PATH)
            snapshot = StatusSnapshot.from_payload(payload)
        except WatsonTransportError as exc:
            _logger.error("HTTP GET Request for status failed (%s)", exc)
            context.health.set_error(str(exc))
            return False

        _logger.debug("Status data: %s", snapshot.values)

        # Namespace is read after the request resolves so a reconfigure
        # during the request writes under the new prefix.
        context.store.apply(build_variable_patch(context.namespace, snapshot))

        if self._on_update is not None:
            try:
                self._on_update()
            except Exception:
                _logger.debug("Status update callback failed", exc_info=True)

        context.health.set_ok()
        return True
