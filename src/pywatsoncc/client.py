"""High-level async client for the captioning server."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from pywatsoncc import feedback as _feedback
from pywatsoncc._context import ConnectionContext
from pywatsoncc._transport import HttpTransport, Transport
from pywatsoncc.config import WatsonConfig
from pywatsoncc.dispatcher import ActionDispatcher
from pywatsoncc.models.commands import ActionCommand, FeedbackRule
from pywatsoncc.models.health import HealthStatus
from pywatsoncc.models.variables import VariableDefinition, variable_definitions
from pywatsoncc.poller import StatusPoller
from pywatsoncc.state.health import HealthMonitor

_logger = logging.getLogger(__name__)


class WatsonClient:
    """Async client for one captioning server connection.

    Usage::

        async with WatsonClient(config) as client:
            await client.dispatch(ActionCommand.START_CAPTIONING)
            active = client.evaluate(FeedbackRule.SESSION_ACTIVE)

    Entering the context opens the HTTP session and starts status polling.
    The client owns all per-connection state (variable store, health,
    poller timer); create one client per server.
    """

    def __init__(
        self,
        config: WatsonConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        auto_poll: bool = True,
        on_health: Callable[[HealthStatus], None] | None = None,
        on_feedbacks: Callable[[dict[FeedbackRule, bool]], None] | None = None,
        on_variable_definitions: Callable[[list[VariableDefinition]], None] | None = None,
    ) -> None:
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._auto_poll = auto_poll
        self._on_feedbacks = on_feedbacks
        self._on_variable_definitions = on_variable_definitions
        self._entered = False
        self._context = ConnectionContext(
            config=config or WatsonConfig(),
            transport=transport,
            health=HealthMonitor(on_change=on_health),
        )
        self._poller = StatusPoller(self._context, on_update=self.check_feedbacks)
        self._dispatcher = ActionDispatcher(self._context, self._poller)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> WatsonClient:
        if not self._external_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._context.transport = self._build_transport()
        self._entered = True
        self._announce_variables()
        if self._auto_poll:
            self._poller.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self._entered = False
        self._poller.stop()
        # Let a request that is already out finish before the session closes.
        await self._poller.drain()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._context.transport = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> WatsonConfig:
        return self._context.config

    @property
    def namespace(self) -> str:
        return self._context.namespace

    def reconfigure(self, config: WatsonConfig) -> None:
        """Swap in a new configuration.

        The endpoint and namespace change for every request issued from now
        on.  Requests already in flight are not cancelled.  Variables written
        under the previous namespace stay in the store.
        """
        self._context.config = config
        if not self._entered:
            return
        if not self._external_transport:
            self._context.transport = self._build_transport()
        self._announce_variables()
        if self._auto_poll or self._poller.is_running:
            self._poller.start()

    def _build_transport(self) -> HttpTransport:
        assert self._http_session is not None  # noqa: S101
        config = self._context.config
        return HttpTransport(config.endpoint, self._http_session, timeout=config.request_timeout)

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    @property
    def is_polling(self) -> bool:
        return self._poller.is_running

    def start_polling(self, interval: float | None = None) -> None:
        self._poller.start(interval)

    def stop_polling(self) -> None:
        self._poller.stop()

    async def refresh(self) -> bool:
        """Poll once, outside the timer schedule."""
        return await self._poller.tick()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def dispatch(self, command: ActionCommand) -> None:
        """Run a user command.  Failures only surface through :attr:`health`."""
        await self._dispatcher.dispatch(command)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def health(self) -> HealthStatus:
        return self._context.health.status

    @property
    def variables(self) -> dict[str, str]:
        return self._context.store.snapshot()

    def get_variable(self, variable_id: str) -> str | None:
        return self._context.store.get(variable_id)

    def variable_definitions(self) -> list[VariableDefinition]:
        return variable_definitions(self._context.namespace)

    def evaluate(self, rule: FeedbackRule) -> bool:
        return _feedback.evaluate(rule, self._context.store, self._context.namespace)

    def check_feedbacks(self) -> dict[FeedbackRule, bool]:
        """Evaluate every feedback once and report the result."""
        states = _feedback.evaluate_all(self._context.store, self._context.namespace)
        if self._on_feedbacks is not None:
            try:
                self._on_feedbacks(states)
            except Exception:
                _logger.debug("on_feedbacks callback failed", exc_info=True)
        return states

    def _announce_variables(self) -> None:
        if self._on_variable_definitions is None:
            return
        try:
            self._on_variable_definitions(self.variable_definitions())
        except Exception:
            _logger.debug("on_variable_definitions callback failed", exc_info=True)
