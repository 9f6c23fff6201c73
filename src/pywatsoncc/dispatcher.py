"""Command dispatch."""

from __future__ import annotations

import logging

from pywatsoncc._constants import (
    BEGIN_TRANSCRIPT_PATH,
    DISABLE_CAPTIONS_PATH,
    ENABLE_CAPTIONS_PATH,
    SESSION_CLOSE_PATH,
    SESSION_STATUS_KEY,
)
from pywatsoncc._context import ConnectionContext
from pywatsoncc.exceptions import WatsonTransportError
from pywatsoncc.feedback import is_sentinel_true
from pywatsoncc.ingestion.normalize import variable_id
from pywatsoncc.models.commands import ActionCommand
from pywatsoncc.poller import StatusPoller
from pywatsoncc.state.store import VariableStore

_logger = logging.getLogger(__name__)

COMMAND_PATHS: dict[ActionCommand, str] = {
    ActionCommand.START_CAPTIONING: BEGIN_TRANSCRIPT_PATH,
    ActionCommand.END_CAPTIONING: SESSION_CLOSE_PATH,
    ActionCommand.MUTE_CAPTIONS: DISABLE_CAPTIONS_PATH,
    ActionCommand.UNMUTE_CAPTIONS: ENABLE_CAPTIONS_PATH,
}


def decide_toggle(store: VariableStore, namespace: str) -> ActionCommand:
    """Pick the toggle branch from the cached session status.

    ``"1"`` means a session is running, so the toggle ends it.  Any other
    value, or no value at all, starts one.
    """
    if is_sentinel_true(store.get(variable_id(namespace, SESSION_STATUS_KEY))):
        return ActionCommand.END_CAPTIONING
    return ActionCommand.START_CAPTIONING


class ActionDispatcher:
    """Translate a user command into at most one outbound GET.

    Failures only show up on the health monitor; nothing is retried and
    nothing is raised to the caller.
    """

    def __init__(self, context: ConnectionContext, poller: StatusPoller) -> None:
        self._context = context
        self._poller = poller

    async def dispatch(self, command: ActionCommand) -> None:
        if command == ActionCommand.REFRESH_STATUS:
            # Single-shot poll; the timer schedule is not touched.
            await self._poller.tick()
            return

        if command == ActionCommand.TOGGLE_CAPTIONING:
            command = await self._resolve_toggle()

        await self._send(command)

    async def _resolve_toggle(self) -> ActionCommand:
        context = self._context
        if context.config.toggle_refresh:
            # A failed refresh leaves the cached status in place; decide on that.
            await self._poller.tick()
        resolved = decide_toggle(context.store, context.namespace)
        _logger.debug("Toggle resolved to %s", resolved)
        return resolved

    async def _send(self, command: ActionCommand) -> None:
        path = COMMAND_PATHS[command]
        try:
            await self._context.require_transport().get(path)
        except WatsonTransportError as exc:
            _logger.error("HTTP GET Request failed (%s)", exc)
            self._context.health.set_error(str(exc))
            return
        self._context.health.set_ok()
