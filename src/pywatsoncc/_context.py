"""Per-connection context shared by the poller and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field

from pywatsoncc._transport import Transport
from pywatsoncc.config import WatsonConfig
from pywatsoncc.exceptions import WatsonError
from pywatsoncc.state.health import HealthMonitor
from pywatsoncc.state.store import VariableStore


@dataclass(slots=True)
class ConnectionContext:
    """Everything one device connection owns.

    ``config`` and ``transport`` are replaced wholesale on reconfiguration;
    components read them at use time so the swap takes effect on the next
    request.  A context is never shared across connections.
    """

    config: WatsonConfig
    transport: Transport | None = None
    store: VariableStore = field(default_factory=VariableStore)
    health: HealthMonitor = field(default_factory=HealthMonitor)

    @property
    def namespace(self) -> str:
        return self.config.namespace

    def require_transport(self) -> Transport:
        if self.transport is None:
            raise WatsonError("Client not initialized. Use 'async with WatsonClient(...) as client:'")
        return self.transport
