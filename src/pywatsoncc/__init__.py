"""pywatsoncc - Async Python client for captioning server control surfaces."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywatsoncc")
except PackageNotFoundError:
    __version__ = "0+local"
from pywatsoncc.client import WatsonClient
from pywatsoncc.config import WatsonConfig
from pywatsoncc.exceptions import (
    WatsonConfigError,
    WatsonDecodeError,
    WatsonError,
    WatsonProtocolError,
    WatsonTimeoutError,
    WatsonTransportError,
)
from pywatsoncc.models import (
    ActionCommand,
    FeedbackRule,
    HealthState,
    HealthStatus,
    RemoteEndpoint,
    StatusSnapshot,
    VariableDefinition,
)

__all__ = [
    "__version__",
    "ActionCommand",
    "FeedbackRule",
    "HealthState",
    "HealthStatus",
    "RemoteEndpoint",
    "StatusSnapshot",
    "VariableDefinition",
    "WatsonClient",
    "WatsonConfig",
    "WatsonConfigError",
    "WatsonDecodeError",
    "WatsonError",
    "WatsonProtocolError",
    "WatsonTimeoutError",
    "WatsonTransportError",
]
