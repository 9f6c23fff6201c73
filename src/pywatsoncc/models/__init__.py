"""Typed models for the captioning server."""

from pywatsoncc.models.commands import ActionCommand, FeedbackRule
from pywatsoncc.models.endpoint import RemoteEndpoint
from pywatsoncc.models.health import HealthState, HealthStatus
from pywatsoncc.models.status import StatusSnapshot
from pywatsoncc.models.variables import KNOWN_STATUS_VARIABLES, VariableDefinition, variable_definitions

__all__ = [
    "KNOWN_STATUS_VARIABLES",
    "ActionCommand",
    "FeedbackRule",
    "HealthState",
    "HealthStatus",
    "RemoteEndpoint",
    "StatusSnapshot",
    "VariableDefinition",
    "variable_definitions",
]
