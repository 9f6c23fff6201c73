"""Boolean feedbacks over the variable store.

Every function here is pure: it reads the store and never writes it.
Callers re-evaluate whenever the store changes; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from pywatsoncc._constants import OUTPUT_MUTED_KEY, SENTINEL_TRUE, SESSION_STATUS_KEY
from pywatsoncc.ingestion.normalize import variable_id
from pywatsoncc.models.commands import FeedbackRule
from pywatsoncc.state.store import VariableStore


def rgb(red: int, green: int, blue: int) -> int:
    """Pack an RGB triple into the host shell's 24-bit colour integer."""
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


class FeedbackDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    status_key: str
    color: int
    bgcolor: int


FEEDBACK_DEFINITIONS: Mapping[FeedbackRule, FeedbackDefinition] = {
    FeedbackRule.SESSION_ACTIVE: FeedbackDefinition(
        name="Session Status",
        description="Check if the session status indicates captioning is active",
        status_key=SESSION_STATUS_KEY,
        color=rgb(255, 255, 255),
        bgcolor=rgb(0, 204, 0),
    ),
    FeedbackRule.OUTPUT_MUTED: FeedbackDefinition(
        name="Output Muted",
        description="Check if the output is muted/ captioning is paused",
        status_key=OUTPUT_MUTED_KEY,
        color=rgb(255, 255, 255),
        bgcolor=rgb(255, 0, 0),
    ),
}


def is_sentinel_true(value: str | None) -> bool:
    """Exact string comparison against ``"1"``; no numeric coercion."""
    return value == SENTINEL_TRUE


def evaluate(rule: FeedbackRule, store: VariableStore, namespace: str) -> bool:
    """Return the feedback state for *rule*; missing variables are ``False``."""
    key = FEEDBACK_DEFINITIONS[rule].status_key
    return is_sentinel_true(store.get(variable_id(namespace, key)))


def evaluate_all(store: VariableStore, namespace: str) -> dict[FeedbackRule, bool]:
    return {rule: evaluate(rule, store, namespace) for rule in FeedbackRule}
