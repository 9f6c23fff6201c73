"""Variable definitions announced to the host shell."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pywatsoncc.ingestion.normalize import variable_id

# Status fields the captioning server is known to report.  Unknown fields
# are still stored; they are just not announced up front.
KNOWN_STATUS_VARIABLES: tuple[tuple[str, str], ...] = (
    ("session_status", "Session Status"),
    ("hold_status", "Hold Status"),
    ("audioValues", "Audio Values"),
    ("isOutputMuted", "Is Output Muted"),
    ("playingFileName", "Playing File Name"),
    ("playingStarted", "Playing Started"),
    ("playingAudioOnly", "Playing Audio Only"),
    ("playingTotalFrames", "Playing Total Frames"),
    ("playingRunningFrame", "Playing Running Frame"),
    ("playingFPS", "Playing FPS"),
    ("playingStartTime", "Playing Start Time"),
    ("playingName", "Playing Name"),
)


class VariableDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    variable_id: str
    name: str


def variable_definitions(namespace: str) -> list[VariableDefinition]:
    """Definitions for the known status fields under *namespace*."""
    return [VariableDefinition(variable_id=variable_id(namespace, key), name=name) for key, name in KNOWN_STATUS_VARIABLES]
