"""Command and feedback enums."""

from __future__ import annotations

import enum


class ActionCommand(enum.StrEnum):
    """User-triggered commands.

    Values match the action identifiers registered with the host shell.
    """

    START_CAPTIONING = "start_captioning"
    END_CAPTIONING = "end_captioning"
    REFRESH_STATUS = "fetch_status"
    MUTE_CAPTIONS = "disable_captions"
    UNMUTE_CAPTIONS = "enable_captions"
    TOGGLE_CAPTIONING = "toggle_captioning"


class FeedbackRule(enum.StrEnum):
    """Boolean feedbacks evaluated over the variable store."""

    SESSION_ACTIVE = "session_status"
    OUTPUT_MUTED = "is_output_muted"
