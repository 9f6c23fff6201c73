"""Decoded status document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pywatsoncc._constants import STATUS_PATH
from pywatsoncc.exceptions import WatsonDecodeError
from pywatsoncc.ingestion.normalize import stringify_value


class StatusSnapshot(BaseModel):
    """One decoded ``/session_status`` response.

    The shape is not known in advance; every top-level field is kept and
    its value stringified.  Valid only at the instant of receipt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    values: dict[str, str] = Field(default_factory=dict)

    @field_validator("values", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {str(k): stringify_value(v) for k, v in value.items()}

    @classmethod
    def from_payload(cls, payload: Any, *, endpoint: str = STATUS_PATH) -> StatusSnapshot:
        """Validate a decoded JSON body.

        Raises
        ------
        WatsonDecodeError
            If *payload* is not a JSON object.
        """
        if not isinstance(payload, Mapping):
            raise WatsonDecodeError(
                f"Status from {endpoint} is not a JSON object: {type(payload).__name__}",
                endpoint=endpoint,
            )
        return cls(values=payload)
