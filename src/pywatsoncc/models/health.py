"""Connection health model."""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthState(enum.StrEnum):
    OK = "ok"
    ERROR = "error"


class HealthStatus(BaseModel):
    """Connectivity indicator shown by the host shell.

    ``detail`` carries the failure message for ``ERROR`` and is ``None``
    for ``OK``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state: HealthState
    detail: str | None = None
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def ok(cls) -> HealthStatus:
        return cls(state=HealthState.OK)

    @classmethod
    def error(cls, detail: str) -> HealthStatus:
        return cls(state=HealthState.ERROR, detail=detail)

    @property
    def is_ok(self) -> bool:
        return self.state == HealthState.OK
