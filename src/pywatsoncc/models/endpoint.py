"""Remote endpoint descriptor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RemoteEndpoint(BaseModel):
    """How to reach the captioning server.

    Immutable; a configuration change produces a new instance rather than
    mutating this one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    base_url: str
    reject_unauthorized: bool = True

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        base = value.rstrip("/")
        if not base:
            raise ValueError("base_url must be non-empty")
        return base

    def url(self, path: str) -> str:
        """Join *path* onto the base URL."""
        return f"{self.base_url}{path}"
