"""Client configuration for pywatsoncc."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from urllib.parse import urlsplit

from pywatsoncc._constants import (
    BASE_URL,
    DEFAULT_NAMESPACE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
)
from pywatsoncc.exceptions import WatsonConfigError
from pywatsoncc.ingestion.normalize import sanitize_identifier
from pywatsoncc.models.endpoint import RemoteEndpoint


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on", "reject"}:
        return True
    if normalized in {"0", "false", "no", "n", "off", "accept"}:
        return False
    return default


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise WatsonConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class WatsonConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Captioning server address, e.g. ``"http://server.url:8000"``.
        Every command path is appended to it.
    reject_unauthorized : bool
        Abort requests whose TLS certificate fails validation (expired,
        wrong host, untrusted root, self-signed).  Set to ``False`` only
        when the server uses a self-signed certificate.
    label : str or None
        Instance label used as the variable namespace.  Falls back to
        ``"watson_instance"`` when empty.
    poll_interval : float
        Seconds between two status polls.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    toggle_refresh : bool
        Fetch a fresh status document before deciding which branch the
        toggle command takes, instead of trusting the last poll.
    """

    base_url: str = BASE_URL
    reject_unauthorized: bool = True
    label: str | None = None
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    toggle_refresh: bool = False

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise WatsonConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.poll_interval <= 0:
            raise WatsonConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.request_timeout <= 0:
            raise WatsonConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @property
    def namespace(self) -> str:
        """Prefix for every variable identifier written by this connection."""
        label = (self.label or "").strip()
        return sanitize_identifier(label) if label else DEFAULT_NAMESPACE

    @property
    def endpoint(self) -> RemoteEndpoint:
        return RemoteEndpoint(base_url=self.base_url, reject_unauthorized=self.reject_unauthorized)

    @classmethod
    def from_env(cls, **overrides: Any) -> WatsonConfig:
        """Create configuration from environment variables.

        Reads ``WATSON_URL``, ``WATSON_LABEL`` and the optional
        ``WATSON_*`` tuning variables.  Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        WatsonConfig
            Populated configuration.

        Raises
        ------
        WatsonConfigError
            If a numeric variable cannot be parsed or the resulting
            configuration is invalid.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}

        url = env.get("WATSON_URL")
        if url is not None:
            config_kwargs["base_url"] = url.strip()

        label = env.get("WATSON_LABEL")
        if label is not None:
            config_kwargs["label"] = label

        config_kwargs["reject_unauthorized"] = _env_bool(env.get("WATSON_REJECT_UNAUTHORIZED"), True)
        config_kwargs["toggle_refresh"] = _env_bool(env.get("WATSON_TOGGLE_REFRESH"), False)

        _ENV_FLOAT_MAP = {
            "WATSON_POLL_INTERVAL": "poll_interval",
            "WATSON_REQUEST_TIMEOUT": "request_timeout",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
