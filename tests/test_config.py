from __future__ import annotations

import pytest

from pywatsoncc.config import WatsonConfig
from pywatsoncc.exceptions import WatsonConfigError


def test_defaults() -> None:
    config = WatsonConfig()

    assert config.base_url == "http://example.com:8000"
    assert config.reject_unauthorized is True
    assert config.poll_interval == 1.0
    assert config.toggle_refresh is False
    assert config.namespace == "watson_instance"


@pytest.mark.parametrize("label", [None, "", "   "])
def test_blank_label_falls_back_to_default_namespace(label: str | None) -> None:
    assert WatsonConfig(label=label).namespace == "watson_instance"


def test_label_is_sanitized_into_namespace() -> None:
    assert WatsonConfig(label="Studio A.1").namespace == "Studio_A_1"


def test_endpoint_is_built_from_config() -> None:
    config = WatsonConfig(base_url="https://captions.local:8443/", reject_unauthorized=False)

    endpoint = config.endpoint
    assert endpoint.base_url == "https://captions.local:8443"
    assert endpoint.reject_unauthorized is False
    assert endpoint.url("/session_status") == "https://captions.local:8443/session_status"


@pytest.mark.parametrize("url", ["captions.local:8000", "ftp://captions.local", "http://"])
def test_invalid_base_url_rejected(url: str) -> None:
    with pytest.raises(WatsonConfigError):
        WatsonConfig(base_url=url)


def test_non_positive_interval_rejected() -> None:
    with pytest.raises(WatsonConfigError):
        WatsonConfig(poll_interval=0)


def test_from_env_reads_watson_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATSON_URL", "https://captions.local:8443")
    monkeypatch.setenv("WATSON_LABEL", "enc1")
    monkeypatch.setenv("WATSON_REJECT_UNAUTHORIZED", "accept")
    monkeypatch.setenv("WATSON_POLL_INTERVAL", "2.5")
    monkeypatch.setenv("WATSON_TOGGLE_REFRESH", "yes")

    config = WatsonConfig.from_env()

    assert config.base_url == "https://captions.local:8443"
    assert config.namespace == "enc1"
    assert config.reject_unauthorized is False
    assert config.poll_interval == 2.5
    assert config.toggle_refresh is True


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATSON_LABEL", "enc1")
    monkeypatch.setenv("WATSON_POLL_INTERVAL", "2.5")

    config = WatsonConfig.from_env(label="enc2", poll_interval=0.5)

    assert config.namespace == "enc2"
    assert config.poll_interval == 0.5


def test_from_env_rejects_non_numeric_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATSON_POLL_INTERVAL", "fast")

    with pytest.raises(WatsonConfigError):
        WatsonConfig.from_env()
