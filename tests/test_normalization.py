from __future__ import annotations

import logging

import pytest

from pywatsoncc.exceptions import WatsonDecodeError
from pywatsoncc.ingestion.normalize import sanitize_identifier, stringify_value, variable_id
from pywatsoncc.ingestion.status import build_variable_patch
from pywatsoncc.models.status import StatusSnapshot


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1", "1"),
        ("", ""),
        (1, "1"),
        (0, "0"),
        (1.0, "1"),
        (29.97, "29.97"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (-1e21, "-1e+21"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        ([1, 2], "[1,2]"),
        ({"left": -12}, '{"left":-12}'),
    ],
)
def test_stringify_value(value: object, expected: str) -> None:
    assert stringify_value(value) == expected


def test_sanitize_identifier_replaces_unsafe_characters() -> None:
    assert sanitize_identifier("playing FPS/avg") == "playing_FPS_avg"
    assert sanitize_identifier("isOutputMuted") == "isOutputMuted"


def test_variable_id_prefixes_namespace() -> None:
    assert variable_id("enc1", "session_status") == "enc1_session_status"


def test_snapshot_stringifies_values() -> None:
    snapshot = StatusSnapshot.from_payload({"session_status": 1, "isOutputMuted": 0, "playingName": "Show"})

    assert snapshot.values == {"session_status": "1", "isOutputMuted": "0", "playingName": "Show"}


@pytest.mark.parametrize("payload", [[1, 2], "ok", 1, None])
def test_snapshot_rejects_non_object_payload(payload: object) -> None:
    with pytest.raises(WatsonDecodeError) as exc_info:
        StatusSnapshot.from_payload(payload)

    assert exc_info.value.endpoint == "/session_status"


def test_variable_patch_has_one_entry_per_field() -> None:
    snapshot = StatusSnapshot.from_payload({"session_status": 1, "hold_status": 0})

    patch = build_variable_patch("enc1", snapshot)

    assert patch == {"enc1_session_status": "1", "enc1_hold_status": "0"}


def test_colliding_keys_keep_last_field(caplog: pytest.LogCaptureFixture) -> None:
    snapshot = StatusSnapshot.from_payload({"a.b": "first", "a_b": "second"})

    with caplog.at_level(logging.DEBUG, logger="pywatsoncc.ingestion.status"):
        patch = build_variable_patch("enc1", snapshot)

    assert patch == {"enc1_a_b": "second"}
    assert "enc1_a_b" in caplog.text
