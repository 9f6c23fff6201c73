#!/usr/bin/env python3
"""Live status probe for a captioning server.

Polls ``/session_status`` and prints every variable change together with
the feedback and health state.  Optionally sends one command first.

Configuration comes from ``WATSON_*`` environment variables; command line
flags override them.

Examples:
    python scripts/watch_status.py --url http://server.url:8000
    python scripts/watch_status.py --command toggle_captioning --duration 5
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pywatsoncc import ActionCommand, FeedbackRule, HealthStatus, WatsonClient, WatsonConfig  # noqa: E402
from pywatsoncc.exceptions import WatsonConfigError  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Watch captioning server status")
    parser.add_argument("--url", help="Server address (overrides WATSON_URL)")
    parser.add_argument("--label", help="Variable namespace (overrides WATSON_LABEL)")
    parser.add_argument("--interval", type=float, help="Poll interval in seconds")
    parser.add_argument(
        "--accept-invalid-certs",
        action="store_true",
        help="Accept expired/self-signed/mismatched TLS certificates",
    )
    parser.add_argument(
        "--command",
        choices=[command.value for command in ActionCommand],
        help="Send this command once before watching",
    )
    parser.add_argument("--duration", type=float, default=0.0, help="Stop after N seconds (0 = run until Ctrl+C)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args()


def _build_config(args: argparse.Namespace) -> WatsonConfig:
    overrides: dict[str, Any] = {}
    if args.url:
        overrides["base_url"] = args.url
    if args.label:
        overrides["label"] = args.label
    if args.interval:
        overrides["poll_interval"] = args.interval
    if args.accept_invalid_certs:
        overrides["reject_unauthorized"] = False
    return WatsonConfig.from_env(**overrides)


async def _watch(config: WatsonConfig, command: str | None, duration: float) -> None:
    last: dict[str, str] = {}
    client: WatsonClient | None = None

    def on_health(status: HealthStatus) -> None:
        if not status.is_ok:
            print(f"[health] error: {status.detail}")

    def on_feedbacks(states: dict[FeedbackRule, bool]) -> None:
        assert client is not None  # noqa: S101
        current = client.variables
        for key, value in sorted(current.items()):
            if last.get(key) != value:
                print(f"[var] {key} = {value}")
        last.clear()
        last.update(current)
        flags = " ".join(f"{rule.value}={'on' if state else 'off'}" for rule, state in states.items())
        print(f"[feedback] {flags}")

    client = WatsonClient(config, on_health=on_health, on_feedbacks=on_feedbacks)
    async with client:
        if command:
            await client.dispatch(ActionCommand(command))
            print(f"[command] {command}: {client.health.state.value}")
        if duration > 0:
            await asyncio.sleep(duration)
        else:
            await asyncio.Event().wait()


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _build_config(args)
    except WatsonConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    try:
        asyncio.run(_watch(config, args.command, args.duration))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
