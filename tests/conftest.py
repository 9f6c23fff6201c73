from __future__ import annotations

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any

import pytest

from pywatsoncc._context import ConnectionContext
from pywatsoncc.config import WatsonConfig
from pywatsoncc.exceptions import WatsonTransportError


@dataclass
class FakeWatsonBackend:
    """In-memory stand-in for the captioning server (satisfies ``Transport``)."""

    status: Any = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    fail_with: WatsonTransportError | None = None
    delay: float = 0.0
    in_flight: int = 0
    max_in_flight: int = 0

    async def _roundtrip(self, path: str) -> None:
        self.calls.append(path)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay > 0:
                await asyncio.sleep(self.delay)
            if self.fail_with is not None:
                raise self.fail_with
        finally:
            self.in_flight -= 1

    async def get(self, path: str) -> None:
        await self._roundtrip(path)

    async def get_json(self, path: str) -> Any:
        await self._roundtrip(path)
        return copy.deepcopy(self.status)


@pytest.fixture
def backend() -> FakeWatsonBackend:
    return FakeWatsonBackend()


@pytest.fixture
def config() -> WatsonConfig:
    return WatsonConfig(base_url="http://captions.local:8000", label="enc1")


@pytest.fixture
def context(config: WatsonConfig, backend: FakeWatsonBackend) -> ConnectionContext:
    return ConnectionContext(config=config, transport=backend)
