from __future__ import annotations
from typing import Any
import pytest
from pinata_client import PinataClient, PinataConfig
from tests.helpers import StubResponse, StubSession


@pytest.fixture
def config() -> PinataConfig:
    return PinataConfig(pinata_jwt='test_jwt')


@pytest.fixture
def make_client(config):
    def _make(*responses: Any, cfg: PinataConfig | None = None):
        session = StubSession(list(responses) or [StubResponse(200, {})])
        return PinataClient(cfg or config, session=session), session  # type: ignore[arg-type]
    return _make
