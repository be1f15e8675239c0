from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from maps_api_client.config import MapsClientConfig  # noqa: E402
from tests.shared.client_fakes import RecordingTransport  # noqa: E402


@pytest.fixture
def config() -> MapsClientConfig:
    cfg = MapsClientConfig(api_key="test-key")
    cfg.validate()
    return cfg


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
