import json
from pathlib import Path

import pytest
import structlog

from statuspage.schemas.page import RenderConfig


API_SERVICE = {
    "name": "API",
    "url": "https://api.example.com",
    "status": "up",
    "uptimeDay": 99.95,
    "uptimeWeek": 99.9,
    "uptimeMonth": 99.8,
    "uptimeYear": 99.5,
    "uptime": "99.5%",
}


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI runs pin structlog to a captured stream; drop it between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def api_service() -> dict:
    return dict(API_SERVICE)


@pytest.fixture
def write_summary(tmp_path):
    """Write a summary.json under tmp_path and return its path."""

    def _write(data, name: str = "history/summary.json") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def render_config(tmp_path) -> RenderConfig:
    return RenderConfig(
        input_path=tmp_path / "history" / "summary.json",
        output_path=tmp_path / "site" / "index.html",
        title="Test Status",
        description="Uptime for the test stack.",
    )
