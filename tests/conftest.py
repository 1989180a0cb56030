"""Shared fixtures."""

import pytest

from clusterviz import commentary, config
from clusterviz.models import Point


@pytest.fixture(autouse=True)
def no_openai_key(monkeypatch):
    """Never reach the real OpenAI API from tests."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(commentary, "CONFIG_OPENAI_API_KEY", None)
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)


@pytest.fixture
def square_points():
    return [
        Point(x=0.0, y=0.0),
        Point(x=10.0, y=10.0),
        Point(x=1.0, y=1.0),
        Point(x=9.0, y=9.0),
    ]


@pytest.fixture
def fake_analyzer():
    """Async commentary stand-in that records its calls."""
    calls = []

    async def analyzer(results, dataset_name):
        calls.append((list(results), dataset_name))
        return "## Analysis\nSpectral clustering wins."

    analyzer.calls = calls
    return analyzer
