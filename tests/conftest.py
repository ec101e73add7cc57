"""
Test fixtures for swim-yardage-api.

Pins settings to a known local-strategy configuration and provides mock
provider clients so tests run offline and deterministically.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import swim_yardage_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from swim_yardage_api.main import app
from swim_yardage_api.config import settings


TEST_TOKEN = "test-token-123"

SCENARIO_WORKOUT = "Warmup\n8x50 free\nMain Set\n10x100 free @1:30\nCooldown\n4x25 easy"

FULL_PRACTICE = """Warm-up
400 swim
4x50 kick
Pre-set
8x25 drill
Main set
6x100 free
4x100 back
Pull
3x200 pull buoy
Sprint
8x25 fly sprint
Post-set
4x50 breast
Cool down
200 easy"""


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Known configuration for every test; restored afterwards."""
    monkeypatch.setattr(settings, "ANALYZER_STRATEGY", "local")
    monkeypatch.setattr(settings, "ANALYZE_API_TOKEN", TEST_TOKEN)
    monkeypatch.setattr(settings, "BUILD_ID", "local")
    monkeypatch.setattr(settings, "LLM_PROVIDER", "openai")
    monkeypatch.setattr(settings, "LLM_MODEL", "gpt-4o-mini")
    monkeypatch.setattr(settings, "LLM_SUMMARY_ENABLED", False)
    monkeypatch.setattr(settings, "LLM_MAX_ATTEMPTS", 3)
    monkeypatch.setattr(settings, "LLM_RETRY_BASE_DELAY", 0.0)
    monkeypatch.setattr(settings, "HELICONE_ENABLED", False)
    monkeypatch.setattr(settings, "HELICONE_API_KEY", None)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test-openai")
    monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-test-anthropic")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-gemini-key")
    yield settings
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scenario_workout() -> str:
    return SCENARIO_WORKOUT


@pytest.fixture
def full_practice() -> str:
    """Practice touching every section and stroke; 2400 yds total."""
    return FULL_PRACTICE


@pytest.fixture
def sample_analysis_json() -> str:
    """Well-formed LLM analysis."""
    return (
        '{"totalYards": 1500, '
        '"sectionYards": {"Warmup": 400, "Main Set": 1000, "Cooldown": 100}, '
        '"strokePercentages": {"Freestyle": 1.0}, '
        '"aiTip": "Hold your pace on the 100s."}'
    )


# ---------------------------------------------------------------------------
# Provider Mock Fixtures
# ---------------------------------------------------------------------------


def make_openai_response(content: str) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest.fixture
def mock_openai_client(sample_analysis_json):
    """Mock OpenAI client returning the sample analysis."""
    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value = make_openai_response(sample_analysis_json)
    return mock_client


@pytest.fixture
def mock_anthropic_client(sample_analysis_json):
    mock_client = MagicMock()
    mock_response = MagicMock()
    mock_response.content = [MagicMock(text=sample_analysis_json)]
    mock_client.messages.create.return_value = mock_response
    return mock_client
