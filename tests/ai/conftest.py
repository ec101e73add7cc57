"""Shared fixtures for AI module tests."""
from unittest.mock import patch

import httpx
import pytest


# =============================================================================
# Mock Settings Fixtures
# =============================================================================


@pytest.fixture
def mock_settings_helicone_enabled():
    """Mock settings with Helicone enabled."""
    with patch("swim_yardage_api.ai.client_factory.settings") as mock:
        mock.OPENAI_API_KEY = "sk-test-openai"
        mock.ANTHROPIC_API_KEY = "sk-test-anthropic"
        mock.GEMINI_API_KEY = "test-gemini"
        mock.HELICONE_ENABLED = True
        mock.HELICONE_API_KEY = "sk-test-helicone"
        mock.ENVIRONMENT = "production"
        yield mock


@pytest.fixture
def mock_settings_helicone_disabled():
    """Mock settings with Helicone disabled."""
    with patch("swim_yardage_api.ai.client_factory.settings") as mock:
        mock.OPENAI_API_KEY = "sk-test-openai"
        mock.ANTHROPIC_API_KEY = "sk-test-anthropic"
        mock.GEMINI_API_KEY = "test-gemini"
        mock.HELICONE_ENABLED = False
        mock.HELICONE_API_KEY = None
        mock.ENVIRONMENT = "development"
        yield mock


# =============================================================================
# Error simulation fixtures
# =============================================================================


@pytest.fixture
def server_error_503():
    """Simulate 503 Service Unavailable from an SDK."""
    return Exception("Error code: 503 - Service temporarily unavailable")


@pytest.fixture
def overloaded_error():
    """Simulate Anthropic's overloaded response."""
    return Exception("Error code: 529 - {'type': 'overloaded_error', 'message': 'Overloaded'}")


@pytest.fixture
def timeout_error():
    return httpx.ReadTimeout("Connection read timed out")


@pytest.fixture
def auth_error():
    return Exception("Error code: 401 - Invalid API key provided")


@pytest.fixture
def bad_request_error():
    return Exception("Error code: 400 - Invalid request: missing 'messages' field")
