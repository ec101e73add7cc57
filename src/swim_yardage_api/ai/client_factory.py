"""AI client factory with Helicone integration support."""
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from swim_yardage_api.config import settings


logger = logging.getLogger(__name__)

# Helicone proxy URLs (private - implementation detail)
_HELICONE_OPENAI_BASE_URL = "https://oai.helicone.ai/v1"
_HELICONE_ANTHROPIC_BASE_URL = "https://anthropic.helicone.ai"

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1/"

# Default client timeout
DEFAULT_TIMEOUT = 60.0


@dataclass
class AIRequestContext:
    """Context for AI requests, used for tracking and observability."""

    feature_name: str | None = None
    request_id: str | None = None
    custom_properties: dict[str, str] = field(default_factory=dict)

    def to_tracking_headers(self) -> dict[str, str]:
        """Convert context to Helicone tracking headers."""
        headers: dict[str, str] = {}

        if self.feature_name:
            headers["Helicone-Property-Feature"] = self.feature_name

        if self.request_id:
            headers["Helicone-Request-Id"] = self.request_id

        headers["Helicone-Property-Environment"] = settings.ENVIRONMENT

        for key, value in self.custom_properties.items():
            header_key = f"Helicone-Property-{key.replace('_', '-').title()}"
            headers[header_key] = str(value)

        return headers


def _helicone_kwargs(base_url: str, context: AIRequestContext | None) -> dict[str, Any]:
    """Proxy kwargs when Helicone is enabled and configured, else empty."""
    if not settings.HELICONE_ENABLED:
        return {}
    if not settings.HELICONE_API_KEY:
        logger.warning(
            "HELICONE_ENABLED=true but HELICONE_API_KEY not set. "
            "Falling back to direct API calls."
        )
        return {}

    default_headers = {"Helicone-Auth": f"Bearer {settings.HELICONE_API_KEY}"}
    if context:
        default_headers.update(context.to_tracking_headers())
    return {"base_url": base_url, "default_headers": default_headers}


class AIClientFactory:
    """Factory for creating text-generation provider clients."""

    @staticmethod
    def create_openai_client(
        context: AIRequestContext | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Any:
        """
        Create an OpenAI client, optionally proxied through Helicone.

        Raises:
            ValueError: If OPENAI_API_KEY is not configured
        """
        import openai

        api_key = settings.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key not configured. Set OPENAI_API_KEY environment variable.")

        client_kwargs: dict[str, Any] = {"api_key": api_key, "timeout": timeout}
        client_kwargs.update(_helicone_kwargs(_HELICONE_OPENAI_BASE_URL, context))

        logger.debug(f"Creating OpenAI client (proxied={'base_url' in client_kwargs})")
        return openai.OpenAI(**client_kwargs)

    @staticmethod
    def create_anthropic_client(
        context: AIRequestContext | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Any:
        """
        Create an Anthropic client, optionally proxied through Helicone.

        Raises:
            ValueError: If ANTHROPIC_API_KEY is not configured
        """
        from anthropic import Anthropic

        api_key = settings.ANTHROPIC_API_KEY
        if not api_key:
            raise ValueError("Anthropic API key not configured. Set ANTHROPIC_API_KEY environment variable.")

        client_kwargs: dict[str, Any] = {"api_key": api_key, "timeout": timeout}
        client_kwargs.update(_helicone_kwargs(_HELICONE_ANTHROPIC_BASE_URL, context))

        logger.debug(f"Creating Anthropic client (proxied={'base_url' in client_kwargs})")
        return Anthropic(**client_kwargs)

    @staticmethod
    def create_gemini_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
        """
        Create an httpx client for the Gemini REST API.

        The API key travels as the `key` query parameter.

        Raises:
            ValueError: If GEMINI_API_KEY is not configured
        """
        api_key = settings.GEMINI_API_KEY
        if not api_key:
            raise ValueError("Gemini API key not configured. Set GEMINI_API_KEY environment variable.")

        logger.debug("Creating Gemini client (direct)")
        return httpx.Client(
            base_url=GEMINI_BASE_URL,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
