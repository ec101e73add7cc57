"""Configuration settings for the swim yardage API."""
import os
from typing import Literal


EnvironmentType = Literal["development", "staging", "production"]
AnalyzerStrategy = Literal["local", "llm"]
LLMProvider = Literal["openai", "anthropic", "gemini"]

DEFAULT_MODELS: dict[str, str] = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-sonnet-20241022",
    "gemini": "models/gemini-2.5-flash",
}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"
    BUILD_ID: str = "local"
    CORS_ALLOW_ORIGINS: list[str] = ["http://localhost:3000"]

    # Analysis strategy
    ANALYZER_STRATEGY: AnalyzerStrategy = "local"
    ANALYZE_API_TOKEN: str | None = None

    # LLM delegation
    LLM_PROVIDER: LLMProvider = "openai"
    LLM_MODEL: str = DEFAULT_MODELS["openai"]
    LLM_SUMMARY_ENABLED: bool = False
    LLM_MAX_ATTEMPTS: int = 3
    LLM_RETRY_BASE_DELAY: float = 1.0
    HELICONE_ENABLED: bool = False

    # API Keys
    OPENAI_API_KEY: str | None = None
    ANTHROPIC_API_KEY: str | None = None
    GEMINI_API_KEY: str | None = None
    HELICONE_API_KEY: str | None = None

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else "INFO"
        self.BUILD_ID = os.getenv("VERCEL_GIT_COMMIT_SHA") or "local"
        origins = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")
        self.CORS_ALLOW_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]

        # Analysis strategy
        strategy = os.getenv("ANALYZER_STRATEGY", "local").lower()
        self.ANALYZER_STRATEGY = strategy if strategy in ("local", "llm") else "local"  # type: ignore
        self.ANALYZE_API_TOKEN = os.getenv("ANALYZE_API_TOKEN") or None

        # LLM delegation
        provider = os.getenv("LLM_PROVIDER", "openai").lower()
        self.LLM_PROVIDER = provider if provider in DEFAULT_MODELS else "openai"  # type: ignore
        self.LLM_MODEL = os.getenv("LLM_MODEL") or DEFAULT_MODELS[self.LLM_PROVIDER]
        self.LLM_SUMMARY_ENABLED = os.getenv("LLM_SUMMARY_ENABLED", "false").lower() == "true"
        self.LLM_MAX_ATTEMPTS = max(1, _env_int("LLM_MAX_ATTEMPTS", 3))
        self.LLM_RETRY_BASE_DELAY = max(0.0, _env_float("LLM_RETRY_BASE_DELAY", 1.0))
        self.HELICONE_ENABLED = os.getenv("HELICONE_ENABLED", "false").lower() == "true"

        # API Keys
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
        self.ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
        self.GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
        self.HELICONE_API_KEY = os.getenv("HELICONE_API_KEY")


settings = Settings()
