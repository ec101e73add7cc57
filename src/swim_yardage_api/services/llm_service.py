"""LLM service that delegates swim workout analysis to a text-generation provider."""
import json
import logging
import re
from contextlib import ExitStack
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from swim_yardage_api.ai import AIClientFactory, AIRequestContext, is_retryable_error, retry_sync_call
from swim_yardage_api.ai.client_factory import GEMINI_BASE_URL
from swim_yardage_api.config import settings
from swim_yardage_api.exceptions import (
    SwimAnalyzerError,
    UnauthorizedError,
    UpstreamError,
    UpstreamUnavailableError,
)
from swim_yardage_api.parsers.models import LLMAnalysis


logger = logging.getLogger(__name__)

PROVIDER_LABELS = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "gemini": "Gemini",
}

_JSON_BLOCK = re.compile(r'\{.*\}', re.DOTALL)


def parse_json_output(raw: str) -> Optional[Dict[str, Any]]:
    """Parse provider output as a JSON object; None when it is not one."""
    candidates = [raw.strip()]
    # Models sometimes wrap the object in markdown fences or prose
    block = _JSON_BLOCK.search(raw)
    if block:
        candidates.append(block.group(0))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None


def gemini_model_path(model: str) -> str:
    return model if model.startswith("models/") else f"models/{model}"


class LLMService:
    """Service for delegating workout analysis to an LLM."""

    ANALYSIS_PROMPT = """You are an expert swim coach and workout analyzer.
Return ONLY valid JSON (no extra words, no markdown).

Analyze this swim workout and reply with:
{{
  "totalYards": number,
  "sectionYards": {{"Warmup": number, "Preset": number, "Main Set": number, "Pull": number, "Sprint Finisher": number, "Post-Set": number, "Cooldown": number}},
  "strokePercentages": {{"Freestyle": number, "Backstroke": number, "Breaststroke": number, "Butterfly": number, "Kick": number, "Drill": number}},
  "aiTip": string
}}

strokePercentages are fractions between 0 and 1. Leave out sections the workout does not have.

Workout:
{text}
"""

    SUMMARY_PROMPT = """You are an expert swim coach.
In two or three plain sentences, summarize the focus of this swim workout for the swimmer.
It totals {total_yards} yards. Do not use markdown.

Workout:
{text}
"""

    @staticmethod
    def _generate_openai(
        prompt: str, model: str, context: AIRequestContext, resources: ExitStack
    ) -> Callable[[], str]:
        client = AIClientFactory.create_openai_client(context=context)
        resources.callback(client.close)

        def _make_api_call() -> str:
            response = client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.1,
            )
            if not response.choices:
                return ""
            return response.choices[0].message.content or ""

        return _make_api_call

    @staticmethod
    def _generate_anthropic(
        prompt: str, model: str, context: AIRequestContext, resources: ExitStack
    ) -> Callable[[], str]:
        client = AIClientFactory.create_anthropic_client(context=context)
        resources.callback(client.close)

        def _make_api_call() -> str:
            message = client.messages.create(
                model=model,
                max_tokens=2048,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.1,
            )
            if not message.content:
                return ""
            return message.content[0].text or ""

        return _make_api_call

    @staticmethod
    def _generate_gemini(
        prompt: str, model: str, context: AIRequestContext, resources: ExitStack
    ) -> Callable[[], str]:
        client = AIClientFactory.create_gemini_client()
        resources.callback(client.close)

        def _make_api_call() -> str:
            response = client.post(
                f"/{gemini_model_path(model)}:generateContent",
                json={"contents": [{"role": "user", "parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            data = response.json()

            candidates = data.get("candidates") or []
            if not candidates:
                raise UpstreamError("Gemini returned no output", details={"response": data})

            parts = (candidates[0].get("content") or {}).get("parts") or [{}]
            return parts[0].get("text") or ""

        return _make_api_call

    @staticmethod
    def generate(
        prompt: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        feature_name: str = "swim_workout_analysis",
    ) -> str:
        """
        Run one prompt against the configured provider with retry.

        Raises:
            UnauthorizedError: provider API key missing
            UpstreamUnavailableError: still unavailable after every retry
            UpstreamError: non-retryable failure or empty output
        """
        provider = (provider or settings.LLM_PROVIDER).lower()
        model = model or settings.LLM_MODEL
        label = PROVIDER_LABELS.get(provider)
        if label is None:
            raise UpstreamError(
                f"Unknown LLM provider: {provider}. Use 'openai', 'anthropic' or 'gemini'."
            )

        context = AIRequestContext(
            feature_name=feature_name,
            custom_properties={"model": model},
        )
        builders = {
            "openai": LLMService._generate_openai,
            "anthropic": LLMService._generate_anthropic,
            "gemini": LLMService._generate_gemini,
        }

        # Provider clients live for one generate() call, retries included
        with ExitStack() as resources:
            try:
                make_api_call = builders[provider](prompt, model, context, resources)
            except ValueError:
                raise UnauthorizedError(f"Missing {label} API key")

            try:
                raw = retry_sync_call(
                    make_api_call,
                    max_attempts=settings.LLM_MAX_ATTEMPTS,
                    base_delay_seconds=settings.LLM_RETRY_BASE_DELAY,
                )
            except SwimAnalyzerError:
                raise
            except Exception as e:
                if is_retryable_error(e):
                    raise UpstreamUnavailableError(
                        details={
                            "provider": provider,
                            "attempts": settings.LLM_MAX_ATTEMPTS,
                            "reason": str(e),
                        }
                    ) from e
                logger.error(f"{label} API call failed: {e}")
                raise UpstreamError(
                    f"{label} API call failed: {e}",
                    details={"provider": provider},
                ) from e

        if not raw.strip():
            raise UpstreamError("LLM returned no output", details={"provider": provider})
        return raw

    @staticmethod
    def analyze_workout(
        text: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Analyze workout text with the LLM.

        Output that is not a JSON object is returned as `rawOutput` rather
        than discarded. A parsed object is validated and reshaped; the
        optional summary call adds `aiSummary`.
        """
        provider = (provider or settings.LLM_PROVIDER).lower()
        raw = LLMService.generate(
            LLMService.ANALYSIS_PROMPT.format(text=text),
            provider=provider,
            model=model,
        )

        parsed = parse_json_output(raw)
        if parsed is None:
            logger.warning("LLM output was not valid JSON; returning raw output")
            return {"rawOutput": raw, "source": provider}

        try:
            analysis = LLMAnalysis.model_validate(parsed)
        except ValidationError as e:
            raise UpstreamError(
                "LLM returned malformed analysis",
                details={"provider": provider, "errors": str(e)},
            ) from e

        result = analysis.model_dump(by_alias=True)
        result["source"] = provider

        if settings.LLM_SUMMARY_ENABLED:
            summary_prompt = LLMService.SUMMARY_PROMPT.format(
                total_yards=int(analysis.total_yards),
                text=text,
            )
            result["aiSummary"] = LLMService.generate(
                summary_prompt,
                provider=provider,
                model=model,
                feature_name="swim_workout_summary",
            ).strip()
        else:
            result.setdefault("aiSummary", "")

        return result

    @staticmethod
    def describe(provider: Optional[str] = None, model: Optional[str] = None) -> Dict[str, str]:
        """Provider identifiers reported by the diagnostics endpoint."""
        provider = (provider or settings.LLM_PROVIDER).lower()
        model = model or settings.LLM_MODEL
        info = {"provider": provider, "model": model}
        if provider == "gemini":
            info["endpoint"] = f"{GEMINI_BASE_URL}{gemini_model_path(model)}:generateContent"
        return info
