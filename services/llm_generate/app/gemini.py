"""Gemini model client for summary generation.

The route handler only needs ``generate_content(prompt) -> str``; that
capability is captured by ``ModelClient`` so tests and offline runs can
swap in a deterministic client.

Behavior:
- If OFFLINE_MODE is enabled, ``get_model_client`` returns ``OfflineModel``.
- Otherwise a ``GeminiService`` is built; a missing GEMINI_API_KEY is
  reported as a configuration error on the first call, not a silent
  fallback.
- Any failure from the Gemini SDK is raised as ``ModelError`` carrying
  the SDK's message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import google.generativeai as genai

from shared.errors import ConfigurationError, ModelError
from shared.settings import Settings


class ModelClient(Protocol):
    model_name: str

    async def generate_content(self, prompt: str) -> str: ...


class GeminiService:
    """Thin async wrapper around ``google.generativeai.GenerativeModel``."""

    def __init__(self, settings: Settings, model: Any = None) -> None:
        self.model_name = settings.gemini_model
        self._timeout = settings.gemini_timeout_seconds
        # Without a key the client is still built; the first call reports it
        if model is None and settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
            model = genai.GenerativeModel(
                self.model_name,
                generation_config=_generation_config(settings),
            )
        self._model = model

    def _request_options(self) -> Optional[Dict[str, Any]]:
        if self._timeout is None:
            return None
        return {"timeout": self._timeout}

    async def generate_content(self, prompt: str) -> str:
        if self._model is None:
            raise ConfigurationError("GEMINI_API_KEY is not configured")
        try:
            resp = await self._model.generate_content_async(
                prompt, request_options=self._request_options()
            )
            # .text raises ValueError when the candidate was blocked or empty
            text = resp.text
        except Exception as e:
            raise ModelError(str(e)) from e
        if not text:
            raise ModelError(f"{self.model_name} returned an empty response")
        return text


def _generation_config(settings: Settings):
    params: Dict[str, Any] = {}
    if settings.gemini_temperature is not None:
        params["temperature"] = settings.gemini_temperature
    if settings.gemini_max_output_tokens is not None:
        params["max_output_tokens"] = settings.gemini_max_output_tokens
    if not params:
        return None
    return genai.GenerationConfig(**params)


class OfflineModel:
    """Deterministic stand-in used for local development and tests."""

    model_name = "offline"

    def __init__(self) -> None:
        self.calls = 0

    async def generate_content(self, prompt: str) -> str:
        self.calls += 1
        question = ""
        for line in prompt.splitlines():
            if line.startswith("User Question: "):
                question = line[len("User Question: ") :].strip()
                break
        return f"[offline] Summary for: {question}"


def get_model_client(settings: Optional[Settings] = None) -> ModelClient:
    settings = settings or Settings()
    if settings.offline_mode:
        return OfflineModel()
    return GeminiService(settings)
