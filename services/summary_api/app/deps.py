"""Dependency providers for the summary API.

Route handlers receive their settings, tracer and model client through
FastAPI's ``Depends`` so tests can replace them with
``app.dependency_overrides``. Each provider is cached so the Langfuse
client and Gemini model are built once per process.
"""

from __future__ import annotations

from functools import lru_cache

from services.llm_generate.app.gemini import ModelClient, get_model_client
from shared.settings import Settings
from shared.tracing import Tracer


@lru_cache()
def get_settings() -> Settings:
    return Settings()


@lru_cache()
def get_tracer() -> Tracer:
    return Tracer(get_settings())


@lru_cache()
def get_model() -> ModelClient:
    return get_model_client(get_settings())
