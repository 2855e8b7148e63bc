"""Tracing utilities backed by Langfuse.

The summary endpoint brackets every request with a Langfuse trace and
each model call with a generation record. ``Tracer`` hides the SDK
behind three small handles (trace, generation, end) so route code and
tests never touch Langfuse directly.

If ``LANGFUSE_ENABLED=false`` or no key pair is configured the tracer
hands out no-op handles. When tracing *is* configured, SDK failures are
raised as ``TracingError`` and surface like any other request failure.
Delivery itself is fire-and-forget: the SDK batches events in the
background and the app flushes it on shutdown.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from langfuse import Langfuse

from shared.errors import TracingError
from shared.settings import Settings

logger = logging.getLogger(__name__)


class _NoopGeneration:
    """Generation handle used when tracing is disabled."""

    def end(self, output: Any = None, **kwargs: Any) -> None:
        return None


class _NoopTrace:
    """Trace handle used when tracing is disabled."""

    id: Optional[str] = None

    def generation(self, name: str, input: Any = None, **kwargs: Any) -> _NoopGeneration:
        return _NoopGeneration()


class GenerationHandle:
    """An open Langfuse generation; call ``end`` exactly once."""

    def __init__(self, generation: Any, input_text: str = "") -> None:
        self._generation = generation
        self._input_text = input_text

    def end(self, output: Any = None, **kwargs: Any) -> None:
        usage = None
        if isinstance(output, str):
            usage = {
                "input": estimate_tokens(self._input_text),
                "output": estimate_tokens(output),
                "unit": "TOKENS",
            }
        try:
            self._generation.end(output=output, usage=usage, **kwargs)
        except Exception as e:
            raise TracingError(str(e)) from e


class TraceHandle:
    """An open Langfuse trace."""

    def __init__(self, trace: Any) -> None:
        self._trace = trace

    @property
    def id(self) -> Optional[str]:
        return getattr(self._trace, "id", None)

    def generation(
        self,
        name: str,
        input: Any = None,
        model: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> GenerationHandle:
        try:
            gen = self._trace.generation(
                name=name, input=input, model=model, metadata=metadata
            )
        except Exception as e:
            raise TracingError(str(e)) from e
        return GenerationHandle(gen, input if isinstance(input, str) else "")


class Tracer:
    """Tracer facade with a Langfuse backend or a no-op fallback."""

    def __init__(
        self, settings: Optional[Settings] = None, client: Any = None
    ) -> None:
        self._settings = settings or Settings()
        self._client = client
        if self._client is None and self._settings.langfuse_enabled:
            public_key = self._settings.langfuse_public_key
            secret_key = self._settings.langfuse_secret_key
            if public_key and secret_key:
                self._client = Langfuse(
                    public_key=public_key,
                    secret_key=secret_key,
                    host=self._settings.langfuse_host,
                )
            else:
                logger.warning("Langfuse keys not configured; tracing disabled")

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def trace(
        self,
        name: str,
        input: Optional[dict] = None,
        metadata: Optional[dict] = None,
    ) -> TraceHandle | _NoopTrace:
        if self._client is None:
            return _NoopTrace()
        try:
            tr = self._client.trace(name=name, input=input, metadata=metadata)
        except Exception as e:
            raise TracingError(str(e)) from e
        return TraceHandle(tr)

    def flush(self) -> None:
        if self._client is None:
            return
        try:
            self._client.flush()
        except Exception:
            # Shutdown path; nothing left to report the failure to
            logger.exception("Failed to flush Langfuse events")


def estimate_tokens(text: str) -> int:
    """Very rough subword token estimate (for usage metadata only)."""
    if not text:
        return 0
    # Approximate: 1 token ~= 4 chars for English-like text
    return max(1, int(len(text) / 4))
