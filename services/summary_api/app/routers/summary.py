"""
GCP documentation summary router.

Takes a user question plus search results already fetched by the caller,
builds the summary prompt, asks the model for an answer and wraps the
call in a Langfuse trace. Nothing is cached: identical requests each
reach the model.

Error mapping:
- missing/blank ``query`` or a non-list ``context`` -> 400 with a fixed message
- anything else -> 500 ``{"error", "status"}``, plus ``details`` in development
"""

from __future__ import annotations

import logging
import math
import traceback
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from services.llm_generate.app.gemini import ModelClient
from services.llm_generate.app.prompts import build_summary_prompt, format_context
from shared.errors import RequestValidationError, error_kind, original_error
from shared.models import (
    ErrorDetails,
    ErrorResponse,
    SummaryResponse,
    ValidationErrorResponse,
)
from shared.settings import Settings
from shared.tracing import Tracer

from ..deps import get_model, get_settings, get_tracer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summary"])

FALLBACK_ERROR_MESSAGE = "Failed to generate summary"


def _is_blank(value: Any) -> bool:
    """True for absent, empty or zero-like values (``[]`` and ``{}`` are present)."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def validate_summary_body(body: Any) -> tuple[Any, list]:
    """Return ``(query, context)`` or raise ``RequestValidationError``."""
    fields = body if isinstance(body, dict) else {}
    query = fields.get("query")
    context = fields.get("context")
    if _is_blank(query):
        raise RequestValidationError("Query is required")
    if not isinstance(context, list):
        raise RequestValidationError("Valid context array is required")
    return query, context


def error_response(exc: BaseException, settings: Settings) -> JSONResponse:
    """Build the 500 payload; debug details only in development."""
    kind = error_kind(exc)
    cause = original_error(exc)
    logger.error("Summary generation error (%s): %s", kind.value, exc, exc_info=exc)
    details = None
    if settings.is_development:
        details = ErrorDetails(
            errorType=type(cause).__name__,
            kind=kind.value,
            stack="".join(
                traceback.format_exception(type(cause), cause, cause.__traceback__)
            ),
        )
    payload = ErrorResponse(error=str(exc) or FALLBACK_ERROR_MESSAGE, details=details)
    return JSONResponse(status_code=500, content=payload.model_dump(exclude_none=True))


@router.post(
    "/api/generate-summary",
    response_model=SummaryResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_summary(
    request: Request,
    settings: Settings = Depends(get_settings),
    tracer: Tracer = Depends(get_tracer),
    model: ModelClient = Depends(get_model),
) -> Any:
    """Summarize ``context`` into an answer for ``query``.

    Body: ``{"query": str, "context": [{"content", "metadata"?, "score"}]}``.
    Results are rendered lowest score first.
    """
    try:
        body = await request.json()

        # The trace is opened before validation so rejected requests are visible too
        trace = tracer.trace(name=settings.trace_name)

        try:
            query, context = validate_summary_body(body)
        except RequestValidationError as e:
            return JSONResponse(
                status_code=400, content=ValidationErrorResponse(error=str(e)).model_dump()
            )

        prompt = build_summary_prompt(question=query, context=format_context(context))

        generation = trace.generation(
            name=settings.generation_name,
            input=prompt,
            model=model.model_name,
            metadata={"context_count": len(context)},
        )

        if settings.log_prompts:
            logger.info("Sending prompt to %s: %s", model.model_name, prompt)
        result = await model.generate_content(prompt)
        if settings.log_prompts:
            logger.info("Received result from %s: %s", model.model_name, result)

        generation.end(output=result)

        return SummaryResponse(summary=result)
    except Exception as e:
        return error_response(e, settings)
