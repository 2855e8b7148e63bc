"""Summary API for GCP documentation search.

This service exposes the single endpoint the search frontend calls after
it has retrieved documentation snippets:

- POST `/api/generate-summary`: answer a question from caller-supplied
  search results using Gemini, traced in Langfuse.

Run locally with ``uvicorn services.summary_api.app.main:app``. Set
``OFFLINE_MODE=1`` to answer from a deterministic offline model instead
of calling Gemini.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shared.log import configure_logging

from .deps import get_settings, get_tracer
from .routers import summary
from .routers.summary import error_response

s = get_settings()
configure_logging(s.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="GCP Docs Summary API", version="0.1.0")


# ---------- Fallback for errors raised outside the route ----------
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Shape errors raised outside the route (e.g. dependency setup) like route errors.

    Starlette still re-raises the exception after this response is sent,
    so the server logs it a second time.
    """
    return error_response(exc, get_settings())


# ---------------------------------------------------------------


@app.get("/")
def _root():
    return {"status": "ok", "service": "summary-api"}


@app.get("/health")
def _health():
    return {"status": "ok"}


# -------- CORS (allow the search frontend) --------
origins = s.cors_origin_list
if not origins:
    origins = ["http://localhost:3000"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# ----------------------------------------------


app.include_router(summary.router)


@app.on_event("startup")
async def _log_config() -> None:
    logger.info(
        "summary-api starting: env=%s model=%s offline=%s tracing=%s",
        s.app_env,
        s.gemini_model,
        s.offline_mode,
        get_tracer().enabled,
    )


@app.on_event("shutdown")
def _flush_traces() -> None:
    get_tracer().flush()
