"""Main FastAPI application for the offer letter relay."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from offer_relay import __version__
from offer_relay.config import cors_origins
from offer_relay.endpoints import health, offer_letters
from offer_relay.utils.logging import configure_logging, get_logger

# === Initialization ===
configure_logging()
logger = get_logger("api")

app = FastAPI(title="Offer Letter Relay", version=__version__)

origins = cors_origins()
if origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    logger.info("CORS enabled", extra={"origins": origins})

# === Router registration ===
app.include_router(offer_letters.router)
app.include_router(health.router)


# === Global error handler ===
@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Return a uniform JSON error response for any unhandled exception."""
    _ = request  # FastAPI requires this argument
    logger.exception("Unhandled exception during request processing: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc) or "Unknown error"},
    )


__all__ = ["app"]
