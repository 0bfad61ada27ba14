"""Offer letter submission relayed to the n8n webhook."""
from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from offer_relay.config import WEBHOOK_URL_ENV, RelaySettings, get_settings
from offer_relay.schemas import ErrorResponse, OfferLetterPayload, SubmitSuccessResponse
from offer_relay.utils import webhook_client
from offer_relay.utils.logging import get_logger

router = APIRouter(prefix="/api", tags=["offer-letters"])
logger = get_logger("endpoints.offer_letters")

DEMO_NOTE = (
    f"Configure {WEBHOOK_URL_ENV} environment variable to send to actual n8n webhook"
)


def _json(status_code: int, content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


def _invalid_body_issue(exc: ValueError) -> dict[str, Any]:
    return {
        "type": "json_invalid",
        "loc": ["body"],
        "msg": f"Invalid JSON: {exc}",
        "input": None,
    }


async def _read_payload(request: Request) -> OfferLetterPayload | list[dict[str, Any]]:
    """Return the validated payload or the list of validation issues."""

    try:
        body = await request.json()
    except ValueError as exc:
        return [_invalid_body_issue(exc)]

    try:
        return OfferLetterPayload.model_validate(body)
    except ValidationError as exc:
        # Round-trip through JSON so error contexts holding exceptions serialise.
        return json.loads(exc.json(include_url=False))


async def _relay(payload: OfferLetterPayload, settings: RelaySettings) -> JSONResponse:
    body = payload.to_webhook_json()

    if not settings.webhook_configured:
        logger.info("No n8n webhook configured - simulating success for demo")
        logger.info(
            "Payload would be sent: %s",
            json.dumps(body, indent=2, ensure_ascii=False),
        )
        return _json(
            status.HTTP_200_OK,
            {
                "success": True,
                "message": "Offer letter submitted successfully (demo mode)",
                "note": DEMO_NOTE,
            },
        )

    try:
        result = await webhook_client.forward_payload(settings.webhook_url, body)
    except webhook_client.WebhookConnectionError as exc:
        logger.exception("Error calling n8n webhook", extra={"url": exc.url})
        return _json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {
                "error": "Failed to connect to n8n webhook",
                "message": exc.detail or "Network error",
            },
        )

    if not result.ok:
        logger.error(
            "n8n webhook error",
            extra={"status_code": result.status_code, "response": result.text},
        )
        return _json(
            result.status_code,
            {"error": "Failed to submit to n8n webhook", "details": result.text},
        )

    logger.info(
        "Offer letter delivered to n8n webhook",
        extra={"status_code": result.status_code},
    )
    return _json(
        status.HTTP_200_OK,
        {
            "success": True,
            "message": "Offer letter submitted successfully",
            "data": result.data,
        },
    )


@router.post(
    "/submit-offer-letter",
    response_model=SubmitSuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_offer_letter(
    request: Request,
    settings: RelaySettings = Depends(get_settings),
) -> JSONResponse:
    """Validate an offer letter and forward it to the configured webhook."""

    try:
        payload = await _read_payload(request)
        if isinstance(payload, list):
            logger.warning(
                "Rejected invalid offer letter payload",
                extra={"issues": len(payload)},
            )
            return _json(
                status.HTTP_400_BAD_REQUEST,
                {"error": "Invalid request data", "details": payload},
            )

        return await _relay(payload, settings)
    except Exception as exc:
        logger.exception("Error submitting offer letter")
        return _json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"error": "Internal server error", "message": str(exc) or "Unknown error"},
        )


__all__ = ["DEMO_NOTE", "router", "submit_offer_letter"]
