"""Single-shot delivery of offer letters to the configured n8n webhook."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from offer_relay.utils.logging import get_logger

logger = get_logger("utils.webhook_client")


class WebhookConnectionError(RuntimeError):
    """Raised when the webhook could not be reached at all."""

    def __init__(self, detail: str, *, url: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.url = url


@dataclass(slots=True)
class WebhookResponse:
    status_code: int
    ok: bool
    data: Any = field(default_factory=dict)
    text: str = ""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_body(response: httpx.Response) -> Any:
    try:
        return json.loads(response.content, parse_constant=_reject_constant)
    except ValueError:
        logger.debug(
            "Webhook returned a non-JSON body",
            extra={"status_code": response.status_code},
        )
        return {}


async def forward_payload(url: str, payload: dict[str, Any]) -> WebhookResponse:
    """POST ``payload`` to ``url`` exactly once.

    Non-2xx responses are returned with ``ok=False`` and the raw body text;
    only transport failures raise :class:`WebhookConnectionError`.
    """

    logger.info("Forwarding offer letter to webhook", extra={"url": url})
    try:
        # No timeout: slow workflows run to completion or fail in the network stack.
        async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
            response = await client.post(
                url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        detail = str(exc) or exc.__class__.__name__
        raise WebhookConnectionError(detail, url=url) from exc

    if not response.is_success:
        return WebhookResponse(
            status_code=response.status_code,
            ok=False,
            text=response.text,
        )

    return WebhookResponse(
        status_code=response.status_code,
        ok=True,
        data=_parse_body(response),
    )


__all__ = ["WebhookConnectionError", "WebhookResponse", "forward_payload"]
