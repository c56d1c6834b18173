"""Rocket.Chat incoming-webhook delivery."""

from __future__ import annotations

import json
from dataclasses import dataclass

import httpx

from rocketchat_notifier.errors import DeliveryError, DeliveryRejected
from rocketchat_notifier.logging import get_logger

logger = get_logger(__name__)


def build_payload(text: str) -> bytes:
    """Webhook body ``{"text": ...}``.

    ``<``, ``>``, ``&`` and non-ASCII characters are written as-is, Rocket.Chat
    renders the text itself.
    """
    return json.dumps({"text": text}, ensure_ascii=False).encode("utf-8")


def render_response(response: httpx.Response) -> str:
    """Raw HTTP text of ``response``: status line, headers, blank line, body."""
    encoding = response.headers.encoding
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines += [f"{key.decode(encoding)}: {value.decode(encoding)}" for key, value in response.headers.raw]
    return "\r\n".join(lines) + "\r\n\r\n" + response.text


@dataclass(frozen=True)
class RocketChatNotifier:
    """Rocket.Chat incoming-webhook notifier.

    Note:
    - The webhook URL embeds the integration token, so keep it in the
      environment and never log it.
    - One POST per call with httpx client defaults. Nothing is retried.
    """

    webhook_url: httpx.URL | str

    async def send(self, text: str) -> httpx.Response:
        """Post ``text`` to the webhook.

        Raises:
            DeliveryError: the request could not be sent.
            DeliveryRejected: the webhook answered with a status above 299.
        """
        payload = build_payload(text)
        async with httpx.AsyncClient() as client:
            try:
                r = await client.post(
                    self.webhook_url,
                    content=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.TransportError as exc:
                raise DeliveryError(str(exc) or type(exc).__name__) from exc

        logger.info("webhook answered", status=r.status_code, bytes_sent=len(payload))
        if r.status_code > 299:
            raise DeliveryRejected(r)
        return r
