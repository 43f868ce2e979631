"""Verification of Svix-signed webhook deliveries from Recurrente.

A delivery is accepted when one of the ``v1`` signatures in the
``svix-signature`` header equals base64(HMAC-SHA256(key, "{id}.{ts}.{body}"))
and the timestamp is within the tolerance window. Callers only ever see a
generic "Invalid webhook signature"; the specific reason is logged.
"""

import hmac
import json
import logging
import time
from collections.abc import Mapping

from pydantic import ValidationError

from recurrente.core.config import Settings, get_settings
from recurrente.core.errors import WebhookPayloadError, WebhookVerificationError
from recurrente.schemas.events import RecurrenteWebhookEvent, event_adapter
from recurrente.services.webhook_signing import (
    SIGNATURE_VERSION,
    compute_signature,
    decode_secret,
)
from recurrente.utils.conversion import to_camel_case

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 300  # seconds

HEADER_NAMES = {
    "id": ("svix-id", "webhook-id"),
    "timestamp": ("svix-timestamp", "webhook-timestamp"),
    "signature": ("svix-signature", "webhook-signature"),
}

INVALID_SIGNATURE = "Invalid webhook signature"


def _header(headers: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = headers.get(name)
        if value:
            return value
    return None


class WebhookVerifier:
    def __init__(self, secret: str | None, tolerance: int = DEFAULT_TOLERANCE):
        self._key = decode_secret(secret or "")
        self.tolerance = tolerance

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "WebhookVerifier":
        settings = settings or get_settings()
        return cls(settings.svix_signing_secret, tolerance=settings.webhook_tolerance)

    def verify_signature(self, payload: bytes | str, headers: Mapping[str, str]) -> str:
        """Check the signature headers and return the payload as text."""
        lowered = {k.lower(): v for k, v in headers.items()}
        msg_id = _header(lowered, HEADER_NAMES["id"])
        timestamp = _header(lowered, HEADER_NAMES["timestamp"])
        signature_header = _header(lowered, HEADER_NAMES["signature"])
        if not (msg_id and timestamp and signature_header):
            raise WebhookVerificationError("Missing required headers")

        try:
            sent_at = int(timestamp)
        except ValueError:
            logger.warning(f"Rejecting webhook {msg_id}: malformed timestamp")
            raise WebhookVerificationError(INVALID_SIGNATURE)

        if abs(time.time() - sent_at) > self.tolerance:
            logger.warning(f"Rejecting webhook {msg_id}: timestamp outside tolerance")
            raise WebhookVerificationError(INVALID_SIGNATURE)

        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning(f"Rejecting webhook {msg_id}: body is not UTF-8")
                raise WebhookVerificationError(INVALID_SIGNATURE)

        expected = compute_signature(self._key, msg_id, timestamp, payload).encode()
        for versioned in signature_header.split(" "):
            version, _, signature = versioned.partition(",")
            if version != SIGNATURE_VERSION:
                continue
            if hmac.compare_digest(expected, signature.encode()):
                return payload

        logger.warning(f"Rejecting webhook {msg_id}: no matching signature")
        raise WebhookVerificationError(INVALID_SIGNATURE)

    def verify(
        self, payload: bytes | str, headers: Mapping[str, str]
    ) -> RecurrenteWebhookEvent:
        """Authenticate a delivery and parse it into a typed event."""
        body = self.verify_signature(payload, headers)
        try:
            data = json.loads(body)
        except json.JSONDecodeError as exc:
            raise WebhookPayloadError("Webhook payload is not valid JSON") from exc
        if not isinstance(data, dict):
            raise WebhookPayloadError("Webhook payload must be a JSON object")

        try:
            event = event_adapter.validate_python(to_camel_case(data))
        except ValidationError as exc:
            raise WebhookPayloadError(
                f"Unrecognized webhook event: {data.get('event_type')}"
            ) from exc
        logger.info(f"Verified webhook event {event.event_type}")
        return event
