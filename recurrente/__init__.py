"""Recurrente API client and webhook helpers."""

from recurrente.client import Recurrente
from recurrente.core.config import Settings, get_settings
from recurrente.core.errors import (
    ConfigurationError,
    RecurrenteAPIError,
    RecurrenteError,
    UnregisteredEventTypeError,
    WebhookPayloadError,
    WebhookVerificationError,
)
from recurrente.schemas.events import EventType, RecurrenteWebhookEvent
from recurrente.services.webhook_dispatch import WebhookDispatcher
from recurrente.services.webhook_signing import sign_payload
from recurrente.services.webhook_verify import WebhookVerifier
from recurrente.utils.conversion import to_camel_case, to_snake_case

__version__ = "1.0.1"

__all__ = [
    "ConfigurationError",
    "EventType",
    "Recurrente",
    "RecurrenteAPIError",
    "RecurrenteError",
    "RecurrenteWebhookEvent",
    "Settings",
    "UnregisteredEventTypeError",
    "WebhookDispatcher",
    "WebhookPayloadError",
    "WebhookVerificationError",
    "WebhookVerifier",
    "get_settings",
    "sign_payload",
    "to_camel_case",
    "to_snake_case",
]
