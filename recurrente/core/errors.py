from typing import Any, Optional

from recurrente.schemas.errors import ErrorResponse


class RecurrenteError(Exception):
    pass


class ConfigurationError(RecurrenteError):
    pass


class RecurrenteAPIError(RecurrenteError):
    """Normalized failure of a call to the Recurrente API."""

    def __init__(self, response: ErrorResponse, status_code: Optional[int] = None):
        self.response = response
        self.status_code = status_code
        super().__init__(response.message)

    @property
    def message(self) -> str:
        return self.response.message

    @property
    def errors(self) -> dict[str, Any]:
        return self.response.errors or {}


class WebhookVerificationError(RecurrenteError):
    pass


class WebhookPayloadError(RecurrenteError):
    pass


class UnregisteredEventTypeError(RecurrenteError):
    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"No handler registered for event type: {event_type}")
