import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal, overload

from recurrente.core.errors import UnregisteredEventTypeError
from recurrente.schemas.events import (
    EventType,
    PaymentIntentFailed,
    PaymentIntentSucceeded,
    RecurrenteWebhookEvent,
    SubscriptionCancel,
    SubscriptionCreate,
    SubscriptionPastDue,
    SubscriptionPaused,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class WebhookDispatcher:
    """Routes verified events to the one handler registered for their type.

    Registering a type again replaces the previous handler. The registry is
    not locked: register handlers during startup and only dispatch
    concurrently.
    """

    def __init__(self, handlers: Mapping[EventType | str, Handler] | None = None):
        self._handlers: dict[EventType, Handler] = {}
        for event_type, handler in (handlers or {}).items():
            self.register(event_type, handler)

    @classmethod
    def with_default_handlers(cls) -> "WebhookDispatcher":
        """A dispatcher that logs every event type."""
        return cls({event_type: _log_event for event_type in EventType})

    @overload
    def register(
        self,
        event_type: Literal[
            EventType.PAYMENT_INTENT_SUCCEEDED, "payment_intent.succeeded"
        ],
        handler: Callable[[PaymentIntentSucceeded], None],
    ) -> None: ...

    @overload
    def register(
        self,
        event_type: Literal[EventType.PAYMENT_INTENT_FAILED, "payment_intent.failed"],
        handler: Callable[[PaymentIntentFailed], None],
    ) -> None: ...

    @overload
    def register(
        self,
        event_type: Literal[EventType.SUBSCRIPTION_CREATE, "subscription.create"],
        handler: Callable[[SubscriptionCreate], None],
    ) -> None: ...

    @overload
    def register(
        self,
        event_type: Literal[EventType.SUBSCRIPTION_PAST_DUE, "subscription.past_due"],
        handler: Callable[[SubscriptionPastDue], None],
    ) -> None: ...

    @overload
    def register(
        self,
        event_type: Literal[EventType.SUBSCRIPTION_PAUSED, "subscription.paused"],
        handler: Callable[[SubscriptionPaused], None],
    ) -> None: ...

    @overload
    def register(
        self,
        event_type: Literal[EventType.SUBSCRIPTION_CANCEL, "subscription.cancel"],
        handler: Callable[[SubscriptionCancel], None],
    ) -> None: ...

    @overload
    def register(self, event_type: EventType | str, handler: Handler) -> None: ...

    def register(self, event_type, handler):
        event_type = EventType(event_type)
        if event_type in self._handlers:
            logger.debug(f"Replacing webhook handler for {event_type.value}")
        self._handlers[event_type] = handler

    def is_registered(self, event_type: EventType | str) -> bool:
        try:
            return EventType(event_type) in self._handlers
        except ValueError:
            return False

    def dispatch(self, event: RecurrenteWebhookEvent) -> None:
        """Call the handler for ``event``; handler exceptions propagate."""
        handler = self._handlers.get(EventType(event.event_type))
        if handler is None:
            raise UnregisteredEventTypeError(event.event_type)
        handler(event)


def _log_event(event: RecurrenteWebhookEvent) -> None:
    logger.info(f"Received {event.event_type} event {event.id}")
