import logging
from unittest.mock import MagicMock

import pytest

from recurrente.core.errors import UnregisteredEventTypeError
from recurrente.schemas.events import (
    EventType,
    PaymentIntentSucceeded,
    SubscriptionCancel,
    SubscriptionPaused,
)
from recurrente.services.webhook_dispatch import WebhookDispatcher


def test_dispatch_invokes_registered_handler_with_event(dispatcher):
    handler = MagicMock()
    event = SubscriptionCancel(event_type="subscription.cancel", customer_id="cus_1")
    dispatcher.register("subscription.cancel", handler)

    dispatcher.dispatch(event)

    handler.assert_called_once()
    assert handler.call_args.args[0] is event


def test_last_registration_wins(dispatcher):
    h1, h2 = MagicMock(), MagicMock()
    dispatcher.register("payment_intent.succeeded", h1)
    dispatcher.register(EventType.PAYMENT_INTENT_SUCCEEDED, h2)

    dispatcher.dispatch(PaymentIntentSucceeded(event_type="payment_intent.succeeded"))

    h2.assert_called_once()
    h1.assert_not_called()


def test_unregistered_event_type_raises(dispatcher):
    other = MagicMock()
    dispatcher.register("subscription.cancel", other)

    with pytest.raises(UnregisteredEventTypeError, match="subscription.paused") as exc_info:
        dispatcher.dispatch(SubscriptionPaused(event_type="subscription.paused"))

    assert exc_info.value.event_type == "subscription.paused"
    other.assert_not_called()


def test_new_dispatcher_starts_empty():
    dispatcher = WebhookDispatcher()
    assert not any(dispatcher.is_registered(t) for t in EventType)


def test_dispatchers_do_not_share_handlers():
    first, second = WebhookDispatcher(), WebhookDispatcher()
    first.register("subscription.cancel", MagicMock())
    assert first.is_registered("subscription.cancel")
    assert not second.is_registered("subscription.cancel")


def test_initial_handlers():
    handler = MagicMock()
    dispatcher = WebhookDispatcher({EventType.SUBSCRIPTION_PAUSED: handler})
    event = SubscriptionPaused(event_type="subscription.paused")

    dispatcher.dispatch(event)

    handler.assert_called_once_with(event)


def test_register_unknown_event_type(dispatcher):
    with pytest.raises(ValueError):
        dispatcher.register("invoice.paid", MagicMock())
    assert not dispatcher.is_registered("invoice.paid")


def test_handler_errors_propagate(dispatcher):
    def failing(event):
        raise RuntimeError("handler blew up")

    dispatcher.register("subscription.cancel", failing)

    with pytest.raises(RuntimeError, match="handler blew up"):
        dispatcher.dispatch(SubscriptionCancel(event_type="subscription.cancel"))


def test_default_handlers_log_every_event_type(caplog):
    dispatcher = WebhookDispatcher.with_default_handlers()
    assert all(dispatcher.is_registered(t) for t in EventType)

    with caplog.at_level(logging.INFO, logger="recurrente.services.webhook_dispatch"):
        dispatcher.dispatch(SubscriptionCancel(id="evt_9", event_type="subscription.cancel"))

    assert "Received subscription.cancel event evt_9" in caplog.text


def test_verified_event_reaches_handler(verifier, dispatcher, sign):
    payload = '{"event_type":"subscription.cancel","customer_id":"cus_1"}'
    received = []
    dispatcher.register("subscription.cancel", received.append)

    event = verifier.verify(payload, sign(payload))
    dispatcher.dispatch(event)

    assert received == [event]
    assert received[0].customer_id == "cus_1"
