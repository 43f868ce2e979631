"""Webhook events delivered by Recurrente.

Every event carries an ``event_type`` tag; ``RecurrenteWebhookEvent`` is the
union of the six variants discriminated on that tag. Fields other than the
tag are optional because deliveries do not always include them, and unknown
fields are kept on the model.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import ConfigDict, Field, TypeAdapter

from recurrente.schemas.base import CamelModel


class EventType(str, Enum):
    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"
    PAYMENT_INTENT_FAILED = "payment_intent.failed"
    SUBSCRIPTION_CREATE = "subscription.create"
    SUBSCRIPTION_PAST_DUE = "subscription.past_due"
    SUBSCRIPTION_PAUSED = "subscription.paused"
    SUBSCRIPTION_CANCEL = "subscription.cancel"


class EventModel(CamelModel):
    model_config = ConfigDict(extra="allow")


class Card(EventModel):
    last4: Optional[str] = None
    network: Optional[str] = None


class PaymentMethod(EventModel):
    id: Optional[str] = None
    type: Optional[str] = None
    card: Optional[Card] = None


class CheckoutPaymentable(EventModel):
    type: Optional[str] = None
    id: Optional[str] = None
    tax_name: Optional[str] = None
    tax_id: Optional[str] = None
    address: Optional[Any] = None
    phone_number: Optional[str] = None


class CheckoutPayment(EventModel):
    id: Optional[str] = None
    paymentable: Optional[CheckoutPaymentable] = None


class Checkout(EventModel):
    id: Optional[str] = None
    status: Optional[str] = None
    payment: Optional[CheckoutPayment] = None
    payment_method: Optional[PaymentMethod] = None
    transfer_setups: list[str] = []
    metadata: dict[str, Any] = {}


class Customer(EventModel):
    email: Optional[str] = None
    full_name: Optional[str] = None
    id: Optional[str] = None


class Address(EventModel):
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None


class Paymentable(EventModel):
    id: Optional[str] = None
    tax_id: Optional[str] = None
    tax_name: Optional[str] = None
    type: Optional[str] = None
    address: Optional[Address] = None
    phone_number: Optional[str] = None


class Payment(EventModel):
    id: Optional[str] = None
    paymentable: Optional[Paymentable] = None


class ProductRef(EventModel):
    id: Optional[str] = None


class Invoice(EventModel):
    id: Optional[str] = None
    tax_invoice_url: Optional[str] = None


class PaymentIntentEvent(EventModel):
    id: Optional[str] = None
    api_version: Optional[str] = None
    checkout: Optional[Checkout] = None
    created_at: Optional[str] = None
    failure_reason: Optional[str] = None
    amount_in_cents: Optional[int] = None
    currency: Optional[str] = None
    fee: Optional[int] = None
    vat_withheld: Optional[int] = None
    vat_withheld_currency: Optional[str] = None
    customer: Optional[Customer] = None
    payment: Optional[Payment] = None
    product: Optional[ProductRef] = None
    invoice: Optional[Invoice] = None


class PaymentIntentSucceeded(PaymentIntentEvent):
    event_type: Literal["payment_intent.succeeded"]


class PaymentIntentFailed(PaymentIntentEvent):
    event_type: Literal["payment_intent.failed"]


class SubscriptionEvent(EventModel):
    id: Optional[str] = None
    api_version: Optional[str] = None
    created_at: Optional[str] = None
    customer_email: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None


class SubscriptionCreate(SubscriptionEvent):
    event_type: Literal["subscription.create"]


class SubscriptionPastDue(SubscriptionEvent):
    event_type: Literal["subscription.past_due"]


class SubscriptionPaused(SubscriptionEvent):
    event_type: Literal["subscription.paused"]


class SubscriptionCancel(SubscriptionEvent):
    event_type: Literal["subscription.cancel"]


RecurrenteWebhookEvent = Annotated[
    Union[
        PaymentIntentSucceeded,
        PaymentIntentFailed,
        SubscriptionCreate,
        SubscriptionPastDue,
        SubscriptionPaused,
        SubscriptionCancel,
    ],
    Field(discriminator="event_type"),
]

event_adapter: TypeAdapter[RecurrenteWebhookEvent] = TypeAdapter(
    RecurrenteWebhookEvent
)
