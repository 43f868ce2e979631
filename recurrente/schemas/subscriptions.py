from typing import Literal, Optional

from recurrente.schemas.base import CamelModel
from recurrente.schemas.products import (
    BillingInfoRequirement,
    BillingInterval,
    Currency,
    Requirement,
)


class RecurringPriceAttributes(CamelModel):
    currency: Currency
    charge_type: Literal["recurring"] = "recurring"
    amount_in_cents: int
    billing_interval_count: int
    billing_interval: BillingInterval
    free_trial_interval_count: Optional[int] = None
    free_trial_interval: Optional[BillingInterval] = None
    periods_before_automatic_cancellation: Optional[int] = None
    periods_before_allowed_to_cancel: Optional[int] = None


class SubscriptionProduct(CamelModel):
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    prices_attributes: list[RecurringPriceAttributes]
    cancel_url: Optional[str] = None
    success_url: Optional[str] = None
    custom_terms_and_conditions: Optional[str] = None
    phone_requirement: Optional[Requirement] = None
    address_requirement: Optional[Requirement] = None
    billing_info_requirement: Optional[BillingInfoRequirement] = None
    adjustable_quantity: Optional[bool] = None


class ProductSubscription(CamelModel):
    """Request body for a product billed on a recurring interval."""

    product: SubscriptionProduct
    metadata: Optional[dict[str, str]] = None


class SubscriptionPrice(CamelModel):
    id: str
    amount_in_cents: int
    currency: str
    billing_interval_count: Optional[int] = None
    billing_interval: Optional[str] = None
    charge_type: str = "recurring"
    periods_before_automatic_cancellation: Optional[int] = None
    free_trial_interval_count: Optional[int] = None
    free_trial_interval: Optional[str] = None


class SubscriptionProductResponse(CamelModel):
    id: str
    status: str
    name: str
    description: Optional[str] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    custom_terms_and_conditions: Optional[str] = None
    phone_requirement: Optional[str] = None
    address_requirement: Optional[str] = None
    billing_info_requirement: Optional[str] = None
    prices: list[SubscriptionPrice] = []
    storefront_link: Optional[str] = None
    metadata: Optional[dict[str, str]] = None


class Subscriber(CamelModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


class ResourceRef(CamelModel):
    id: str


class SubscriptionStatusResponse(CamelModel):
    id: str
    description: Optional[str] = None
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    current_period_start: Optional[str] = None
    current_period_end: Optional[str] = None
    tax_name: Optional[str] = None
    tax_id: Optional[str] = None
    subscriber: Optional[Subscriber] = None
    checkout: Optional[ResourceRef] = None
    product: Optional[ResourceRef] = None
