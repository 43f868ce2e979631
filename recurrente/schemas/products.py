from typing import Literal, Optional

from pydantic import Field

from recurrente.schemas.base import CamelModel

Currency = Literal["GTQ", "USD"]
Requirement = Literal["required", "optional", "none"]
BillingInfoRequirement = Literal["optional", "none"]
BillingInterval = Literal["month", "week", "year"]


class OneTimePriceAttributes(CamelModel):
    currency: Currency
    charge_type: Literal["one_time"] = "one_time"
    amount_in_cents: int


class CreateProductRequest(CamelModel):
    """A product sold with a one-time payment."""

    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    prices_attributes: list[OneTimePriceAttributes]
    cancel_url: Optional[str] = None
    success_url: Optional[str] = None
    custom_terms_and_conditions: Optional[str] = None
    phone_requirement: Requirement
    address_requirement: Requirement
    billing_info_requirement: BillingInfoRequirement
    adjustable_quantity: Optional[bool] = None
    metadata: Optional[dict[str, str]] = None


class PriceUpdateAttributes(CamelModel):
    # Sending destroy=True removes the price from the product.
    id: str
    amount_in_cents: Optional[int] = None
    currency: Optional[Currency] = None
    billing_interval_count: Optional[int] = None
    billing_interval: Optional[Literal["month", "week", "year", ""]] = None
    charge_type: Optional[Literal["one_time", "recurring"]] = None
    destroy: Optional[bool] = Field(default=None, alias="_destroy")


class UpdateProductRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    custom_terms_and_conditions: Optional[str] = None
    phone_requirement: Optional[Requirement] = None
    address_requirement: Optional[Requirement] = None
    billing_info_requirement: Optional[BillingInfoRequirement] = None
    prices_attributes: Optional[list[PriceUpdateAttributes]] = None
    metadata: Optional[dict[str, str]] = None


class ProductPrice(CamelModel):
    id: str
    amount_in_cents: int
    currency: str
    charge_type: str
    billing_interval_count: Optional[int] = None
    billing_interval: Optional[str] = None
    periods_before_automatic_cancellation: Optional[int] = None
    free_trial_interval_count: Optional[int] = None
    free_trial_interval: Optional[str] = None


class ProductResponse(CamelModel):
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
    prices: list[ProductPrice] = []
    storefront_link: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
