import logging

import httpx

from recurrente.schemas.base import MessageResponse
from recurrente.schemas.subscriptions import (
    ProductSubscription,
    SubscriptionProductResponse,
    SubscriptionStatusResponse,
)
from recurrente.services.http_client import parse_response, send
from recurrente.utils.conversion import to_snake_case

logger = logging.getLogger(__name__)


async def create_subscription(
    client: httpx.AsyncClient, data: ProductSubscription
) -> SubscriptionProductResponse:
    # Recurring products are created through the products endpoint.
    response = await send(
        client, "POST", "/products/", json=to_snake_case(data.to_payload())
    )
    created = parse_response(SubscriptionProductResponse, response)
    logger.info(f"Created subscription product {created.id}")
    return created


async def get_subscription(
    client: httpx.AsyncClient, subscription_id: str
) -> SubscriptionStatusResponse:
    response = await send(client, "GET", f"/subscriptions/{subscription_id}")
    return parse_response(SubscriptionStatusResponse, response)


async def cancel_subscription(
    client: httpx.AsyncClient, subscription_id: str
) -> MessageResponse:
    response = await send(client, "DELETE", f"/subscriptions/{subscription_id}")
    logger.info(f"Canceled subscription {subscription_id}")
    return MessageResponse(
        message=f"Subscription canceled successfully. Status: {response.status_code}"
    )
