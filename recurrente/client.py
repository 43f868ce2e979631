import httpx

from recurrente.core.config import Settings
from recurrente.schemas.base import MessageResponse
from recurrente.schemas.products import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from recurrente.schemas.subscriptions import (
    ProductSubscription,
    SubscriptionProductResponse,
    SubscriptionStatusResponse,
)
from recurrente.services import products, subscriptions
from recurrente.services.http_client import build_client


class Recurrente:
    """Async client for the Recurrente products and subscriptions API.

    Usage::

        async with Recurrente() as recurrente:
            product = await recurrente.get_product("prod_123")

    Every method raises RecurrenteAPIError when the request fails.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.client = client or build_client(settings)

    async def __aenter__(self) -> "Recurrente":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def test(self) -> MessageResponse:
        return await products.ping(self.client)

    async def create_product(self, data: CreateProductRequest) -> ProductResponse:
        return await products.create_product(self.client, data)

    async def get_product(self, product_id: str) -> ProductResponse:
        return await products.get_product(self.client, product_id)

    async def get_all_products(self, page: int = 1) -> list[ProductResponse]:
        return await products.get_all_products(self.client, page)

    async def update_product(
        self, product_id: str, data: UpdateProductRequest
    ) -> ProductResponse:
        return await products.update_product(self.client, product_id, data)

    async def delete_product(self, product_id: str) -> MessageResponse:
        return await products.delete_product(self.client, product_id)

    async def create_subscription(
        self, data: ProductSubscription
    ) -> SubscriptionProductResponse:
        return await subscriptions.create_subscription(self.client, data)

    async def get_subscription(
        self, subscription_id: str
    ) -> SubscriptionStatusResponse:
        return await subscriptions.get_subscription(self.client, subscription_id)

    async def cancel_subscription(self, subscription_id: str) -> MessageResponse:
        return await subscriptions.cancel_subscription(self.client, subscription_id)
