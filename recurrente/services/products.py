import logging

import httpx

from recurrente.schemas.base import MessageResponse
from recurrente.schemas.products import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from recurrente.services.http_client import parse_response, read_json, send
from recurrente.utils.conversion import to_snake_case

logger = logging.getLogger(__name__)


async def create_product(
    client: httpx.AsyncClient, data: CreateProductRequest
) -> ProductResponse:
    response = await send(
        client, "POST", "/products/", json=to_snake_case(data.to_payload())
    )
    product = parse_response(ProductResponse, response)
    logger.info(f"Created product {product.id}")
    return product


async def get_product(client: httpx.AsyncClient, product_id: str) -> ProductResponse:
    response = await send(client, "GET", f"/products/{product_id}")
    return parse_response(ProductResponse, response)


async def get_all_products(
    client: httpx.AsyncClient, page: int = 1
) -> list[ProductResponse]:
    """Return one page of products, most recent first."""
    response = await send(client, "GET", "/products", params={"page": page})
    return parse_response(list[ProductResponse], response)


async def update_product(
    client: httpx.AsyncClient, product_id: str, data: UpdateProductRequest
) -> ProductResponse:
    """Patch a product.

    Prices can be changed, or removed by sending ``destroy=True`` for the
    price id in ``prices_attributes``.
    """
    payload = to_snake_case(data.to_payload())
    response = await send(client, "PATCH", f"/products/{product_id}", json=payload)
    return parse_response(ProductResponse, response)


async def delete_product(client: httpx.AsyncClient, product_id: str) -> MessageResponse:
    await send(client, "DELETE", f"/products/{product_id}")
    logger.info(f"Deleted product {product_id}")
    return MessageResponse(message="Product deleted successfully")


async def ping(client: httpx.AsyncClient) -> MessageResponse:
    # Development-only endpoint.
    response = await send(client, "GET", "/test")
    data = read_json(response)
    status = data.get("message") if isinstance(data, dict) else data
    return MessageResponse(message=f"Test request succeeded. Status: {status}")
