import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from recurrente.core.config import Settings, get_settings
from recurrente.core.errors import ConfigurationError, RecurrenteAPIError
from recurrente.schemas.errors import ErrorResponse
from recurrente.utils.conversion import to_camel_case

logger = logging.getLogger(__name__)


def build_client(settings: Settings | None = None, **kwargs: Any) -> httpx.AsyncClient:
    """Create the authenticated client every resource call goes through.

    Raises ConfigurationError when the base URL or either key is missing.
    """
    settings = settings or get_settings()
    if not settings.base_url:
        raise ConfigurationError("Missing Recurrente base URL")
    if not settings.public_key:
        raise ConfigurationError("Missing Recurrente Public Key")
    if not settings.secret_key:
        raise ConfigurationError("Missing Recurrente Secret Key")

    return httpx.AsyncClient(
        base_url=settings.api_url,
        headers={
            "X-PUBLIC-KEY": settings.public_key,
            "X-SECRET-KEY": settings.secret_key,
            "Content-Type": "application/json",
        },
        timeout=settings.request_timeout,
        **kwargs,
    )


def _error_details(errors: Any) -> dict[str, Any]:
    if isinstance(errors, dict):
        return errors
    if not errors:
        return {}
    return {"base": errors}


def handle_http_error(error: Exception) -> RecurrenteAPIError:
    """Normalize a failed request into a RecurrenteAPIError."""
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        logger.warning(
            f"Recurrente API returned {response.status_code} for "
            f"{error.request.method} {error.request.url.path}"
        )
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            errors = data.get("errors")
            return RecurrenteAPIError(
                ErrorResponse(
                    message=str(data.get("message") or "An error occurred"),
                    errors=_error_details(errors),
                ),
                status_code=response.status_code,
            )
        return RecurrenteAPIError(
            ErrorResponse(message="An error occurred", errors={}),
            status_code=response.status_code,
        )
    if isinstance(error, httpx.HTTPError):
        logger.warning(f"Recurrente API request failed: {error!r}")
        return RecurrenteAPIError(
            ErrorResponse(message=str(error) or "Unknown HTTP error occurred")
        )
    logger.error(f"Unexpected error calling Recurrente API: {error!r}")
    return RecurrenteAPIError(ErrorResponse(message="An unknown error occurred"))


async def send(
    client: httpx.AsyncClient, method: str, path: str, **kwargs: Any
) -> httpx.Response:
    """Perform one request; any transport or HTTP failure is normalized."""
    try:
        response = await client.request(method, path, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise handle_http_error(exc) from exc
    return response


def read_json(response: httpx.Response) -> Any:
    """Decode a successful response body into the internal key convention."""
    try:
        data = response.json()
    except ValueError as exc:
        raise RecurrenteAPIError(
            ErrorResponse(message="Invalid JSON in Recurrente response"),
            status_code=response.status_code,
        ) from exc
    return to_camel_case(data)


def parse_response(model: Any, response: httpx.Response) -> Any:
    """Validate a successful response body against ``model``.

    ``model`` is a pydantic model class or a type such as
    ``list[ProductResponse]``; a body that does not fit is normalized like
    any other failed call.
    """
    data = read_json(response)
    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as exc:
        logger.warning(
            f"Unexpected Recurrente response for {response.request.method} "
            f"{response.request.url.path}: {exc.error_count()} validation errors"
        )
        raise RecurrenteAPIError(
            ErrorResponse(message="Unexpected Recurrente response"),
            status_code=response.status_code,
        ) from exc
