import os
import time
from typing import AsyncIterator, Iterator

import httpx
import pytest

# Set test environment variables
os.environ.update(
    {
        "RECURRENTE_BASE_URL": "https://api.test",
        "RECURRENTE_PUBLIC_KEY": "pk_test",
        "RECURRENTE_SECRET_KEY": "sk_test",
        "RECURRENTE_SVIX_SIGNING_SECRET": "whsec_test",
    }
)

from recurrente.core.config import Settings, get_settings
from recurrente.services.http_client import build_client
from recurrente.services.webhook_dispatch import WebhookDispatcher
from recurrente.services.webhook_signing import sign_payload
from recurrente.services.webhook_verify import WebhookVerifier

SECRET = "whsec_test"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url="https://api.test",
        public_key="pk_test",
        secret_key="sk_test",
        svix_signing_secret=SECRET,
        _env_file=None,
    )


@pytest.fixture
def verifier() -> WebhookVerifier:
    return WebhookVerifier(SECRET)


@pytest.fixture
def dispatcher() -> WebhookDispatcher:
    return WebhookDispatcher()


@pytest.fixture
def sign():
    """Build svix headers for a payload, signed with the test secret."""

    def _sign(
        payload: str,
        secret: str = SECRET,
        timestamp: int | None = None,
        msg_id: str = "msg_1",
    ):
        ts = int(time.time()) if timestamp is None else timestamp
        return {
            "svix-id": msg_id,
            "svix-timestamp": str(ts),
            "svix-signature": sign_payload(secret, msg_id, ts, payload),
        }

    return _sign


@pytest.fixture
async def api_client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    client = build_client(settings)
    yield client
    await client.aclose()
