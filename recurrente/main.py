import logging

from fastapi import FastAPI, HTTPException, Request, status

from recurrente.core.config import Settings, get_settings
from recurrente.core.errors import (
    UnregisteredEventTypeError,
    WebhookPayloadError,
    WebhookVerificationError,
)
from recurrente.middleware.body_size import BodySizeLimitMiddleware
from recurrente.services.webhook_dispatch import WebhookDispatcher
from recurrente.services.webhook_verify import WebhookVerifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    dispatcher: WebhookDispatcher | None = None,
    verifier: WebhookVerifier | None = None,
) -> FastAPI:
    """Build an app that receives Recurrente webhooks.

    Register handlers on ``app.state.dispatcher`` (or pass a dispatcher in).
    Building the app fails with ConfigurationError when no signing secret is
    configured.
    """
    settings = settings or get_settings()
    verifier = verifier or WebhookVerifier.from_settings(settings)
    dispatcher = dispatcher if dispatcher is not None else WebhookDispatcher()

    app = FastAPI(
        title="Recurrente Webhook Receiver",
        description="Verifies and dispatches Recurrente webhook events",
        version="1.0.1",
    )
    app.state.verifier = verifier
    app.state.dispatcher = dispatcher

    app.add_middleware(BodySizeLimitMiddleware, max_size=settings.max_body_size)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    @app.post(settings.webhook_path)
    async def receive_webhook(request: Request):
        raw = await request.body()
        if not raw:
            raise HTTPException(status_code=400, detail="Empty JSON body")
        # Chunked bodies carry no content-length for the middleware to check.
        if len(raw) > settings.max_body_size:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail="Payload too large",
            )

        try:
            event = request.app.state.verifier.verify(raw, request.headers)
        except WebhookVerificationError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            )
        except WebhookPayloadError as exc:
            logger.warning(f"Verified webhook with unusable payload: {exc}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid webhook payload",
            )

        try:
            request.app.state.dispatcher.dispatch(event)
        except UnregisteredEventTypeError as exc:
            logger.info(f"Ignoring webhook: {exc}")
            return {"status": "ignored"}

        return {"status": "received"}

    return app
