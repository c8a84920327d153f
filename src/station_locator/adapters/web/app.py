"""Starlette application exposing the station webhook."""

import logging
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from station_locator.adapters.web.webhook_decoder import decode_webhook_payload
from station_locator.domain.errors import DecodeError, StationLocatorError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_locator.domain.ports import WebhookHandler


def create_app(webhook_handler: "WebhookHandler") -> Starlette:
    """Create the ASGI application.

    Routes:
        POST /station: handle a webhook payload and return the raw push response.
        GET /healthz: health check for load balancers.
    """

    async def find_station(request: Request) -> Response:
        body = await request.body()
        try:
            payload = decode_webhook_payload(body)
        except DecodeError as e:
            logger.warning(f"Rejected webhook body: {e}")
            return PlainTextResponse(str(e), status_code=500)

        try:
            result = await webhook_handler.handle_payload(payload)
        except StationLocatorError as e:
            logger.error(f"Failed to handle webhook for {payload.destination}: {e}")
            return PlainTextResponse(str(e), status_code=500)

        return Response(content=result, media_type="application/json")

    async def healthz(_request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return PlainTextResponse("Ok")

    return Starlette(
        routes=[
            Route("/station", find_station, methods=["POST"]),
            Route("/healthz", healthz, methods=["GET"]),
        ]
    )
