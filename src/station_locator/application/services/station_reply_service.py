"""Use case: answer a webhook event with station or welcome messages."""

import logging
from typing import TYPE_CHECKING, Any

from station_locator.application.services.proximity_matcher import ProximityMatcher
from station_locator.domain.models import BoundingBox, Coordinate, WebhookEvent, WebhookPayload
from station_locator.domain.ports.webhook_handler import WebhookHandler

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_locator.domain.ports import MessagePusher, ReplyFormatter, StationRepository

DEFAULT_BOUNDING_BOX_MARGIN_DEGREES = 0.035
EMPTY_RESPONSE_BODY = b"{}"


class StationReplyService(WebhookHandler):
    """Select and push the reply for each webhook event.

    A location message produces station cards, or the fallback text when too
    few stations are nearby. Any other event produces the welcome message.
    Every event results in exactly one push.
    """

    def __init__(
        self,
        station_repository: "StationRepository",
        message_pusher: "MessagePusher",
        reply_formatter: "ReplyFormatter",
        matcher: ProximityMatcher | None = None,
        margin_degrees: float = DEFAULT_BOUNDING_BOX_MARGIN_DEGREES,
    ) -> None:
        """Initialize the service.

        Args:
            station_repository: Store of stations.
            message_pusher: Outbound push client.
            reply_formatter: Builds platform messages for each reply kind.
            matcher: Ranks candidate stations. Defaults to the nearest three.
            margin_degrees: Half-width of the retrieval bounding box.
        """
        self._station_repository = station_repository
        self._message_pusher = message_pusher
        self._reply_formatter = reply_formatter
        self._matcher = matcher or ProximityMatcher()
        self._margin_degrees = margin_degrees

    async def handle_payload(self, payload: WebhookPayload) -> bytes:
        """Handle every event of a webhook payload in order.

        Returns:
            Raw response body of the last push, or ``{}`` when the payload
            carries no events.
        """
        if not payload.events:
            logger.info(f"Webhook for {payload.destination} carried no events")
            return EMPTY_RESPONSE_BODY

        body = EMPTY_RESPONSE_BODY
        for event in payload.events:
            body = await self.handle_event(event)
        return body

    async def handle_event(self, event: WebhookEvent) -> bytes:
        """Push the reply for a single event and return the push response body."""
        location = event.location
        if location is not None:
            messages = await self._build_location_reply(location)
        else:
            message_type = event.message.type if event.message else None
            logger.info(
                f"Sending welcome reply for {event.type} event (message type {message_type})"
            )
            messages = self._reply_formatter.format_welcome()

        return await self._message_pusher.push(event.source.user_id, messages)

    async def _build_location_reply(self, location: Coordinate) -> list[dict[str, Any]]:
        """Find the nearest stations around a location and format the reply."""
        box = BoundingBox.around(location, self._margin_degrees)
        candidates = await self._station_repository.find_stations_in_box(box)
        nearest = self._matcher.rank(location, candidates)

        if not nearest:
            return self._reply_formatter.format_no_nearby_stations()

        logger.info(
            f"Found {len(nearest)} station(s) near ({location.latitude}, {location.longitude}): "
            + ", ".join(f"{r.station.location} ({r.distance_km:.2f} km)" for r in nearest)
        )
        return self._reply_formatter.format_stations(nearest)
