"""Webhook payload models for the messaging platform."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from station_locator.domain.models.coordinate import Coordinate

LOCATION_MESSAGE_TYPE = "location"


class WebhookMessage(BaseModel):
    """Message carried by a webhook event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    id: str = ""
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    address: str | None = None
    text: str | None = None
    quote_token: str | None = Field(default=None, alias="quoteToken")
    quoted_message_id: str | None = Field(default=None, alias="quotedMessageId")

    @model_validator(mode="after")
    def validate_location(self) -> "WebhookMessage":
        """Location messages must carry both latitude and longitude."""
        if self.type == LOCATION_MESSAGE_TYPE and (
            self.latitude is None or self.longitude is None
        ):
            raise ValueError("location message requires latitude and longitude")
        return self

    @property
    def is_location(self) -> bool:
        return self.type == LOCATION_MESSAGE_TYPE

    @property
    def coordinate(self) -> Coordinate | None:
        """Coordinate of a location message, None for other message types."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class EventSource(BaseModel):
    """Sender of a webhook event.

    Group and room sources may omit ``userId``; it then decodes to an empty
    string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    user_id: str = Field(default="", alias="userId")


class DeliveryContext(BaseModel):
    """Delivery metadata of a webhook event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_redelivery: bool = Field(default=False, alias="isRedelivery")


class WebhookEvent(BaseModel):
    """A single event delivered by the webhook."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    message: WebhookMessage | None = None
    source: EventSource
    reply_token: str | None = Field(default=None, alias="replyToken")
    webhook_event_id: str | None = Field(default=None, alias="webhookEventId")
    delivery_context: DeliveryContext = Field(
        default_factory=DeliveryContext, alias="deliveryContext"
    )
    timestamp: int | None = None
    mode: str | None = None

    @property
    def location(self) -> Coordinate | None:
        """Coordinate shared by the sender, if this event is a location message."""
        if self.message is None or not self.message.is_location:
            return None
        return self.message.coordinate


class WebhookPayload(BaseModel):
    """Top-level webhook request body."""

    model_config = ConfigDict(frozen=True)

    destination: str
    events: list[WebhookEvent]
