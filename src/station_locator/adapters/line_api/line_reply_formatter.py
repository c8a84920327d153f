"""Reply message templates for the LINE Messaging API."""

from typing import Any

from station_locator.adapters.line_api.constants import (
    ADDRESS_LABEL,
    ALT_TEXT,
    DIRECTIONS_URL,
    DISTANCE_LABEL,
    LABEL_COLOR,
    NAVIGATE_LABEL,
    STANDARD_STATION_LABEL,
    SUBTITLE_COLOR,
    SUPER_STATION_LABEL,
    VALUE_COLOR,
)
from station_locator.domain.models import RankedStation
from station_locator.domain.ports.reply_formatter import ReplyFormatter


def _text(text: str, **style: Any) -> dict[str, Any]:
    return {"type": "text", "text": text, **style}


def _detail_row(label: str, value: str) -> dict[str, Any]:
    """Baseline row with a grey label and a wrapped value."""
    return {
        "type": "box",
        "layout": "baseline",
        "spacing": "sm",
        "contents": [
            _text(label, color=LABEL_COLOR, size="sm", flex=1),
            _text(value, color=VALUE_COLOR, size="sm", flex=5, wrap=True),
        ],
    }


class LineReplyFormatter(ReplyFormatter):
    """Build flex, text and quick-reply messages for each reply kind."""

    def __init__(
        self,
        welcome_text: str,
        no_nearby_text: str,
        location_action_label: str,
    ) -> None:
        """Initialize the formatter.

        Args:
            welcome_text: Text of the welcome reply.
            no_nearby_text: Text sent when too few stations are nearby.
            location_action_label: Label of the location-share quick reply.
        """
        self.welcome_text = welcome_text
        self.no_nearby_text = no_nearby_text
        self.location_action_label = location_action_label

    def station_bubble(self, ranked: RankedStation) -> dict[str, Any]:
        """Build a flex bubble message describing one station."""
        station = ranked.station
        station_type = SUPER_STATION_LABEL if station.is_super_station else STANDARD_STATION_LABEL
        directions_url = DIRECTIONS_URL.format(
            latitude=station.coordinate.latitude,
            longitude=station.coordinate.longitude,
        )

        body = {
            "type": "box",
            "layout": "vertical",
            "contents": [
                _text(station.location, weight="bold", size="xl", wrap=True),
                {
                    "type": "box",
                    "layout": "baseline",
                    "margin": "md",
                    "contents": [
                        _text(station_type, size="sm", color=SUBTITLE_COLOR, margin="md", flex=0)
                    ],
                },
                {
                    "type": "box",
                    "layout": "vertical",
                    "margin": "lg",
                    "spacing": "sm",
                    "contents": [
                        _detail_row(ADDRESS_LABEL, station.address),
                        _detail_row(DISTANCE_LABEL, f"{ranked.distance_km:.2f} km"),
                    ],
                },
            ],
        }
        footer = {
            "type": "box",
            "layout": "vertical",
            "spacing": "sm",
            "flex": 0,
            "contents": [
                {
                    "type": "button",
                    "style": "primary",
                    "height": "sm",
                    "action": {"type": "uri", "label": NAVIGATE_LABEL, "uri": directions_url},
                }
            ],
        }
        return {
            "type": "flex",
            "altText": ALT_TEXT,
            "contents": {"type": "bubble", "body": body, "footer": footer},
        }

    def format_stations(self, stations: list[RankedStation]) -> list[dict[str, Any]]:
        return [self.station_bubble(ranked) for ranked in stations]

    def format_no_nearby_stations(self) -> list[dict[str, Any]]:
        return [_text(self.no_nearby_text)]

    def format_welcome(self) -> list[dict[str, Any]]:
        quick_reply = {
            "items": [
                {
                    "type": "action",
                    "action": {"type": "location", "label": self.location_action_label},
                }
            ]
        }
        return [{**_text(self.welcome_text), "quickReply": quick_reply}]
