"""LINE Messaging API adapters."""

from station_locator.adapters.line_api.line_message_pusher import LineMessagePusher
from station_locator.adapters.line_api.line_reply_formatter import LineReplyFormatter

__all__ = ["LineMessagePusher", "LineReplyFormatter"]
