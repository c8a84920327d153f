"""Error types raised while handling a webhook request."""


class StationLocatorError(Exception):
    """Base class for all station locator failures."""


class DecodeError(StationLocatorError):
    """The inbound webhook body could not be decoded."""


class StoreQueryError(StationLocatorError):
    """The station store query failed or returned an undecodable record."""


class PushDeliveryError(StationLocatorError):
    """The outbound push call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(StationLocatorError):
    """Startup could not resolve a required setting."""
