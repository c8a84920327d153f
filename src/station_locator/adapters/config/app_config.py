"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8080, description="Port to bind the server to")
    shutdown_timeout_seconds: int = Field(
        default=10, description="Seconds to drain in-flight requests on shutdown"
    )

    # Google Cloud configuration
    # If not set, the project of the application default credentials is used
    google_cloud_project: str | None = Field(
        default=None, description="Google Cloud project hosting Firestore and Secret Manager"
    )

    # Messaging platform configuration
    line_api_endpoint: str = Field(
        default="https://api.line.me/v2/bot/message/push",
        description="Endpoint of the push message API",
    )
    linebot_access_token: str | None = Field(
        default=None,
        description="Channel access token; read from Secret Manager when not set",
    )
    linebot_secret_name: str = Field(
        default="linebot-access-token",
        description="Secret Manager secret holding the channel access token",
    )
    push_timeout_seconds: int = Field(
        default=15, description="Timeout for push API requests in seconds"
    )

    # Station store configuration
    station_collection: str = Field(
        default="stations", description="Firestore collection holding stations"
    )
    station_status_field: str = Field(
        default="status", description="Document field holding the operational status"
    )
    station_status_value: str = Field(
        default="operating", description="Status value of stations that may be suggested"
    )

    # Matching configuration
    bounding_box_margin_degrees: float = Field(
        default=0.035,
        description="Half-width in degrees of the box used to prefilter stations",
    )
    nearby_station_limit: int = Field(
        default=3, description="Number of nearest stations sent in a reply"
    )

    # Reply text
    welcome_text: str = Field(
        default="Share your location and I will find the nearest stations for you.",
        description="Text of the welcome reply",
    )
    no_nearby_text: str = Field(
        default="Sorry, there are no stations near your location.",
        description="Text sent when too few stations are nearby",
    )
    location_action_label: str = Field(
        default="Share location", description="Label of the location quick-reply button"
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="text", description="Log format: 'text' or 'json' (structured, one object per line)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either 'text' or 'json'."""
        if v.lower() not in LOG_FORMATS:
            raise ValueError("log_format must be either 'text' or 'json'")
        return v.lower()

    @field_validator("bounding_box_margin_degrees")
    @classmethod
    def validate_margin(cls, v: float) -> float:
        """Validate margin is a positive number of degrees."""
        if v <= 0:
            raise ValueError("bounding_box_margin_degrees must be positive")
        return v

    @field_validator("nearby_station_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        """Validate at least one station is requested."""
        if v < 1:
            raise ValueError("nearby_station_limit must be at least 1")
        return v
