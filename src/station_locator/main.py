"""Main entry point for the station locator service."""

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

import aiohttp
import uvicorn

from station_locator.adapters.config import AppConfig
from station_locator.adapters.firestore import FirestoreStationRepository
from station_locator.adapters.gcp import SecretManagerProvider, detect_project_id
from station_locator.adapters.line_api import LineMessagePusher, LineReplyFormatter
from station_locator.adapters.logging_config import configure_logging
from station_locator.adapters.web import create_app
from station_locator.application.services import ProximityMatcher, StationReplyService
from station_locator.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


async def resolve_project_id(config: AppConfig) -> str:
    """Use the configured project, falling back to the credentials' project."""
    if config.google_cloud_project:
        return config.google_cloud_project
    return await detect_project_id()


async def resolve_access_token(config: AppConfig, project_id: str) -> str:
    """Use the configured access token, falling back to Secret Manager."""
    if config.linebot_access_token:
        return config.linebot_access_token

    from google.cloud import secretmanager

    async with secretmanager.SecretManagerServiceAsyncClient() as client:
        provider = SecretManagerProvider(client, project_id)
        return await provider.get_secret(config.linebot_secret_name)


def build_reply_service(
    config: AppConfig,
    session: "ClientSession",
    project_id: str,
    access_token: str,
) -> StationReplyService:
    """Wire the adapters and services from configuration."""
    from google.cloud import firestore

    station_repository = FirestoreStationRepository(
        firestore.AsyncClient(project=project_id),
        collection=config.station_collection,
        status_field=config.station_status_field,
        status_value=config.station_status_value,
    )
    message_pusher = LineMessagePusher(
        session,
        endpoint=config.line_api_endpoint,
        access_token=access_token,
    )
    reply_formatter = LineReplyFormatter(
        welcome_text=config.welcome_text,
        no_nearby_text=config.no_nearby_text,
        location_action_label=config.location_action_label,
    )
    return StationReplyService(
        station_repository,
        message_pusher,
        reply_formatter,
        matcher=ProximityMatcher(limit=config.nearby_station_limit),
        margin_degrees=config.bounding_box_margin_degrees,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level, config.log_format, config.google_cloud_project)

    timeout = aiohttp.ClientTimeout(total=config.push_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        try:
            project_id = await resolve_project_id(config)
            access_token = await resolve_access_token(config, project_id)
        except ConfigurationError as e:
            logger.error(f"Unable to start station locator: {e}")
            sys.exit(1)

        reply_service = build_reply_service(config, session, project_id, access_token)
        app = create_app(reply_service)

        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_level=config.log_level.lower(),
                timeout_graceful_shutdown=config.shutdown_timeout_seconds,
            )
        )
        logger.info(f"Starting station locator for project {project_id} on port {config.port}")
        # uvicorn installs its own SIGINT/SIGTERM handlers and drains requests
        await server.serve()

    logger.info("Station locator has been shut down")


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
