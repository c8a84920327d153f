"""Process-wide logging setup."""

import logging
import sys

from google.cloud.logging.handlers import StructuredLogHandler

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: str = "INFO", log_format: str = "text", project_id: str | None = None
) -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Log level name.
        log_format: ``text`` for human-readable lines, ``json`` for Cloud
            Logging structured entries.
        project_id: Project used to qualify trace ids in structured entries.
    """
    if log_format == "json":
        # Cloud Run forwards stderr JSON lines to Cloud Logging as structured entries
        handler = StructuredLogHandler(stream=sys.stderr, project_id=project_id)
        logging.basicConfig(level=level, handlers=[handler], force=True)
        return

    logging.basicConfig(
        level=level,
        format=TEXT_FORMAT,
        datefmt=TEXT_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )
