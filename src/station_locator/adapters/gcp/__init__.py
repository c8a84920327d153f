"""Google Cloud platform adapters."""

from station_locator.adapters.gcp.project import detect_project_id
from station_locator.adapters.gcp.secret_manager_provider import SecretManagerProvider

__all__ = ["SecretManagerProvider", "detect_project_id"]
