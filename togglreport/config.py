"""Runtime configuration loaded from the environment."""
import os
import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from .errors import EnvironmentConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"
ENV_FILE_VARIABLE = "TOGGLREPORT_ENV_FILE"
BASE_URL = "https://api.track.toggl.com"
REPORTING_TIMEZONE = "Asia/Tokyo"


@dataclass(frozen=True)
class Config:
    """Credentials and fixed settings for one report run."""
    api_key: str
    workspace_id: str
    base_url: str = BASE_URL
    timezone: tzinfo = field(default_factory=lambda: ZoneInfo(REPORTING_TIMEZONE))


def load_environment(env_file: str = None) -> str:
    """Load environment variables from the env file.

    Args:
        env_file: Path to the env file (defaults to $TOGGLREPORT_ENV_FILE or .env)

    Returns:
        The path that was loaded

    Raises:
        EnvironmentConfigError: If the env file does not exist
    """
    env_file = env_file or os.getenv(ENV_FILE_VARIABLE) or DEFAULT_ENV_FILE
    if not os.path.exists(env_file):
        raise EnvironmentConfigError(f"Missing environment file: {os.path.abspath(env_file)}")
    load_dotenv(env_file)
    logger.debug("Loaded environment from %s", env_file)
    return env_file


def get_env_var(key: str) -> str:
    """Get an environment variable or fail if it is not set.

    Raises:
        EnvironmentConfigError: If the variable is missing or empty
    """
    value = os.getenv(key)
    if not value or not value.strip():
        raise EnvironmentConfigError(f"Set {key} in your environment or {DEFAULT_ENV_FILE}.")
    return value.strip()


def load_config() -> Config:
    """Build the Config from WORKSPACE_ID and TOGGLE_API_KEY."""
    return Config(
        api_key=get_env_var("TOGGLE_API_KEY"),
        workspace_id=get_env_var("WORKSPACE_ID"),
    )
