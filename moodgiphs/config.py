"""Configuration management for Mood Giphs."""

import logging
import os
from typing import Callable, Optional, TypeVar
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

logger = logging.getLogger(__name__)

# Public demo key published in the Giphy API docs
DEMO_API_KEY = "dc6zaTOxFJmzC"

T = TypeVar('T')


def _optional_number(name: str, cast: Callable[[str], T]) -> Optional[T]:
    """Read a numeric env variable; unset, blank or unparsable gives None."""
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    try:
        return cast(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", name, value, cast.__name__)
        return None


class Config:
    """Configuration class for the Giphy API and server settings."""

    # Giphy API
    GIPHY_API_KEY: str = os.getenv('GIPHY_API_KEY', DEMO_API_KEY)
    GIPHY_BASE_URL: str = os.getenv('GIPHY_BASE_URL', 'http://api.giphy.com/v1/gifs')

    # Request settings - None keeps the requests default (no timeout)
    REQUEST_TIMEOUT: Optional[float] = _optional_number('REQUEST_TIMEOUT', float)

    # Server settings - PORT unset lets each server pick its own default
    HOST: str = os.getenv('HOST', '0.0.0.0')
    PORT: Optional[int] = _optional_number('PORT', int)
    DEBUG: bool = os.getenv('DEBUG', 'false').lower() == 'true'

    @classmethod
    def validate(cls) -> dict:
        """Validate configuration and return its status."""
        return {
            'giphy': bool(cls.GIPHY_API_KEY),
            'using_demo_key': cls.GIPHY_API_KEY == DEMO_API_KEY,
            'base_url': cls.GIPHY_BASE_URL,
            'request_timeout': cls.REQUEST_TIMEOUT,
        }
