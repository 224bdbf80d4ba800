"""
Harvester configuration read from environment variables.
"""

import logging
import os
from typing import Optional

# Get logger for this module
logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r, using %d", name, raw, default)
        return default


class HarvesterConfig:
    """Language, API version and HTTP settings of a harvest."""

    def __init__(
        self,
        language: str = "en",
        version: str = "v1",
        timeout: int = 30,
        max_retries: int = 3,
        base_wait_time: int = 2,
        user_agent: str = "FaoStatHarvester/1.0",
    ):
        self.language = language
        self.version = version
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_wait_time = base_wait_time
        self.user_agent = user_agent

    @classmethod
    def from_env(
        cls, language: Optional[str] = None, version: Optional[str] = None
    ) -> "HarvesterConfig":
        """Load the configuration; explicit arguments win over the environment."""
        return cls(
            language=language or os.getenv("FAOSTAT_LANGUAGE", "en"),
            version=version or os.getenv("FAOSTAT_VERSION", "v1"),
            timeout=_int_from_env("FAOSTAT_HTTP_TIMEOUT", 30),
            max_retries=_int_from_env("FAOSTAT_HTTP_MAX_RETRIES", 3),
            base_wait_time=_int_from_env("FAOSTAT_HTTP_BASE_WAIT", 2),
            user_agent=os.getenv("FAOSTAT_USER_AGENT", "FaoStatHarvester/1.0"),
        )

    def __repr__(self) -> str:
        return f"HarvesterConfig(language={self.language}, version={self.version})"
