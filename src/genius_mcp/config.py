"""Configuration management for the Genius MCP server.

All configuration is read from environment variables (NO .env files).
"""

import os
from dataclasses import dataclass
from typing import Optional

from genius.models import DEFAULT_API_BASE, DEFAULT_USER_AGENT, GeniusConfig

OUTPUT_FORMATS = ("json", "text")


@dataclass
class ServerConfig:
    """Configuration for the Genius MCP server (reads from environment)."""

    # Optional: a missing token is reported on every API call
    access_token: Optional[str] = None

    api_base: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0

    # "json" (structured) or "text" (narrative) payloads
    output_format: str = "json"

    @classmethod
    def from_environment(cls) -> "ServerConfig":
        """Load configuration from environment variables.

        Returns:
            ServerConfig: Loaded configuration object

        Raises:
            EnvironmentError: If a variable holds an invalid value
        """
        output_format = os.getenv("GENIUS_OUTPUT_FORMAT", "json").strip().lower()
        if output_format not in OUTPUT_FORMATS:
            raise EnvironmentError(
                f"GENIUS_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {output_format!r}"
            )

        raw_timeout = os.getenv("GENIUS_HTTP_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise EnvironmentError(f"GENIUS_HTTP_TIMEOUT must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise EnvironmentError(f"GENIUS_HTTP_TIMEOUT must be positive, got {raw_timeout!r}")

        api_base = os.getenv("GENIUS_API_BASE", DEFAULT_API_BASE)
        if not api_base.startswith(("http://", "https://")):
            raise EnvironmentError(f"GENIUS_API_BASE must be an HTTP/HTTPS URL, got {api_base!r}")

        # GENIUS_API_KEY is the variable name used by earlier deployments
        access_token = os.getenv("GENIUS_ACCESS_TOKEN") or os.getenv("GENIUS_API_KEY")

        return cls(
            access_token=access_token or None,
            api_base=api_base,
            user_agent=os.getenv("GENIUS_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=timeout,
            output_format=output_format,
        )

    def to_genius_config(self) -> GeniusConfig:
        """Build the client configuration shared by GeniusClient and LyricsScraper."""
        return GeniusConfig(
            access_token=self.access_token,
            api_base=self.api_base,
            user_agent=self.user_agent,
            timeout=self.timeout,
        )
