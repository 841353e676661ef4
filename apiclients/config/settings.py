"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from apiclients.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Okta has no shared host: every organization gets its own domain
DEFAULT_BASE_URLS = {
    "gusto": "https://api.gusto.com",
    "slack": "https://slack.com/api",
}


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """Return /run/secrets/<secret_name> if present and non-empty, else the env var."""
    path = Path("/run/secrets") / secret_name
    if path.is_file():
        try:
            value = path.read_text().strip()
        except OSError as e:
            logger.warning(f"Could not read secret file {path}: {e}")
            value = ""
        if value:
            logger.debug(f"Loaded {secret_name} from {path}")
            return value
    value = os.getenv(env_var) if env_var else None
    return value or None


@dataclass(frozen=True)
class ProviderSettings:
    """Connection settings for one provider's API."""
    provider: str
    base_url: str
    token: str
    timeout: Optional[float] = None
    user_agent: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"ProviderSettings(provider={self.provider!r}, base_url={self.base_url!r}, "
            f"token='***', timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )


def _parse_timeout(var_name: str) -> Optional[float]:
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"{var_name} must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"{var_name} must be positive, got {raw!r}")
    return timeout


def load_settings(provider: str) -> ProviderSettings:
    """Load settings for ``provider`` from /run/secrets and the environment.

    Reads ``<PROVIDER>_BASE_URL``, ``<PROVIDER>_API_TOKEN`` (secret file
    ``<provider>_api_token`` first), ``<PROVIDER>_TIMEOUT`` and
    ``APICLIENTS_USER_AGENT``.

    Raises:
        ConfigurationError: If the base URL or token is missing, or the timeout is invalid
    """
    if not provider:
        raise ConfigurationError("Provider name is required to load settings")

    name = provider.strip().lower()
    prefix = name.upper()

    base_url = os.environ.get(f"{prefix}_BASE_URL", "").strip() or DEFAULT_BASE_URLS.get(name, "")
    if not base_url:
        raise ConfigurationError(f"{prefix}_BASE_URL is required for provider '{name}'.")

    token = _load_secret_from_file(f"{name}_api_token", f"{prefix}_API_TOKEN")
    if not token:
        raise ConfigurationError(
            f"{prefix}_API_TOKEN not found. "
            f"Provide it via /run/secrets/{name}_api_token or the environment."
        )

    settings = ProviderSettings(
        provider=name,
        base_url=base_url.rstrip("/"),
        token=token,
        timeout=_parse_timeout(f"{prefix}_TIMEOUT"),
        user_agent=os.environ.get("APICLIENTS_USER_AGENT", "").strip() or None,
    )
    logger.info(f"Loaded {name} settings; base_url={settings.base_url}")
    return settings
