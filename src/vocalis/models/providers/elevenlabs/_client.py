from __future__ import annotations

import logging
import math
import os
from typing import Optional

import httpx

from vocalis._internal.exceptions import ConfigurationError
from vocalis.core.credentials import CredentialNotFoundError, get_api_key, get_setting

from ._catalog import DEFAULT_HOST_URL, ElevenLabsApiCatalog

logger = logging.getLogger(__name__)

PROVIDER = "elevenlabs"

API_KEY_ENV = "ELEVENLABS_API_KEY"
BASE_URL_ENV = "VOCALIS_ELEVENLABS_BASE_URL"
TIMEOUT_ENV = "VOCALIS_ELEVENLABS_TIMEOUT_MS"

DEFAULT_TIMEOUT = 30.0


def resolve_elevenlabs_api_key() -> Optional[str]:
    """Resolve the ElevenLabs API key.

    ``ELEVENLABS_API_KEY`` takes precedence over providers.elevenlabs.api_key
    in ~/.vocalis/config.yaml.

    Returns:
        The API key, or ``None`` when neither source provides one.
    """
    from_env = os.environ.get(API_KEY_ENV, "").strip()
    if from_env:
        return from_env
    try:
        return get_api_key(PROVIDER)
    except CredentialNotFoundError:
        return None


def resolve_elevenlabs_host_url() -> str:
    from_env = os.environ.get(BASE_URL_ENV, "").strip()
    if from_env:
        return from_env

    configured = get_setting(PROVIDER, "base_url")
    if configured is None:
        return DEFAULT_HOST_URL
    if not isinstance(configured, str):
        type_name = type(configured).__name__
        raise TypeError(f"providers.elevenlabs.base_url must be a string, got {type_name}")
    return configured


def resolve_elevenlabs_timeout() -> float:
    """Return the request timeout in seconds."""
    raw = os.environ.get(TIMEOUT_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError as exc:
        raise TypeError(f"{TIMEOUT_ENV} must be numeric (milliseconds), got {raw!r}") from exc
    # Rejects nan as well, since every comparison with it is False.
    if not value > 0 or math.isinf(value):
        raise TypeError(f"{TIMEOUT_ENV} must be a positive number of milliseconds, got {raw!r}")
    return value / 1000.0


def create_catalog(
    api_key: Optional[str] = None,
    *,
    http_client: Optional[httpx.Client] = None,
    host_url: Optional[str] = None,
) -> ElevenLabsApiCatalog:
    """Build an :class:`ElevenLabsApiCatalog` from the active configuration.

    Explicit arguments override configured values. When ``http_client`` is
    omitted a client is created and closed together with the catalog.

    Raises:
        ConfigurationError: No API key was given or configured.
    """
    resolved_key = (api_key or "").strip() or resolve_elevenlabs_api_key()
    if not resolved_key:
        raise ConfigurationError(
            "ElevenLabs credential not configured. "
            f"Set {API_KEY_ENV} or run `vocalis configure set-key <key>`.",
            context={"provider": PROVIDER},
        )

    resolved_url = host_url or resolve_elevenlabs_host_url()
    logger.debug("Using ElevenLabs API at %s", resolved_url)

    owns_client = http_client is None
    if http_client is None:
        http_client = httpx.Client(timeout=resolve_elevenlabs_timeout())

    return ElevenLabsApiCatalog(
        http_client, resolved_key, resolved_url, owns_client=owns_client
    )


__all__ = [
    "create_catalog",
    "resolve_elevenlabs_api_key",
    "resolve_elevenlabs_host_url",
    "resolve_elevenlabs_timeout",
]
