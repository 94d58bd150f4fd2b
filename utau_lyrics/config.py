from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ._version import __version__
from .client import DEFAULT_URL, DEFAULT_VERSION, SUPPORTED_VERSIONS

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"utau-lyrics/{__version__}"
DEFAULT_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_URL
    version: int = DEFAULT_VERSION
    # None waits forever
    timeout: float | None = DEFAULT_TIMEOUT_S


def load_config() -> ClientConfig:
    api_key = os.getenv("UTAU_API_KEY", "")
    if not api_key:
        logger.warning("UTAU_API_KEY is not set, requests will be rejected by the lyrics API")

    version = int(os.getenv("UTAU_API_VERSION", str(DEFAULT_VERSION)))
    if version not in SUPPORTED_VERSIONS:
        raise ValueError(f"Unsupported API version: {version}")

    return ClientConfig(
        api_key=api_key,
        user_agent=os.getenv("UTAU_USER_AGENT") or DEFAULT_USER_AGENT,
        base_url=os.getenv("UTAU_BASE_URL") or DEFAULT_URL,
        version=version,
        timeout=_parse_timeout(os.getenv("UTAU_TIMEOUT")),
    )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None:
        return DEFAULT_TIMEOUT_S
    raw = raw.strip()
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None
