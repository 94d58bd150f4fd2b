from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Sequence
from urllib.parse import urlencode, urljoin

from .errors import (
    REQUESTED_TYPES_SUBJECT,
    SERVER_RESPONSE_SUBJECT,
    FailedRequestError,
    UtauError,
    ValidationError,
)
from .schema import (
    LYRICS_RESPONSE,
    REQUESTED_TYPES,
    FailedLyricsResponse,
    LyricsType,
    SuccessfulLyricsResponse,
    validate,
)
from .transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from .config import ClientConfig

logger = logging.getLogger(__name__)

ApiVersion = Literal[1]

DEFAULT_URL = "https://utau.keia.one"
DEFAULT_VERSION: ApiVersion = 1
SUPPORTED_VERSIONS: tuple[int, ...] = (1,)

NOT_FOUND_STATUS = 404


def build_lyrics_url(
    query: str,
    types: Sequence[LyricsType],
    *,
    base_url: str = DEFAULT_URL,
    version: int = DEFAULT_VERSION,
) -> str:
    # The versioned path replaces any path already on base_url.
    endpoint = urljoin(base_url, f"/v{version}/lyrics")
    params = {
        "query": query,
        "types": ",".join(dict.fromkeys(types)),
    }
    return f"{endpoint}?{urlencode(params)}"


def build_headers(*, api_key: str, user_agent: str) -> dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Authorization": f"Bearer {api_key}",
    }


def fetch_lyrics(
    query: str,
    *,
    types: Sequence[LyricsType],
    api_key: str,
    user_agent: str,
    transport: Transport | None = None,
    timeout: float | None = None,
    version: int = DEFAULT_VERSION,
    base_url: str = DEFAULT_URL,
) -> SuccessfulLyricsResponse | None:
    """
    Fetch lyrics from the Utau API.

    `query` is either free text (``"flashlights by the forest powfu"``) or a
    track reference (``"spotify:4iV5W9uYEdYUVa79Axb7Rh"``). `types` lists
    between one and three distinct lyrics types to ask for.

    Returns the successful response, or None when the service reports that
    no lyrics exist (HTTP 404 with a failure envelope).

    Raises ValidationError for invalid `types` (before any request is made)
    or a payload that does not match the response schema, and
    FailedRequestError for any other failure envelope. Transport and JSON
    decoding errors propagate unchanged.
    """
    requested = validate(types, REQUESTED_TYPES)
    if not requested.ok:
        raise ValidationError(REQUESTED_TYPES_SUBJECT, requested.diagnostics)

    url = build_lyrics_url(query, requested.value, base_url=base_url, version=version)
    headers = build_headers(api_key=api_key, user_agent=user_agent)
    transport = transport if transport is not None else RequestsTransport()

    logger.debug("GET %s", url)
    response = transport(url, headers=headers, timeout=timeout)
    status = response.status_code
    logger.debug("lyrics API responded with HTTP %s", status)

    checked = validate(response.json(), LYRICS_RESPONSE)
    if not checked.ok:
        logger.warning(
            "Invalid lyrics API response for %r (HTTP %s, %d issue(s))",
            query,
            status,
            len(checked.diagnostics),
        )
        raise ValidationError(SERVER_RESPONSE_SUBJECT, checked.diagnostics)

    envelope = checked.value
    if isinstance(envelope, FailedLyricsResponse):
        if status == NOT_FOUND_STATUS:
            logger.info("No lyrics found for %r", query)
            return None
        logger.warning("Lyrics request for %r failed: [%s] %s", query, status, envelope.data.message)
        raise FailedRequestError(envelope, status)

    return envelope


@dataclass(frozen=True, slots=True)
class LyricsOutcome:
    """
    Result of one lookup: found (`response` set), not found (both None)
    or failed (`error` set).
    """

    response: SuccessfulLyricsResponse | None = None
    error: UtauError | None = None

    @property
    def found(self) -> bool:
        return self.response is not None

    @property
    def not_found(self) -> bool:
        return self.response is None and self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> SuccessfulLyricsResponse | None:
        if self.error is not None:
            raise self.error
        return self.response


def lookup_lyrics(
    query: str,
    *,
    types: Sequence[LyricsType],
    api_key: str,
    user_agent: str,
    transport: Transport | None = None,
    timeout: float | None = None,
    version: int = DEFAULT_VERSION,
    base_url: str = DEFAULT_URL,
) -> LyricsOutcome:
    """Same as `fetch_lyrics`, with ValidationError/FailedRequestError returned in the outcome."""
    try:
        response = fetch_lyrics(
            query,
            types=types,
            api_key=api_key,
            user_agent=user_agent,
            transport=transport,
            timeout=timeout,
            version=version,
            base_url=base_url,
        )
        return LyricsOutcome(response=response)
    except UtauError as e:
        return LyricsOutcome(error=e)


class LyricsClient:
    def __init__(
        self,
        api_key: str,
        user_agent: str,
        *,
        base_url: str = DEFAULT_URL,
        version: int = DEFAULT_VERSION,
        timeout: float | None = None,
        transport: Transport | None = None,
    ):
        self.api_key = api_key
        self.user_agent = user_agent
        self.base_url = base_url
        self.version = version
        self.timeout = timeout
        self.transport = transport if transport is not None else RequestsTransport()

    @classmethod
    def from_config(cls, cfg: ClientConfig, *, transport: Transport | None = None) -> LyricsClient:
        return cls(
            cfg.api_key,
            cfg.user_agent,
            base_url=cfg.base_url,
            version=cfg.version,
            timeout=cfg.timeout,
            transport=transport,
        )

    def _options(self) -> dict[str, Any]:
        return {
            "api_key": self.api_key,
            "user_agent": self.user_agent,
            "base_url": self.base_url,
            "version": self.version,
            "timeout": self.timeout,
            "transport": self.transport,
        }

    def fetch(self, query: str, types: Sequence[LyricsType]) -> SuccessfulLyricsResponse | None:
        return fetch_lyrics(query, types=types, **self._options())

    def lookup(self, query: str, types: Sequence[LyricsType]) -> LyricsOutcome:
        return lookup_lyrics(query, types=types, **self._options())
