"""Client for the Utau lyrics API."""

from . import schema
from .client import (
    DEFAULT_URL,
    DEFAULT_VERSION,
    LyricsClient,
    LyricsOutcome,
    build_lyrics_url,
    fetch_lyrics,
    lookup_lyrics,
)
from .config import ClientConfig, load_config
from .errors import FailedRequestError, UtauError, ValidationError
from .extract import extract
from .schema import LyricsType, SuccessfulLyricsResponse, validate
from .transport import RequestsTransport, Transport
from ._version import __version__

__all__ = [
    "DEFAULT_URL",
    "DEFAULT_VERSION",
    "ClientConfig",
    "FailedRequestError",
    "LyricsClient",
    "LyricsOutcome",
    "LyricsType",
    "RequestsTransport",
    "SuccessfulLyricsResponse",
    "Transport",
    "UtauError",
    "ValidationError",
    "build_lyrics_url",
    "extract",
    "fetch_lyrics",
    "load_config",
    "lookup_lyrics",
    "schema",
    "validate",
]
