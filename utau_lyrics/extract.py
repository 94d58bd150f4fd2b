from __future__ import annotations

from typing import Literal, overload

from .schema import (
    LYRICS_TYPES,
    LineByLineLyrics,
    LyricsType,
    RawLyrics,
    SuccessfulLyricsResponse,
    WordByWordLyrics,
)


@overload
def extract(response: SuccessfulLyricsResponse, lyrics_type: Literal["wbw"]) -> WordByWordLyrics | None: ...
@overload
def extract(response: SuccessfulLyricsResponse, lyrics_type: Literal["lbl"]) -> LineByLineLyrics | None: ...
@overload
def extract(response: SuccessfulLyricsResponse, lyrics_type: Literal["raw"]) -> RawLyrics | None: ...


def extract(
    response: SuccessfulLyricsResponse, lyrics_type: LyricsType
) -> WordByWordLyrics | LineByLineLyrics | RawLyrics | None:
    """
    Return the first lyrics variant of `lyrics_type` in `response`, or None.

    `response` is trusted to come from `fetch_lyrics` and is not re-validated.
    """
    if lyrics_type not in LYRICS_TYPES:
        raise ValueError(f"Unknown lyrics type {lyrics_type!r}, expected one of {', '.join(LYRICS_TYPES)}")
    return next((lyrics for lyrics in response.data.lyrics if lyrics.type == lyrics_type), None)
