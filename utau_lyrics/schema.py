"""
Wire-level shapes of the Utau lyrics API and the validation entry point.

Every shape is a pydantic model (or an annotated union of models) so the
result of a successful validation is a frozen, typed value. `validate()`
never raises on bad input: it returns a `Validation` holding either the
typed value or path-tagged diagnostics.
"""

from __future__ import annotations

import reprlib
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Literal, TypeVar, Union, get_args

import pydantic
from pydantic import (
    AfterValidator,
    AllowInfNan,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    StrictBool,
    StrictStr,
    Strict,
    Tag,
    TypeAdapter,
)
from pydantic_core import ErrorDetails, PydanticCustomError

T = TypeVar("T")


def _fits_float(value: Any) -> Any:
    # ints beyond float range are not finite numbers
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            float(value)
        except OverflowError:
            raise PydanticCustomError("finite_number", "Input should be a finite number") from None
    return value


# Finite int or float; booleans and numeric strings are rejected.
FiniteNumber = Annotated[float, Strict(), AllowInfNan(False), BeforeValidator(_fits_float)]

LyricsType = Literal["wbw", "lbl", "raw"]
LYRICS_TYPES: tuple[LyricsType, ...] = get_args(LyricsType)


class _Shape(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class LyricSpan(_Shape):
    text: StrictStr
    start: FiniteNumber
    end: FiniteNumber


class SyllabicSpan(LyricSpan):
    """A word-level span together with its syllables."""

    syllables: tuple[LyricSpan, ...]


class WordByWordLyrics(_Shape):
    type: Literal["wbw"]
    lyrics: tuple[SyllabicSpan, ...]
    copyright: StrictStr


class LineByLineLyrics(_Shape):
    type: Literal["lbl"]
    lyrics: tuple[LyricSpan, ...]
    copyright: StrictStr


class RawLyrics(_Shape):
    type: Literal["raw"]
    text: StrictStr
    copyright: StrictStr


LyricsVariant = Annotated[
    Union[WordByWordLyrics, LineByLineLyrics, RawLyrics],
    Field(discriminator="type"),
]


class Track(_Shape):
    id: StrictStr
    title: StrictStr
    artists: tuple[StrictStr, ...]
    genres: tuple[StrictStr, ...]
    length: FiniteNumber
    explicit: StrictBool
    album_id: StrictStr | None = None
    album_name: StrictStr


class FailureData(_Shape):
    message: StrictStr


class FailedLyricsResponse(_Shape):
    success: Literal[False]
    data: FailureData


class LyricsData(_Shape):
    lyrics: tuple[LyricsVariant, ...]
    track: Track


class SuccessfulLyricsResponse(_Shape):
    success: Literal[True]
    data: LyricsData


def _envelope_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        success = value.get("success")
    else:
        success = getattr(value, "success", None)
    # identity checks: 1 and 0 are not valid discriminators
    if success is True:
        return "successful"
    if success is False:
        return "failed"
    return None


LyricsResponse = Annotated[
    Union[
        Annotated[SuccessfulLyricsResponse, Tag("successful")],
        Annotated[FailedLyricsResponse, Tag("failed")],
    ],
    Discriminator(
        _envelope_tag,
        custom_error_type="invalid_discriminator",
        custom_error_message="Envelope must carry a boolean 'success' field",
        custom_error_context={"discriminator": "success"},
    ),
]


def _unique_types(types: tuple[LyricsType, ...]) -> tuple[LyricsType, ...]:
    seen: set[str] = set()
    dupes: list[str] = []
    for t in types:
        if t in seen and t not in dupes:
            dupes.append(t)
        seen.add(t)
    if dupes:
        raise ValueError(f"duplicate lyrics types: {', '.join(dupes)}")
    return types


def _ordered(value: Any) -> Any:
    if not isinstance(value, (list, tuple)):
        raise PydanticCustomError("sequence_type", "Input should be a list or tuple of lyrics types")
    return value


# Only lists and tuples: sets and iterators have no caller-visible order.
RequestedTypes = Annotated[
    tuple[LyricsType, ...],
    Field(min_length=1, max_length=len(LYRICS_TYPES)),
    AfterValidator(_unique_types),
    BeforeValidator(_ordered),
]

LYRIC_SPAN: TypeAdapter[LyricSpan] = TypeAdapter(LyricSpan)
LYRICS_VARIANT: TypeAdapter[WordByWordLyrics | LineByLineLyrics | RawLyrics] = TypeAdapter(LyricsVariant)
TRACK: TypeAdapter[Track] = TypeAdapter(Track)
LYRICS_RESPONSE: TypeAdapter[SuccessfulLyricsResponse | FailedLyricsResponse] = TypeAdapter(LyricsResponse)
REQUESTED_TYPES: TypeAdapter[tuple[LyricsType, ...]] = TypeAdapter(RequestedTypes)


MISSING = "<missing>"

_repr = reprlib.Repr()
_repr.maxstring = 60
_repr.maxother = 60


@dataclass(frozen=True, slots=True)
class Issue:
    path: tuple[str | int, ...]
    kind: str
    expected: str
    actual: str

    @property
    def location(self) -> str:
        return ".".join(str(p) for p in self.path) or "<root>"

    def __str__(self) -> str:
        return f"{self.location}: {self.expected} (got {self.actual})"

    @classmethod
    def from_error(cls, error: ErrorDetails) -> Issue:
        path = tuple(error["loc"])
        value = error.get("input")
        actual = MISSING if error["type"] == "missing" else _repr.repr(value)

        # Union tag errors are reported at the union itself; point them at the tag field.
        discriminator = (error.get("ctx") or {}).get("discriminator")
        if isinstance(discriminator, str):
            field = discriminator.strip("'")
            path += (field,)
            if isinstance(value, dict):
                actual = _repr.repr(value[field]) if field in value else MISSING

        return cls(path=path, kind=error["type"], expected=error["msg"], actual=actual)


@dataclass(frozen=True, slots=True)
class ValidationDiagnostics:
    issues: tuple[Issue, ...]

    def __iter__(self):
        return iter(self.issues)

    def __len__(self) -> int:
        return len(self.issues)

    def at(self, *path: str | int) -> list[Issue]:
        """Issues reported exactly at `path`."""
        return [i for i in self.issues if i.path == path]

    def render(self) -> str:
        return "\n".join(f"  {issue}" for issue in self.issues)

    @classmethod
    def from_exception(cls, exc: pydantic.ValidationError) -> ValidationDiagnostics:
        return cls(issues=tuple(Issue.from_error(e) for e in exc.errors()))


@dataclass(frozen=True)
class Validation(Generic[T]):
    value: T | None = None
    diagnostics: ValidationDiagnostics | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostics is None


def validate(value: Any, shape: TypeAdapter[T] | type[T]) -> Validation[T]:
    """
    Check `value` against `shape` without raising.

    `shape` is one of the module-level adapters (`LYRICS_RESPONSE`,
    `REQUESTED_TYPES`, ...), any pydantic `TypeAdapter`, or a model class.
    Typed model instances are accepted as input, so re-validating an
    already validated value yields an equal value.
    """
    adapter = shape if isinstance(shape, TypeAdapter) else TypeAdapter(shape)
    try:
        return Validation(value=adapter.validate_python(value))
    except pydantic.ValidationError as e:
        return Validation(diagnostics=ValidationDiagnostics.from_exception(e))
