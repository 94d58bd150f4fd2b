from __future__ import annotations

from .schema import FailedLyricsResponse, ValidationDiagnostics

REQUESTED_TYPES_SUBJECT = "requested types"
SERVER_RESPONSE_SUBJECT = "server response"


class UtauError(Exception):
    """Base class for errors raised while fetching lyrics. Never raised directly."""


class ValidationError(UtauError):
    """A value did not match its schema: bad caller input or an incompatible server payload."""

    def __init__(self, subject: str, diagnostics: ValidationDiagnostics):
        super().__init__(f"Unable to validate {subject}:\n{diagnostics.render()}")
        self.subject = subject
        self.diagnostics = diagnostics


class FailedRequestError(UtauError):
    """The service answered with a failure envelope for a reason other than "not found"."""

    def __init__(self, response: FailedLyricsResponse, status: int):
        super().__init__(f"[{status}] {response.data.message}")
        self.response = response
        self.status = status

    @property
    def message(self) -> str:
        return self.response.data.message
