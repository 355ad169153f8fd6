from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .errors import ApiError


class SumUpError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigurationError(SumUpError, ValueError):
    """Raised for invalid client or per-call configuration.

    Detected before any network activity, so the request is never sent.
    """


class InvalidArgumentError(ConfigurationError):
    """Raised when a required request argument is missing."""

    def __init__(self, parameter_name: str, message: Optional[str] = None) -> None:
        self.parameter_name = parameter_name
        super().__init__(message or f"Parameter '{parameter_name}' must not be None.")


class UnresolvedPathParametersError(ConfigurationError):
    """Raised when a path template still has placeholders at build time."""

    def __init__(self, path_template: str, names: Sequence[str]) -> None:
        self.path_template = path_template
        self.names = list(names)
        joined = ", ".join(self.names)
        super().__init__(
            f"Path template '{path_template}' has unbound parameters: {joined}"
        )


class RequestTimeoutError(SumUpError, TimeoutError):
    """Raised when a request is cancelled because its timeout elapsed."""

    def __init__(self, message: str, request_uri: Optional[str] = None) -> None:
        self.request_uri = request_uri
        super().__init__(message)


class ApiException(SumUpError):
    """Raised when the SumUp API replies with a non-successful status code.

    Attributes:
        status_code: HTTP status code of the response.
        error: Structured error body, when the body could be decoded as one.
        response_body: Raw response text, if any.
        request_uri: Final URI of the request.
    """

    def __init__(
        self,
        status_code: int,
        error: Optional["ApiError"] = None,
        response_body: Optional[str] = None,
        request_uri: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.response_body = response_body
        self.request_uri = request_uri
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"SumUp API request failed with status code {self.status_code}"
        if self.error is None:
            return message
        if self.error.code:
            message += f" ({self.error.code})"
        if self.error.message:
            message += f": {self.error.message}"
        return message


class DecodeError(SumUpError):
    """Raised when a successful response body cannot be decoded.

    Distinct from :class:`ApiException`: the server reported success, so the
    failure lies in the payload itself.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Optional[str] = None,
        request_uri: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        self.request_uri = request_uri
        super().__init__(message)
