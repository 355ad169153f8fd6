from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from httpx import Headers

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """A successful SumUp API response.

    Attributes:
        data: The decoded payload, ``None`` when the body was empty.
        status_code: HTTP status code (always 2xx).
        headers: Response headers.
        request_uri: Final URI of the request.
    """

    data: Optional[T]
    status_code: int
    headers: Headers
    request_uri: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
