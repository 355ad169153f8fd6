from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ApiError(BaseModel):
    """Structured error body returned by the SumUp API."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )

    code: Optional[str] = None
    message: Optional[str] = None
    details: Optional[Any] = None
