from ._base import JsonDocument, SumUpModel
from .api_response import ApiResponse
from .checkouts import Checkout, CheckoutStatus, CreateCheckoutRequest
from .errors import ApiError
from .exceptions import (
    ApiException,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RequestTimeoutError,
    SumUpError,
    UnresolvedPathParametersError,
)
from .memberships import (
    ListMembershipsResponse,
    Membership,
    MembershipResource,
    MembershipStatus,
)
from .readers import (
    CreateReaderCheckoutRequest,
    CreateReaderCheckoutResponse,
    Reader,
    ReaderCheckoutAmount,
    ReaderDevice,
    ReadersListResponse,
    ReaderStatus,
    ReaderStatusData,
    ReaderStatusResponse,
)

__all__ = [
    "ApiError",
    "ApiException",
    "ApiResponse",
    "Checkout",
    "CheckoutStatus",
    "ConfigurationError",
    "CreateCheckoutRequest",
    "CreateReaderCheckoutRequest",
    "CreateReaderCheckoutResponse",
    "DecodeError",
    "InvalidArgumentError",
    "JsonDocument",
    "ListMembershipsResponse",
    "Membership",
    "MembershipResource",
    "MembershipStatus",
    "Reader",
    "ReaderCheckoutAmount",
    "ReaderDevice",
    "ReaderStatus",
    "ReaderStatusData",
    "ReaderStatusResponse",
    "ReadersListResponse",
    "RequestTimeoutError",
    "SumUpError",
    "SumUpModel",
    "UnresolvedPathParametersError",
]
