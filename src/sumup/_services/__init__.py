from ._api_client import ApiClient
from .checkouts_service import CheckoutsService
from .memberships_service import MembershipsService
from .readers_service import ReadersService

__all__ = [
    "ApiClient",
    "CheckoutsService",
    "MembershipsService",
    "ReadersService",
]
