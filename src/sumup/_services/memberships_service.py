from typing import Optional, Sequence

from httpx import Request

from .._config import RequestOptions
from .._utils._optional_query import OptionalQuery
from ..models.api_response import ApiResponse
from ..models.memberships import ListMembershipsResponse, MembershipStatus
from ._base_service import BaseService


class MembershipsService(BaseService):
    """Service for the memberships of the authenticated user."""

    def list(
        self,
        *,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        kind: Optional[str] = None,
        status: Optional[MembershipStatus] = None,
        resource_type: Optional[str] = None,
        resource_name: Optional[str] = None,
        roles: Optional[Sequence[str]] = None,
        parent_id: OptionalQuery[str] = OptionalQuery.unset(),
        parent_type: OptionalQuery[str] = OptionalQuery.unset(),
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ListMembershipsResponse]:
        """List memberships.

        Args:
            offset (Optional[int]): Number of items to skip.
            limit (Optional[int]): Maximum number of items to return.
            kind (Optional[str]): Filter by membership kind.
            status (Optional[MembershipStatus]): Filter by membership status.
            resource_type (Optional[str]): Filter by resource type, e.g. ``merchant``.
            resource_name (Optional[str]): Filter by resource name.
            roles (Optional[Sequence[str]]): Only memberships holding all of these roles.
            parent_id (OptionalQuery[str]): Parent resource id. ``OptionalQuery.null()``
                selects resources without a parent; unset does not filter.
            parent_type (OptionalQuery[str]): Parent resource type, same semantics.
            request_options (Optional[RequestOptions]): Per-call token and timeout overrides.

        Examples:
            ```python
            from sumup import OptionalQuery, SumUp
            from sumup.models import MembershipStatus

            client = SumUp()

            response = client.memberships.list(
                status=MembershipStatus.ACCEPTED,
                resource_type="merchant",
                parent_id=OptionalQuery.null(),
                limit=5,
            )
            ```
        """
        spec = self._list_spec(
            offset,
            limit,
            kind,
            status,
            resource_type,
            resource_name,
            roles,
            parent_id,
            parent_type,
        )
        return self._api.send(
            spec, ListMembershipsResponse, request_options=request_options
        )

    async def list_async(
        self,
        *,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        kind: Optional[str] = None,
        status: Optional[MembershipStatus] = None,
        resource_type: Optional[str] = None,
        resource_name: Optional[str] = None,
        roles: Optional[Sequence[str]] = None,
        parent_id: OptionalQuery[str] = OptionalQuery.unset(),
        parent_type: OptionalQuery[str] = OptionalQuery.unset(),
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ListMembershipsResponse]:
        """Asynchronously list memberships. See :meth:`list`."""
        spec = self._list_spec(
            offset,
            limit,
            kind,
            status,
            resource_type,
            resource_name,
            roles,
            parent_id,
            parent_type,
        )
        return await self._api.send_async(
            spec, ListMembershipsResponse, request_options=request_options
        )

    def _list_spec(
        self,
        offset: Optional[int],
        limit: Optional[int],
        kind: Optional[str],
        status: Optional[MembershipStatus],
        resource_type: Optional[str],
        resource_name: Optional[str],
        roles: Optional[Sequence[str]],
        parent_id: OptionalQuery[str],
        parent_type: OptionalQuery[str],
    ) -> Request:
        def configure(builder):
            builder.add_query("offset", offset)
            builder.add_query("limit", limit)
            builder.add_query("kind", kind)
            builder.add_query("status", status)
            builder.add_query("resource.type", resource_type)
            builder.add_query("resource.name", resource_name)
            builder.add_query("roles", roles)
            builder.add_query("resource.parent.id", OptionalQuery.coerce(parent_id))
            builder.add_query("resource.parent.type", OptionalQuery.coerce(parent_type))

        return self._api.create_request("GET", "/v0.1/memberships", configure)
