from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ._base import SumUpModel


class MembershipStatus(str, Enum):
    ACCEPTED = "accepted"
    PENDING = "pending"
    EXPIRED = "expired"
    DISABLED = "disabled"
    UNKNOWN = "unknown"


class MembershipResource(SumUpModel):
    id: str
    type: str
    name: str
    logo: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Membership(SumUpModel):
    id: str
    resource_id: str
    type: str
    roles: List[str] = Field(default_factory=list)
    permissions: List[str] = Field(default_factory=list)
    status: MembershipStatus
    resource: MembershipResource
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListMembershipsResponse(SumUpModel):
    items: List[Membership] = Field(default_factory=list)
    total_count: Optional[int] = None
