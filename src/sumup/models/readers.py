from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ._base import SumUpModel


class ReaderStatus(str, Enum):
    UNKNOWN = "unknown"
    PROCESSING = "processing"
    PAIRED = "paired"
    EXPIRED = "expired"


class ReaderDevice(SumUpModel):
    identifier: str
    model: str


class Reader(SumUpModel):
    id: str
    name: str
    status: ReaderStatus
    device: ReaderDevice
    metadata: Optional[Dict[str, Any]] = None
    service_account_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ReadersListResponse(SumUpModel):
    items: List[Reader] = Field(default_factory=list)


class ReaderStatusData(SumUpModel):
    """Live status reported by a paired reader."""

    battery_level: Optional[float] = None
    battery_temperature: Optional[int] = None
    connection_type: Optional[str] = None
    firmware_version: Optional[str] = None
    last_activity: Optional[datetime] = None
    state: Optional[str] = None
    status: str


class ReaderStatusResponse(SumUpModel):
    data: ReaderStatusData


class ReaderCheckoutAmount(SumUpModel):
    currency: str
    minor_unit: int
    value: int


class CreateReaderCheckoutRequest(SumUpModel):
    total_amount: ReaderCheckoutAmount
    description: Optional[str] = None
    return_url: Optional[str] = None
    installments: Optional[int] = None


class CreateReaderCheckoutResponseData(SumUpModel):
    client_transaction_id: str


class CreateReaderCheckoutResponse(SumUpModel):
    data: CreateReaderCheckoutResponseData
