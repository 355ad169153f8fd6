from datetime import datetime
from enum import Enum
from typing import Optional

from ._base import SumUpModel


class CheckoutStatus(str, Enum):
    PENDING = "PENDING"
    FAILED = "FAILED"
    PAID = "PAID"
    EXPIRED = "EXPIRED"


class Checkout(SumUpModel):
    id: str
    checkout_reference: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    merchant_code: Optional[str] = None
    description: Optional[str] = None
    return_url: Optional[str] = None
    status: Optional[CheckoutStatus] = None
    date: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    transaction_code: Optional[str] = None
    transaction_id: Optional[str] = None


class CreateCheckoutRequest(SumUpModel):
    checkout_reference: str
    amount: float
    currency: str
    merchant_code: str
    description: Optional[str] = None
    return_url: Optional[str] = None
    valid_until: Optional[datetime] = None
    redirect_url: Optional[str] = None
