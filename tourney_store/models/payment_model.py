from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

class PaymentType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"

class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

class PaymentRequest(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str  # References User.id
    type: PaymentType
    amount: int = Field(gt=0)
    status: PaymentStatus = PaymentStatus.PENDING
    method: Optional[str] = None  # Payout channel, e.g. "bKash" or "Nagad"
    account_number: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
        use_enum_values = True
