"""
Payment record routed by the traffic splitter.

The splitter never reads these fields; they exist so gateways and the
simulation CLI have a realistic unit of work. Storage is handled elsewhere.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_AMOUNT = Decimal("99999999.99")  # DECIMAL(10, 2)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentStatus(str, Enum):
    """Payment lifecycle states."""
    CREATED = "CREATED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class Payment(BaseModel):
    """A single payment to be routed to one gateway."""

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = Field(default=None, description="Storage identifier, set once persisted")
    amount: Decimal = Field(..., gt=0, description="Payment amount, two decimal places")
    currency: str = Field(..., description="ISO 4217 currency code")
    status: PaymentStatus = Field(default=PaymentStatus.CREATED)
    payment_method: str = Field(..., min_length=1, max_length=32, description="e.g. card, blik")
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime | None = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Round to cents and enforce the column precision."""
        v = v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if v <= 0:
            raise ValueError("Amount must be at least 0.01 after rounding to cents")
        if v > MAX_AMOUNT:
            raise ValueError(f"Amount exceeds maximum of {MAX_AMOUNT}")
        return v

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Currency must be a 3-letter code."""
        v = v.strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError("Currency must be 3-letter code")
        return v

    def mark_status(self, status: PaymentStatus) -> None:
        """Move the payment to a new status and stamp updated_at."""
        self.status = status
        self.updated_at = _utcnow()
