"""Domain models for traffic splitting."""

from .payment import Payment, PaymentStatus

__all__ = ["Payment", "PaymentStatus"]
