"""Payment gateways that the traffic splitter routes to."""

from .base import CountingGateway, PaymentGateway, is_payment_gateway
from .providers import (
    GATEWAY_REGISTRY,
    PayPalPaymentGateway,
    Przelewy24PaymentGateway,
    TpayPaymentGateway,
    VoltPaymentGateway,
    available_gateways,
    create_gateway,
)

__all__ = [
    "CountingGateway",
    "PaymentGateway",
    "is_payment_gateway",
    "GATEWAY_REGISTRY",
    "PayPalPaymentGateway",
    "Przelewy24PaymentGateway",
    "TpayPaymentGateway",
    "VoltPaymentGateway",
    "available_gateways",
    "create_gateway",
]
