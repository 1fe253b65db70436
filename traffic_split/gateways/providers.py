"""Payment gateway adapters and the registry used to build them from config."""

from typing import Dict, List, Type

from traffic_split.exceptions import UnknownGatewayError
from traffic_split.gateways.base import CountingGateway


class PayPalPaymentGateway(CountingGateway):
    """PayPal adapter."""

    code = "paypal_payment_gateway"


class Przelewy24PaymentGateway(CountingGateway):
    """Przelewy24 adapter."""

    code = "przelewy24_payment_gateway"


class TpayPaymentGateway(CountingGateway):
    """Tpay adapter."""

    code = "tpay_payment_gateway"


class VoltPaymentGateway(CountingGateway):
    """Volt adapter."""

    code = "volt_payment_gateway"


GATEWAY_REGISTRY: Dict[str, Type[CountingGateway]] = {
    gateway_cls.code: gateway_cls
    for gateway_cls in (
        PayPalPaymentGateway,
        Przelewy24PaymentGateway,
        TpayPaymentGateway,
        VoltPaymentGateway,
    )
}


def available_gateways() -> List[str]:
    """Registered gateway codes, sorted."""
    return sorted(GATEWAY_REGISTRY)


def create_gateway(code: str) -> CountingGateway:
    """
    Instantiate a fresh gateway for a registry code.

    Args:
        code: Gateway code, e.g. "paypal_payment_gateway"

    Returns:
        New gateway instance with a zero traffic load

    Raises:
        UnknownGatewayError: If no gateway is registered under code
    """
    try:
        gateway_cls = GATEWAY_REGISTRY[code]
    except KeyError:
        raise UnknownGatewayError(code, available=available_gateways()) from None
    return gateway_cls()
