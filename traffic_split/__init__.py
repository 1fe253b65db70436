"""
Weighted traffic splitting for payment gateways.

Routes each payment to one of several gateways so that, over many
payments, each gateway's share matches its configured percentage.
"""

__version__ = "0.1.0"

from traffic_split.core import RoutingTable, WeightedEntry, WeightedRouter, build_router
from traffic_split.domain import Payment, PaymentStatus
from traffic_split.exceptions import (
    InvalidHandlerError,
    InvalidWeightError,
    InvalidWeightSumError,
    NoRouteSelectedError,
    RoutingConfigurationError,
    TrafficSplitError,
    UnknownGatewayError,
)
from traffic_split.gateways import PaymentGateway

__all__ = [
    "RoutingTable",
    "WeightedEntry",
    "WeightedRouter",
    "build_router",
    "Payment",
    "PaymentStatus",
    "InvalidHandlerError",
    "InvalidWeightError",
    "InvalidWeightSumError",
    "NoRouteSelectedError",
    "RoutingConfigurationError",
    "TrafficSplitError",
    "UnknownGatewayError",
    "PaymentGateway",
]
