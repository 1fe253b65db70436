"""Core components for weighted traffic splitting."""

from traffic_split.exceptions import (
    InvalidHandlerError,
    InvalidWeightError,
    InvalidWeightSumError,
    NoRouteSelectedError,
    RoutingConfigurationError,
    TrafficSplitError,
    UnknownGatewayError,
)
from .router import RandomSource, RoutingTable, WeightedEntry, WeightedRouter
from .factory import build_entries, build_router

__all__ = [
    "InvalidHandlerError",
    "InvalidWeightError",
    "InvalidWeightSumError",
    "NoRouteSelectedError",
    "RoutingConfigurationError",
    "TrafficSplitError",
    "UnknownGatewayError",
    "RandomSource",
    "RoutingTable",
    "WeightedEntry",
    "WeightedRouter",
    "build_entries",
    "build_router",
]
