"""
Exception classes for traffic splitting.

Construction failures all derive from RoutingConfigurationError so callers
can catch a bad split in one place and still tell the kinds apart.
NoRouteSelectedError is raised at routing time and means the routing
table itself is inconsistent.
"""

from typing import Any, Dict


class TrafficSplitError(Exception):
    """
    Base exception for all traffic splitting errors.

    Every exception includes:
    - Error code (stable identifier for callers and logs)
    - Message (human readable)
    - Metadata (extra context passed as keyword arguments)
    """

    error_code = "traffic_split_error"

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.metadata = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for structured logging and CLI output"""
        return {
            "error": {
                **self.metadata,
                "code": self.error_code,
                "message": self.message,
                "type": self.__class__.__name__,
            }
        }


# ============================================================================
# CONSTRUCTION ERRORS
# ============================================================================

class RoutingConfigurationError(TrafficSplitError):
    """The gateway/weight configuration cannot produce a routing table."""

    error_code = "routing_configuration_invalid"


class InvalidHandlerError(RoutingConfigurationError):
    """A configured gateway does not implement process() and traffic_load()."""

    error_code = "invalid_handler"

    def __init__(
        self,
        message: str = "A valid gateway must implement the PaymentGateway protocol",
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)


class InvalidWeightError(RoutingConfigurationError):
    """A configured weight is not a positive integer."""

    error_code = "invalid_weight"

    def __init__(self, message: str = "Weight must be a positive integer", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidWeightSumError(RoutingConfigurationError):
    """
    The weights do not add up to exactly 100.

    The observed sum is kept on the exception as actual_sum.
    """

    error_code = "invalid_weight_sum"

    def __init__(self, actual_sum: int, expected_sum: int = 100, **kwargs: Any):
        super().__init__(
            f"Sum of weights must be exactly {expected_sum} (you provided {actual_sum})",
            actual_sum=actual_sum,
            **kwargs,
        )
        self.actual_sum = actual_sum
        self.expected_sum = expected_sum


class UnknownGatewayError(RoutingConfigurationError):
    """No gateway is registered under the requested code."""

    error_code = "unknown_gateway"

    def __init__(self, code: str, **kwargs: Any):
        super().__init__(f"Unknown payment gateway: {code}", gateway_code=code, **kwargs)
        self.code = code


# ============================================================================
# ROUTING ERRORS
# ============================================================================

class NoRouteSelectedError(TrafficSplitError):
    """
    The cumulative walk finished without selecting a gateway.

    Cannot happen for a table built through RoutingTable.build; seeing it
    means total_weight disagrees with the entries. Not recoverable.
    """

    error_code = "no_route_selected"

    def __init__(self, draw: int, total_weight: int, **kwargs: Any):
        super().__init__(
            "No payment gateway was selected for routing.",
            draw=draw,
            total_weight=total_weight,
            **kwargs,
        )
        self.draw = draw
        self.total_weight = total_weight
