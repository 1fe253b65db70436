"""Dispatch capability shared by every payment gateway."""

import threading
from typing import Any, Protocol, runtime_checkable

from traffic_split.domain.payment import Payment


@runtime_checkable
class PaymentGateway(Protocol):
    """
    What the router needs from a gateway.

    process() accepts one payment; traffic_load() reports how many
    payments this instance has been given so far.
    """

    def process(self, payment: Payment) -> None:
        ...

    def traffic_load(self) -> int:
        ...


def is_payment_gateway(candidate: Any) -> bool:
    """Check that candidate is a gateway instance with callable process() and traffic_load()."""
    # a gateway class has both attributes too, but only as unbound functions
    if isinstance(candidate, type) or not isinstance(candidate, PaymentGateway):
        return False
    return callable(candidate.process) and callable(candidate.traffic_load)


class CountingGateway:
    """
    Gateway that only counts the payments it receives.

    The counter belongs to the instance; two instances of the same
    gateway class are routed and counted independently.
    """

    code: str = "counting_gateway"

    def __init__(self) -> None:
        self._traffic_load = 0
        self._lock = threading.Lock()

    def process(self, payment: Payment) -> None:
        with self._lock:
            self._traffic_load += 1

    def traffic_load(self) -> int:
        with self._lock:
            return self._traffic_load

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(traffic_load={self.traffic_load()})"
