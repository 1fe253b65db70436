"""Weighted Traffic Router: splits payments across gateways by percentage.

Each gateway gets an integer weight and the weights must add up to 100.
Every payment goes to exactly one gateway, picked by drawing a number in
[1, total_weight] and walking the cumulative weights in table order.
"""

import random
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Protocol, Tuple, Union

from traffic_split.domain.payment import Payment
from traffic_split.exceptions import (
    InvalidHandlerError,
    InvalidWeightError,
    InvalidWeightSumError,
    NoRouteSelectedError,
)
from traffic_split.gateways.base import PaymentGateway, is_payment_gateway
from traffic_split.monitoring import get_logger

logger = get_logger(__name__)

VALID_PERCENTAGE = 100
GATEWAY_KEY = "gateway"
WEIGHT_KEY = "weight"


class RandomSource(Protocol):
    """Anything with random.Random's inclusive randint()."""

    def randint(self, a: int, b: int) -> int:
        ...


# OS entropy, safe to share between threads
_system_random = random.SystemRandom()


class WeightedEntry(NamedTuple):
    """A gateway and its share of traffic in percentage points."""
    gateway: PaymentGateway
    weight: int


EntryInput = Union[WeightedEntry, Tuple[Any, Any], Mapping[str, Any]]


def _unpack_entry(entry: EntryInput, index: int) -> Tuple[Any, Any]:
    if isinstance(entry, Mapping):
        return entry.get(GATEWAY_KEY), entry.get(WEIGHT_KEY)
    try:
        gateway, weight = entry
    except (TypeError, ValueError):
        raise InvalidHandlerError(
            "Routing entry must be a (gateway, weight) pair", index=index
        ) from None
    return gateway, weight


def _validate_gateway(gateway: Any, index: int) -> None:
    if not is_payment_gateway(gateway):
        raise InvalidHandlerError(index=index, gateway_type=type(gateway).__name__)


def _validate_weight(weight: Any, index: int) -> None:
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
        raise InvalidWeightError(index=index, weight=repr(weight))


@dataclass(frozen=True)
class RoutingTable:
    """
    Validated, ordered gateway weights.

    Use RoutingTable.build() to get a checked table (weights positive, summing to 100).
    The plain constructor does not validate.
    """

    entries: Tuple[WeightedEntry, ...]
    total_weight: int

    @classmethod
    def build(cls, entries: Iterable[EntryInput]) -> "RoutingTable":
        """
        Validate gateway/weight pairs and freeze them into a table.

        Each entry has its gateway checked before its weight; the first
        bad entry aborts the build. The sum is checked once every entry
        has passed.

        Args:
            entries: (gateway, weight) pairs, WeightedEntry instances or
                mappings with "gateway" and "weight" keys, in routing order

        Returns:
            RoutingTable with total_weight == 100

        Raises:
            InvalidHandlerError: A gateway lacks process() or traffic_load()
            InvalidWeightError: A weight is not a positive integer
            InvalidWeightSumError: Weights do not add up to 100
        """
        validated: List[WeightedEntry] = []

        for index, entry in enumerate(entries):
            gateway, weight = _unpack_entry(entry, index)
            _validate_gateway(gateway, index)
            _validate_weight(weight, index)
            validated.append(WeightedEntry(gateway, weight))

        total_weight = sum(entry.weight for entry in validated)
        if total_weight != VALID_PERCENTAGE:
            raise InvalidWeightSumError(total_weight, VALID_PERCENTAGE)

        return cls(entries=tuple(validated), total_weight=total_weight)

    @property
    def gateways(self) -> List[PaymentGateway]:
        return [entry.gateway for entry in self.entries]

    @property
    def weights(self) -> List[int]:
        return [entry.weight for entry in self.entries]

    def select(self, draw: int) -> PaymentGateway:
        """
        Map a draw in [1, total_weight] to a gateway.

        Earlier entries own the lower edge of their band: with 50/50,
        a draw of 50 picks the first gateway and 51 the second.

        Raises:
            NoRouteSelectedError: draw is above the cumulative weight
        """
        cumulative = 0
        for entry in self.entries:
            cumulative += entry.weight
            if draw <= cumulative:
                return entry.gateway

        raise NoRouteSelectedError(draw, self.total_weight)


class WeightedRouter:
    """
    Routes each payment to one gateway by weighted random draw.

    The routing table is fixed at construction. Build a new router to
    change the split.
    """

    def __init__(
        self,
        gateways_with_weights: Iterable[EntryInput],
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the router.

        Args:
            gateways_with_weights: Ordered gateway/weight pairs
            random_source: Generator with randint(a, b); defaults to a
                shared SystemRandom

        Raises:
            RoutingConfigurationError: If the pairs fail validation
        """
        self._setup(RoutingTable.build(gateways_with_weights), random_source)

        logger.debug(
            "weighted_router_initialized",
            gateways=[_gateway_name(gateway) for gateway in self._table.gateways],
            weights=self._table.weights,
        )

    @classmethod
    def from_table(
        cls,
        table: RoutingTable,
        random_source: Optional[RandomSource] = None,
    ) -> "WeightedRouter":
        """Wrap an existing table as-is, without validating it again."""
        router = cls.__new__(cls)
        router._setup(table, random_source)
        return router

    def _setup(self, table: RoutingTable, random_source: Optional[RandomSource]) -> None:
        self._table = table
        self._random = random_source if random_source is not None else _system_random

    @property
    def table(self) -> RoutingTable:
        return self._table

    @property
    def gateways(self) -> List[PaymentGateway]:
        return self._table.gateways

    def route(self, payment: Payment) -> None:
        """
        Send one payment to exactly one gateway.

        Exceptions raised by the gateway's process() reach the caller
        unchanged.

        Raises:
            NoRouteSelectedError: The table's total disagrees with its entries
        """
        draw = self._random.randint(1, self._table.total_weight)
        self._table.select(draw).process(payment)

    def traffic_loads(self) -> List[int]:
        """Current traffic_load() of each gateway, in table order."""
        return [gateway.traffic_load() for gateway in self._table.gateways]


def _gateway_name(gateway: Any) -> str:
    return getattr(gateway, "code", type(gateway).__name__)
