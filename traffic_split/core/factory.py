"""Build a WeightedRouter from configured gateway codes and weights."""

import random
from typing import Iterable, List, Optional, Tuple

from traffic_split.config import Settings, get_settings
from traffic_split.core.router import RandomSource, WeightedEntry, WeightedRouter
from traffic_split.gateways import create_gateway
from traffic_split.monitoring import get_logger

logger = get_logger(__name__)


def build_entries(gateway_weights: Iterable[Tuple[str, int]]) -> List[WeightedEntry]:
    """
    Instantiate one gateway per (code, weight) pair.

    A code listed twice gets two separate gateway instances.

    Raises:
        UnknownGatewayError: If a code is not registered
    """
    return [WeightedEntry(create_gateway(code), weight) for code, weight in gateway_weights]


def build_router(
    settings: Optional[Settings] = None,
    random_source: Optional[RandomSource] = None,
    gateway_weights: Optional[Iterable[Tuple[str, int]]] = None,
) -> WeightedRouter:
    """
    Create a router for the configured gateway split.

    Args:
        settings: Settings to use (default: cached settings)
        random_source: Explicit generator; overrides settings.random_seed
        gateway_weights: (code, weight) pairs overriding settings.gateway_weights

    Returns:
        Ready WeightedRouter

    Raises:
        RoutingConfigurationError: If the split is invalid
    """
    settings = settings or get_settings()
    pairs = list(gateway_weights) if gateway_weights is not None else settings.get_gateway_weights()

    if random_source is None and settings.random_seed is not None:
        random_source = random.Random(settings.random_seed)

    router = WeightedRouter(build_entries(pairs), random_source=random_source)

    logger.info(
        "traffic_split_configured",
        split=[f"{code}={weight}" for code, weight in pairs],
        gateway_count=len(pairs),
        custom_random_source=random_source is not None,
    )
    return router
