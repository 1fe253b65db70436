"""
Pytest configuration and fixtures for traffic split tests.
"""

import logging
import os
from decimal import Decimal
from typing import List, Tuple

import pytest

from traffic_split.config import get_settings
from traffic_split.domain import Payment
from traffic_split.gateways import (
    Przelewy24PaymentGateway,
    TpayPaymentGateway,
    VoltPaymentGateway,
)


class ScriptedRandom:
    """Random source that returns pre-set draws and records requested ranges."""

    def __init__(self, *draws: int):
        self.draws = list(draws)
        self.calls: List[Tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.draws.pop(0)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep TRAFFIC_SPLIT_* variables and cached settings out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("TRAFFIC_SPLIT_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers added by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def scripted_random():
    """Factory for random sources with fixed draws."""
    return ScriptedRandom


@pytest.fixture
def make_payment():
    """Factory for card payments in PLN."""
    def _make(amount: str = "100.00") -> Payment:
        return Payment(
            amount=Decimal(amount),
            currency="PLN",
            payment_method="card",
        )
    return _make


@pytest.fixture
def four_gateways():
    """Four independent gateways; the first and last share a class."""
    return [
        Przelewy24PaymentGateway(),
        TpayPaymentGateway(),
        VoltPaymentGateway(),
        Przelewy24PaymentGateway(),
    ]
