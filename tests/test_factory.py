"""Tests for building routers from configuration."""

import random

import pytest

from traffic_split.config import Settings
from traffic_split.core import build_entries, build_router
from traffic_split.exceptions import InvalidWeightError, InvalidWeightSumError, UnknownGatewayError
from traffic_split.gateways import (
    PayPalPaymentGateway,
    Przelewy24PaymentGateway,
    TpayPaymentGateway,
    VoltPaymentGateway,
)


class TestBuildRouter:
    """Test build_router() and build_entries()."""

    @pytest.mark.unit
    def test_default_split(self):
        """Test that default settings give one gateway per adapter at 25%."""
        router = build_router(Settings())

        assert router.table.weights == [25, 25, 25, 25]
        assert [type(gateway) for gateway in router.gateways] == [
            PayPalPaymentGateway,
            Przelewy24PaymentGateway,
            TpayPaymentGateway,
            VoltPaymentGateway,
        ]

    @pytest.mark.unit
    def test_duplicate_codes_get_separate_instances(self):
        entries = build_entries([("tpay_payment_gateway", 50), ("tpay_payment_gateway", 50)])

        assert entries[0].gateway is not entries[1].gateway
        assert [entry.weight for entry in entries] == [50, 50]

    @pytest.mark.unit
    def test_override_pairs(self):
        """Test that explicit pairs win over settings."""
        router = build_router(
            Settings(),
            gateway_weights=[("volt_payment_gateway", 90), ("paypal_payment_gateway", 10)],
        )

        assert router.table.weights == [90, 10]
        assert isinstance(router.gateways[0], VoltPaymentGateway)

    @pytest.mark.unit
    def test_uses_cached_settings_by_default(self, monkeypatch):
        monkeypatch.setenv("TRAFFIC_SPLIT_GATEWAY_WEIGHTS", "paypal_payment_gateway=100")

        router = build_router()

        assert router.table.weights == [100]

    @pytest.mark.unit
    def test_unknown_gateway(self):
        with pytest.raises(UnknownGatewayError):
            build_router(Settings(gateway_weights="paypal_payment_gateway=50,adyen_payment_gateway=50"))

    @pytest.mark.unit
    def test_invalid_sum(self):
        with pytest.raises(InvalidWeightSumError, match="you provided 90"):
            build_router(Settings(gateway_weights="paypal_payment_gateway=50,volt_payment_gateway=40"))

    @pytest.mark.unit
    def test_non_positive_weight(self):
        with pytest.raises(InvalidWeightError):
            build_router(Settings(gateway_weights="paypal_payment_gateway=100,volt_payment_gateway=0"))

    @pytest.mark.unit
    def test_seeded_routers_are_reproducible(self, make_payment):
        """Test that the same random_seed gives the same split."""
        settings = Settings(random_seed=1234)
        first, second = build_router(settings), build_router(settings)

        for _ in range(300):
            first.route(make_payment())
            second.route(make_payment())

        assert first.traffic_loads() == second.traffic_loads()

    @pytest.mark.unit
    def test_explicit_random_source_wins(self, scripted_random, make_payment):
        """Test that an injected source overrides the seed."""
        source = scripted_random(100)
        router = build_router(Settings(random_seed=1), random_source=source)

        router.route(make_payment())

        assert source.calls == [(1, 100)]
        assert router.traffic_loads() == [0, 0, 0, 1]

    @pytest.mark.unit
    def test_seeded_router_matches_plain_random(self, make_payment):
        """Test that a seed behaves exactly like random.Random(seed)."""
        seeded = build_router(Settings(random_seed=42))
        manual = build_router(Settings(), random_source=random.Random(42))

        for _ in range(100):
            seeded.route(make_payment())
            manual.route(make_payment())

        assert seeded.traffic_loads() == manual.traffic_loads()
