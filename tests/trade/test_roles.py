"""Tests for trader role labels."""

import pytest

from p2p_trade_app.locale.currency import IsoCurrencyClassifier
from p2p_trade_app.locale.localizer import Localizer
from p2p_trade_app.trade.roles import RoleDescriber

EXPECTED_ROLES = [
    # (is_buyer_maker_and_seller_taker, is_maker, currency_code, label)
    (True, True, "USD", "BTC buyer as maker"),
    (True, False, "USD", "BTC seller as taker"),
    (False, True, "USD", "BTC seller as maker"),
    (False, False, "USD", "BTC buyer as taker"),
    (True, True, "XMR", "XMR seller as maker"),
    (True, False, "XMR", "XMR buyer as taker"),
    (False, True, "XMR", "XMR buyer as maker"),
    (False, False, "XMR", "XMR seller as taker"),
]


@pytest.fixture
def describer() -> RoleDescriber:
    return RoleDescriber(IsoCurrencyClassifier(), Localizer(base_currency_code="BTC"))


class TestDescribeRole:
    """Test RoleDescriber.describe_role."""

    @pytest.mark.parametrize("is_buyer_maker, is_maker, currency_code, expected", EXPECTED_ROLES)
    def test_role_table(self, describer, is_buyer_maker, is_maker, currency_code, expected):
        assert describer.describe_role(is_buyer_maker, is_maker, currency_code) == expected

    def test_fiat_and_non_fiat_pair_nouns_differently(self, describer):
        assert describer.describe_role(True, True, "USD") != describer.describe_role(True, True, "XMR")
        assert "buyer" in describer.describe_role(True, True, "USD")
        assert "seller" in describer.describe_role(True, True, "XMR")

    def test_uses_injected_collaborators(self):
        """Fake classifier and string table drive the label."""

        class EverythingFiat:
            def is_fiat(self, currency_code):
                return True

        localizer = Localizer(
            base_currency_code="LTC",
            strings={
                "formatter.asMaker": "maker[{0}|{1}]",
                "formatter.asTaker": "taker[{0}|{1}]",
                "shared.buyer": "B",
                "shared.seller": "S",
            },
        )
        describer = RoleDescriber(EverythingFiat(), localizer)

        assert describer.describe_role(True, True, "XMR") == "maker[LTC|B]"
        assert describer.describe_role(False, False, "XMR") == "taker[LTC|B]"
        assert describer.describe_role(True, False, "XMR") == "taker[LTC|S]"
