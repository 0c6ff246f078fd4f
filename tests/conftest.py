"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from p2p_trade_app.data.models import (
    AddressContext, AddressEntry, Contract, KeyPair, KeyRing, Offer,
    PaymentMethod, PubKeyRing, Trade,
)
from p2p_trade_app.wallet.catalog import InMemoryAddressCatalog

BUYER_MULTI_SIG_KEY = bytes.fromhex("02a1b2c3d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8f90")
SELLER_MULTI_SIG_KEY = bytes.fromhex("03ffeeddccbbaa99887766554433221100ffeeddccbbaa9988776655443322110f")

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def buyer_pub_key_ring() -> PubKeyRing:
    return PubKeyRing(signature_pub_key=b"buyer-sig", encryption_pub_key=b"buyer-enc")


@pytest.fixture
def seller_pub_key_ring() -> PubKeyRing:
    return PubKeyRing(signature_pub_key=b"seller-sig", encryption_pub_key=b"seller-enc")


@pytest.fixture
def buyer_key_ring(buyer_pub_key_ring) -> KeyRing:
    return KeyRing(pub_key_ring=buyer_pub_key_ring)


@pytest.fixture
def sepa() -> PaymentMethod:
    """SEPA payment method with a one day trade period."""
    return PaymentMethod(id="SEPA", max_trade_period=timedelta(seconds=86400))


@pytest.fixture
def offer(sepa) -> Offer:
    return Offer(offer_id="offer-001", currency_code="EUR", payment_method=sepa, country_code="DE")


@pytest.fixture
def contract(buyer_pub_key_ring, seller_pub_key_ring) -> Contract:
    """Contract where the buyer is the maker."""
    return Contract(
        offer_id="offer-001",
        is_buyer_maker_and_seller_taker=True,
        maker_pub_key_ring=buyer_pub_key_ring,
        taker_pub_key_ring=seller_pub_key_ring,
        maker_payout_address_string="1XYZ",
        taker_payout_address_string="1SELLERPAYOUT",
        maker_multi_sig_pub_key=BUYER_MULTI_SIG_KEY,
        taker_multi_sig_pub_key=SELLER_MULTI_SIG_KEY,
    )


@pytest.fixture
def trade(offer, contract) -> Trade:
    return Trade(trade_id="trade-001", offer=offer, contract=contract)


@pytest.fixture
def buyer_entries() -> list[AddressEntry]:
    """Wallet entries of the buyer side: multisig 1ABC and payout 1XYZ."""
    return [
        AddressEntry("1UNRELATED", KeyPair(bytes.fromhex("02" + "11" * 32)), AddressContext.AVAILABLE),
        AddressEntry("1ABC", KeyPair(BUYER_MULTI_SIG_KEY), AddressContext.AVAILABLE),
        AddressEntry("1XYZ", KeyPair(bytes.fromhex("02" + "22" * 32)), AddressContext.AVAILABLE),
    ]


@pytest.fixture
def catalog(buyer_entries) -> InMemoryAddressCatalog:
    return InMemoryAddressCatalog(buyer_entries)


@pytest.fixture
def fixed_clock():
    """Clock frozen at NOW."""
    return lambda: NOW


@pytest.fixture
def buyer_multi_sig_key() -> bytes:
    return BUYER_MULTI_SIG_KEY


@pytest.fixture
def seller_multi_sig_key() -> bytes:
    return SELLER_MULTI_SIG_KEY
