"""Tests for trade and wallet data models."""

import pytest
from dataclasses import FrozenInstanceError, replace

from p2p_trade_app.data.models import AddressContext, AddressEntry, KeyPair, TradeAddresses


class TestContractRoles:
    """Test Contract role derivation."""

    def test_buyer_is_maker(self, contract, buyer_pub_key_ring, seller_pub_key_ring):
        assert contract.buyer_pub_key_ring == buyer_pub_key_ring
        assert contract.seller_pub_key_ring == seller_pub_key_ring
        assert contract.buyer_payout_address_string == "1XYZ"
        assert contract.seller_payout_address_string == "1SELLERPAYOUT"
        assert contract.buyer_multi_sig_pub_key == contract.maker_multi_sig_pub_key
        assert contract.seller_multi_sig_pub_key == contract.taker_multi_sig_pub_key

    def test_buyer_is_taker(self, contract):
        contract = replace(contract, is_buyer_maker_and_seller_taker=False)

        assert contract.buyer_pub_key_ring == contract.taker_pub_key_ring
        assert contract.buyer_payout_address_string == "1SELLERPAYOUT"
        assert contract.seller_payout_address_string == "1XYZ"
        assert contract.buyer_multi_sig_pub_key == contract.taker_multi_sig_pub_key

    def test_is_my_role_buyer(self, contract, buyer_pub_key_ring, seller_pub_key_ring):
        assert contract.is_my_role_buyer(buyer_pub_key_ring) is True
        assert contract.is_my_role_buyer(seller_pub_key_ring) is False

    def test_is_my_role_maker(self, contract, buyer_pub_key_ring, seller_pub_key_ring):
        assert contract.is_my_role_maker(buyer_pub_key_ring) is True
        assert contract.is_my_role_maker(seller_pub_key_ring) is False

    def test_contract_is_immutable(self, contract):
        with pytest.raises(FrozenInstanceError):
            contract.maker_payout_address_string = "other"


class TestKeyPair:
    """Test KeyPair hex rendering."""

    def test_lower_case_hex(self):
        assert KeyPair(bytes([0xAB, 0x01, 0xFF])).public_key_as_hex == "ab01ff"


class TestTradeAddresses:
    """Test TradeAddresses pair."""

    def test_unpacks_as_pair(self):
        multisig, payout = TradeAddresses("1ABC", "1XYZ")

        assert (multisig, payout) == ("1ABC", "1XYZ")


class TestAddressEntry:
    """Test AddressEntry defaults."""

    def test_entry_defaults_to_available(self):
        entry = AddressEntry("1A", KeyPair(b"\x02"))

        assert entry.context == AddressContext.AVAILABLE
        assert entry.offer_id is None
