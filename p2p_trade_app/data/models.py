"""
Canonical data models for trades, contracts and wallet address entries.

This module defines immutable data structures for the trade snapshot the
utilities read from. Fields that only become known later in the trade
lifecycle are Optional and stay None until then.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class PubKeyRing:
    """Public key material identifying one trading peer."""
    signature_pub_key: bytes
    encryption_pub_key: bytes


@dataclass(frozen=True)
class KeyRing:
    """Local identity. Only the public part is needed here."""
    pub_key_ring: PubKeyRing


@dataclass(frozen=True)
class PaymentMethod:
    """Payment method with its maximum trade period."""
    id: str
    max_trade_period: timedelta


@dataclass(frozen=True)
class Offer:
    """Offer a trade was taken from."""
    offer_id: str
    currency_code: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    country_code: Optional[str] = None


@dataclass(frozen=True)
class Contract:
    """Signed trade contract, immutable once both parties signed."""
    offer_id: str
    is_buyer_maker_and_seller_taker: bool
    maker_pub_key_ring: PubKeyRing
    taker_pub_key_ring: PubKeyRing
    maker_payout_address_string: str
    taker_payout_address_string: str
    maker_multi_sig_pub_key: Optional[bytes] = None
    taker_multi_sig_pub_key: Optional[bytes] = None

    @property
    def buyer_pub_key_ring(self) -> PubKeyRing:
        return self.maker_pub_key_ring if self.is_buyer_maker_and_seller_taker else self.taker_pub_key_ring

    @property
    def seller_pub_key_ring(self) -> PubKeyRing:
        return self.taker_pub_key_ring if self.is_buyer_maker_and_seller_taker else self.maker_pub_key_ring

    @property
    def buyer_multi_sig_pub_key(self) -> Optional[bytes]:
        return self.maker_multi_sig_pub_key if self.is_buyer_maker_and_seller_taker else self.taker_multi_sig_pub_key

    @property
    def seller_multi_sig_pub_key(self) -> Optional[bytes]:
        return self.taker_multi_sig_pub_key if self.is_buyer_maker_and_seller_taker else self.maker_multi_sig_pub_key

    @property
    def buyer_payout_address_string(self) -> str:
        if self.is_buyer_maker_and_seller_taker:
            return self.maker_payout_address_string
        return self.taker_payout_address_string

    @property
    def seller_payout_address_string(self) -> str:
        if self.is_buyer_maker_and_seller_taker:
            return self.taker_payout_address_string
        return self.maker_payout_address_string

    def is_my_role_buyer(self, my_pub_key_ring: PubKeyRing) -> bool:
        """True if the given key ring belongs to the buyer of this contract."""
        return self.buyer_pub_key_ring == my_pub_key_ring

    def is_my_role_maker(self, my_pub_key_ring: PubKeyRing) -> bool:
        """True if the given key ring belongs to the maker of this contract."""
        return self.maker_pub_key_ring == my_pub_key_ring


@dataclass(frozen=True)
class Trade:
    """Snapshot of one trade as seen by the trade utilities."""
    trade_id: str
    offer: Optional[Offer] = None
    contract: Optional[Contract] = None
    max_trade_period_date: Optional[datetime] = None   # Deadline, UTC
    half_trade_period_date: Optional[datetime] = None  # Midpoint marker, UTC


class AddressContext(str, Enum):
    """Purpose a wallet address entry is currently reserved for."""
    ARBITRATOR = "arbitrator"
    AVAILABLE = "available"
    OFFER_FUNDING = "offer_funding"
    RESERVED_FOR_TRADE = "reserved_for_trade"
    MULTI_SIG = "multi_sig"
    TRADE_PAYOUT = "trade_payout"


@dataclass(frozen=True)
class KeyPair:
    """Key pair backing a wallet address. Only the public key is kept."""
    public_key: bytes

    @property
    def public_key_as_hex(self) -> str:
        """Lower case hex rendering of the public key."""
        return self.public_key.hex()


@dataclass(frozen=True)
class AddressEntry:
    """One wallet-tracked address."""
    address_string: str
    key_pair: KeyPair
    context: AddressContext = AddressContext.AVAILABLE
    offer_id: Optional[str] = None


class TradeAddresses(NamedTuple):
    """Multisig escrow address and payout address of a trade."""
    multisig_address: str
    payout_address: str
