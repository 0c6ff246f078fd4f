"""
Trade address resolution.

Finds the multisig escrow address and the payout address of a trade by
matching the local party's contract data against the wallet's address
entries. Discovery runs against every entry the wallet has tracked; the
available view is only used to gate actions on addresses that are still
usable.
"""

from typing import Optional

from ..data.models import PubKeyRing, Trade, TradeAddresses
from ..logging.config import get_resolver_logger, log_lookup_miss
from ..wallet.catalog import WalletAddressCatalog

logger = get_resolver_logger(__name__)


class AddressResolver:
    """Resolves <MULTI_SIG, TRADE_PAYOUT> addresses for a trade."""

    def __init__(self, catalog: WalletAddressCatalog) -> None:
        self.catalog = catalog

    def resolve_trade_addresses(self, trade: Trade,
                                pub_key_ring: PubKeyRing) -> Optional[TradeAddresses]:
        """
        Resolve the trade's addresses if the wallet knows them.

        Args:
            trade: Trade being queried
            pub_key_ring: Public key ring of the local party

        Returns:
            TradeAddresses, or None if the contract, the role's multisig key or
            either wallet entry is missing
        """
        contract = trade.contract
        if contract is None:
            log_lookup_miss(logger, trade.trade_id, "contract", "trade has no contract yet")
            return None

        is_my_role_buyer = contract.is_my_role_buyer(pub_key_ring)
        multi_sig_pub_key = (contract.buyer_multi_sig_pub_key if is_my_role_buyer
                             else contract.seller_multi_sig_pub_key)
        if multi_sig_pub_key is None:
            log_lookup_miss(logger, trade.trade_id, "multisig_pub_key",
                            "contract has no multisig key for my role",
                            {"is_buyer": is_my_role_buyer})
            return None

        multi_sig_pub_key_hex = multi_sig_pub_key.hex()
        multi_sig_entry = next(
            (e for e in self.catalog.all_entries()
             if e.key_pair.public_key_as_hex == multi_sig_pub_key_hex),
            None
        )
        if multi_sig_entry is None:
            log_lookup_miss(logger, trade.trade_id, "multisig_entry",
                            "no wallet entry for multisig key",
                            {"pub_key": multi_sig_pub_key_hex})
            return None

        payout_address = (contract.buyer_payout_address_string if is_my_role_buyer
                          else contract.seller_payout_address_string)
        if not any(e.address_string == payout_address for e in self.catalog.all_entries()):
            log_lookup_miss(logger, trade.trade_id, "payout_entry",
                            "no wallet entry for payout address",
                            {"payout_address": payout_address})
            return None

        return TradeAddresses(multi_sig_entry.address_string, payout_address)

    def resolve_available_trade_addresses(self, trade: Trade,
                                          pub_key_ring: PubKeyRing) -> Optional[TradeAddresses]:
        """
        Resolve the trade's addresses only if both are still available.

        Returns:
            The same pair as resolve_trade_addresses, or None if either
            address is missing from the wallet's available entries
        """
        addresses = self.resolve_trade_addresses(trade, pub_key_ring)
        if addresses is None:
            return None

        available = self.catalog.available_entries()

        if not any(e.address_string == addresses.multisig_address for e in available):
            log_lookup_miss(logger, trade.trade_id, "available_multisig",
                            "multisig address is not available",
                            {"address": addresses.multisig_address})
            return None

        if not any(e.address_string == addresses.payout_address for e in available):
            log_lookup_miss(logger, trade.trade_id, "available_payout",
                            "payout address is not available",
                            {"address": addresses.payout_address})
            return None

        return addresses
