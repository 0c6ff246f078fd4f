#!/usr/bin/env python3
"""
Basic Usage Example - P2P Trade Utilities

This script demonstrates the trade utilities against an in-memory wallet.
It shows how to:
- Build a TradeUtil from configuration
- Resolve the multisig and payout addresses of a trade
- Watch the addresses drop out of the available view once reserved
- Report the trade period and dispute date
- Render market, payment method and role labels

Run: python examples/basic_usage.py
"""

from datetime import datetime, timedelta, timezone

from p2p_trade_app.data.models import (
    AddressContext, AddressEntry, Contract, KeyPair, KeyRing, Offer,
    PaymentMethod, PubKeyRing, Trade,
)
from p2p_trade_app.logging.config import configure_logging
from p2p_trade_app.trade.util import TradeUtil
from p2p_trade_app.wallet.catalog import InMemoryAddressCatalog

MY_MULTI_SIG_KEY = bytes.fromhex("02" + "a1" * 32)
PEER_MULTI_SIG_KEY = bytes.fromhex("03" + "b2" * 32)


def create_sample_trade(me: PubKeyRing, peer: PubKeyRing) -> Trade:
    """Create a SEPA trade where the local party is the buying maker."""
    now = datetime.now(timezone.utc)
    sepa = PaymentMethod(id="SEPA", max_trade_period=timedelta(days=6))
    offer = Offer(offer_id="offer-42", currency_code="EUR", payment_method=sepa, country_code="DE")
    contract = Contract(
        offer_id=offer.offer_id,
        is_buyer_maker_and_seller_taker=True,
        maker_pub_key_ring=me,
        taker_pub_key_ring=peer,
        maker_payout_address_string="bc1qmypayout",
        taker_payout_address_string="bc1qpeerpayout",
        maker_multi_sig_pub_key=MY_MULTI_SIG_KEY,
        taker_multi_sig_pub_key=PEER_MULTI_SIG_KEY,
    )
    return Trade(
        trade_id="trade-42",
        offer=offer,
        contract=contract,
        max_trade_period_date=now + timedelta(days=4, hours=3),
        half_trade_period_date=now + timedelta(hours=27),
    )


def main() -> None:
    """Run the example."""
    configure_logging(level="INFO")

    me = PubKeyRing(signature_pub_key=b"my-sig", encryption_pub_key=b"my-enc")
    peer = PubKeyRing(signature_pub_key=b"peer-sig", encryption_pub_key=b"peer-enc")

    catalog = InMemoryAddressCatalog([
        AddressEntry("bc1qmultisig", KeyPair(MY_MULTI_SIG_KEY)),
        AddressEntry("bc1qmypayout", KeyPair(bytes.fromhex("02" + "c3" * 32))),
    ])
    trade_util = TradeUtil.create(catalog, KeyRing(pub_key_ring=me))
    trade = create_sample_trade(me, peer)

    print("📍 Trade addresses")
    print(f"  Wallet entries  : {len(catalog)}")
    print(f"  Known to wallet : {trade_util.get_trade_addresses(trade)}")
    print(f"  Available       : {trade_util.get_available_addresses(trade)}")

    catalog.set_context("bc1qmultisig", AddressContext.MULTI_SIG, offer_id="offer-42")
    print(f"  Multisig now    : {catalog.find_by_address('bc1qmultisig').context.value}")
    print(f"  After reserving : {trade_util.get_available_addresses(trade)}")

    print("\n⏱️  Trade period")
    print(f"  Max period      : {trade_util.get_max_trade_period(trade)}")
    print(f"  Remaining       : {trade_util.get_remaining_trade_duration_as_words(trade)}")
    print(f"  Used            : {trade_util.get_remaining_trade_duration_as_percentage(trade):.1%}")
    print(f"  Half period at  : {trade_util.get_half_trade_period_date(trade).isoformat()}")
    print(f"  Dispute from    : {trade_util.get_date_for_open_dispute(trade).isoformat()}")

    print("\n🏷️  Labels")
    print(f"  Market          : {trade_util.get_market_description(trade)}")
    print(f"  Payment method  : {trade_util.get_payment_method_name_with_country_code(trade)}")
    print(f"  My role         : {trade_util.get_role(True, True, 'EUR')}")
    print(f"  Altcoin role    : {trade_util.get_role(True, True, 'XMR')}")


if __name__ == "__main__":
    main()
