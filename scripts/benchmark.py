#!/usr/bin/env python3
"""Address resolution benchmark over growing wallet catalogs."""

import sys
import time
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from p2p_trade_app.data.models import (
    AddressEntry, Contract, KeyPair, PubKeyRing, Trade,
)
from p2p_trade_app.trade.addresses import AddressResolver
from p2p_trade_app.wallet.catalog import InMemoryAddressCatalog

ME = PubKeyRing(signature_pub_key=b"me-sig", encryption_pub_key=b"me-enc")
PEER = PubKeyRing(signature_pub_key=b"peer-sig", encryption_pub_key=b"peer-enc")


def generate_entries(count: int) -> List[AddressEntry]:
    """Generate filler entries followed by the trade's two entries."""
    entries = [
        AddressEntry(f"bc1qfiller{i}", KeyPair(i.to_bytes(33, "big")))
        for i in range(count)
    ]
    entries.append(AddressEntry("bc1qmultisig", KeyPair(b"\x02" + b"\xaa" * 32)))
    entries.append(AddressEntry("bc1qpayout", KeyPair(b"\x02" + b"\xbb" * 32)))
    return entries


def create_trade() -> Trade:
    contract = Contract(
        offer_id="bench-offer",
        is_buyer_maker_and_seller_taker=True,
        maker_pub_key_ring=ME,
        taker_pub_key_ring=PEER,
        maker_payout_address_string="bc1qpayout",
        taker_payout_address_string="bc1qpeer",
        maker_multi_sig_pub_key=b"\x02" + b"\xaa" * 32,
    )
    return Trade(trade_id="bench-trade", contract=contract)


def benchmark_resolution(entry_count: int, iterations: int = 200) -> float:
    """Average resolution time in milliseconds."""
    resolver = AddressResolver(InMemoryAddressCatalog(generate_entries(entry_count)))
    trade = create_trade()

    start_time = time.perf_counter()
    for _ in range(iterations):
        result = resolver.resolve_available_trade_addresses(trade, ME)
        assert result is not None
    elapsed = time.perf_counter() - start_time

    return elapsed / iterations * 1000


def main():
    """Run benchmarks."""
    print("🚀 Running address resolution benchmarks...")

    for entry_count in [10, 100, 1000, 10000]:
        avg_ms = benchmark_resolution(entry_count)
        print(f"  {entry_count:>6} entries: {avg_ms:.3f} ms per resolution")

    print("\n🎉 Benchmark complete!")


if __name__ == "__main__":
    main()
