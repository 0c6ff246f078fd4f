"""
Wallet address entry catalog.

The catalog exposes two read views: every entry the wallet has ever tracked,
and the entries currently available for use. Both keep the wallet's own
ordering; lookups against them scan linearly.
"""

from dataclasses import replace
from typing import Iterable, Optional, Protocol, Sequence

from ..data.models import AddressContext, AddressEntry


class WalletAddressCatalog(Protocol):
    """Read-only view over a wallet's address entries."""

    def all_entries(self) -> Sequence[AddressEntry]:
        ...

    def available_entries(self) -> Sequence[AddressEntry]:
        ...


class InMemoryAddressCatalog:
    """Insertion-ordered catalog kept in memory."""

    def __init__(self, entries: Optional[Iterable[AddressEntry]] = None) -> None:
        self._entries: list[AddressEntry] = list(entries or [])

    def all_entries(self) -> Sequence[AddressEntry]:
        """Immutable snapshot of every tracked entry."""
        return tuple(self._entries)

    def available_entries(self) -> Sequence[AddressEntry]:
        """Entries whose context is AVAILABLE."""
        return tuple(e for e in self._entries if e.context == AddressContext.AVAILABLE)

    def add_entry(self, entry: AddressEntry) -> None:
        """Track a new entry at the end of the catalog."""
        self._entries.append(entry)

    def find_by_address(self, address_string: str) -> Optional[AddressEntry]:
        """First entry with the given address, None if untracked."""
        return next((e for e in self._entries if e.address_string == address_string), None)

    def set_context(self, address_string: str, context: AddressContext,
                    offer_id: Optional[str] = None) -> bool:
        """
        Move an entry to a new context, keeping its catalog position.

        Returns:
            True if an entry was updated, False if the address is untracked
        """
        for index, entry in enumerate(self._entries):
            if entry.address_string == address_string:
                self._entries[index] = replace(entry, context=context, offer_id=offer_id)
                return True
        return False

    def __len__(self) -> int:
        return len(self._entries)
