"""
P2P Trade App - Trade address resolution and trade period tracking

Resolves the multisig escrow and payout addresses of an active peer-to-peer
trade against a wallet's address entries, tracks the trade period and
dispute window, and renders trader role labels.
"""

__version__ = "0.1.0"
__author__ = "P2P Trade Team"
