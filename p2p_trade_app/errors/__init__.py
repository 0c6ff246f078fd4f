"""
Error classification for trade utility operations.

Lookup failures are reported as absent results, never raised. The exceptions
here cover programming-contract violations (a trade handed to a display
helper in a state it cannot be displayed in) and invalid configuration.
"""

from .configuration import ConfigurationError
from .trade_state import (
    TradeStateError,
    MissingOfferError,
    MissingCurrencyCodeError,
    MissingPaymentMethodError,
)

__all__ = [
    # Trade State Violations
    "TradeStateError",
    "MissingOfferError",
    "MissingCurrencyCodeError",
    "MissingPaymentMethodError",
    # Configuration
    "ConfigurationError",
]
