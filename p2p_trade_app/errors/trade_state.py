"""
Trade state violations for display helpers.

These exceptions signal that a caller passed a trade whose offer data is
incomplete. They are not recoverable: the caller has to fix its call site.
"""

from typing import Optional, Dict, Any


class TradeStateError(Exception):
    """Base class for trades that are in an invalid state for the requested operation."""

    def __init__(self, message: str, trade_id: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.trade_id = trade_id
        self.context = context or {}
        self.recoverable = False


class MissingOfferError(TradeStateError):
    """Trade has no offer attached."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_field = "offer"


class MissingCurrencyCodeError(TradeStateError):
    """Trade offer carries no currency code."""

    def __init__(self, message: str, offer_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.offer_id = offer_id
        self.missing_field = "currency_code"


class MissingPaymentMethodError(TradeStateError):
    """Trade offer carries no payment method."""

    def __init__(self, message: str, offer_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.offer_id = offer_id
        self.missing_field = "payment_method"
