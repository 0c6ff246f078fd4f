"""
Market and payment method descriptions for trade listings.

Both helpers accept None and render it as an empty string. A trade that is
passed in without the offer data they need is a caller bug and raises.
"""

from typing import Optional

from ..data.models import Offer, Trade
from ..errors import MissingCurrencyCodeError, MissingOfferError, MissingPaymentMethodError
from ..locale.currency import CurrencyClassifier, get_currency_pair
from ..locale.localizer import Localizer


def _require_offer(trade: Trade) -> Offer:
    if trade.offer is None:
        raise MissingOfferError("Trade has no offer", trade_id=trade.trade_id)
    return trade.offer


def market_description(trade: Optional[Trade], classifier: CurrencyClassifier,
                       localizer: Localizer) -> str:
    """Currency pair of the trade's market, e.g. "BTC/EUR" or "XMR/BTC"."""
    if trade is None:
        return ""

    offer = _require_offer(trade)
    if offer.currency_code is None:
        raise MissingCurrencyCodeError(
            "Trade offer has no currency code",
            trade_id=trade.trade_id,
            offer_id=offer.offer_id,
        )
    return get_currency_pair(offer.currency_code, localizer.base_currency_code, classifier)


def payment_method_name_with_country_code(trade: Optional[Trade], localizer: Localizer) -> str:
    """Short payment method name, suffixed with the offer's country code if it has one."""
    if trade is None:
        return ""

    offer = _require_offer(trade)
    if offer.payment_method is None:
        raise MissingPaymentMethodError(
            "Trade offer has no payment method",
            trade_id=trade.trade_id,
            offer_id=offer.offer_id,
        )

    name = localizer.get(f"{offer.payment_method.id}_SHORT")
    if offer.country_code is not None:
        name = f"{name} ({offer.country_code})"
    return name
