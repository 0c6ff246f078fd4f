"""Trader role labels."""

from ..locale.currency import CurrencyClassifier
from ..locale.localizer import Localizer


class RoleDescriber:
    """Renders labels such as "BTC buyer as maker" for a trader's role."""

    def __init__(self, classifier: CurrencyClassifier, localizer: Localizer) -> None:
        self.classifier = classifier
        self.localizer = localizer

    def describe_role(self, is_buyer_maker_and_seller_taker: bool, is_maker: bool,
                      currency_code: str) -> str:
        """
        Describe a trader's role.

        Fiat trades name the role in terms of the base currency. Other trades
        name it in terms of the traded currency, with buyer and seller swapped.
        """
        buyer = self.localizer.get("shared.buyer")
        seller = self.localizer.get("shared.seller")

        if self.classifier.is_fiat(currency_code):
            currency_term = self.localizer.base_currency_code
            if is_buyer_maker_and_seller_taker:
                return (self._as_maker(currency_term, buyer) if is_maker
                        else self._as_taker(currency_term, seller))
            return (self._as_maker(currency_term, seller) if is_maker
                    else self._as_taker(currency_term, buyer))

        currency_term = currency_code
        if is_buyer_maker_and_seller_taker:
            return (self._as_maker(currency_term, seller) if is_maker
                    else self._as_taker(currency_term, buyer))
        return (self._as_maker(currency_term, buyer) if is_maker
                else self._as_taker(currency_term, seller))

    def _as_maker(self, currency_term: str, role: str) -> str:
        return self.localizer.get("formatter.asMaker", currency_term, role)

    def _as_taker(self, currency_term: str, role: str) -> str:
        return self.localizer.get("formatter.asTaker", currency_term, role)
