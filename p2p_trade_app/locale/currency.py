"""Currency classification and currency pair formatting."""

from typing import Iterable, Optional, Protocol

from ..config.defaults import ISO_FIAT_CURRENCY_CODES


class CurrencyClassifier(Protocol):
    """Decides whether a currency code is a fiat currency."""

    def is_fiat(self, currency_code: Optional[str]) -> bool:
        ...


class IsoCurrencyClassifier:
    """Classifies ISO 4217 national currency codes as fiat."""

    def __init__(self, fiat_currency_codes: Optional[Iterable[str]] = None) -> None:
        codes = ISO_FIAT_CURRENCY_CODES if fiat_currency_codes is None else fiat_currency_codes
        self._fiat_codes = frozenset(codes)

    def is_fiat(self, currency_code: Optional[str]) -> bool:
        if not currency_code:
            return False
        return currency_code in self._fiat_codes


def get_currency_pair(currency_code: str, base_currency_code: str,
                      classifier: CurrencyClassifier) -> str:
    """
    Format the market pair for a trade currency.

    Fiat markets are quoted as BASE/FIAT, other markets as CODE/BASE.
    """
    if classifier.is_fiat(currency_code):
        return f"{base_currency_code}/{currency_code}"
    return f"{currency_code}/{base_currency_code}"
