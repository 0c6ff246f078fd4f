"""
String table lookup with positional placeholders.

Templates use ``{0}``, ``{1}`` placeholders that are filled from the
positional arguments passed to ``Localizer.get``.
"""

from typing import Mapping, Optional

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_STRINGS: dict[str, str] = {
    "formatter.asMaker": "{0} {1} as maker",
    "formatter.asTaker": "{0} {1} as taker",
    "shared.buyer": "buyer",
    "shared.seller": "seller",
    "time.day": "day",
    "time.days": "days",
    "time.hour": "hour",
    "time.hours": "hours",
    "time.minute": "minute",
    "time.minutes": "minutes",
    "time.second": "second",
    "time.seconds": "seconds",
    # Payment method short names
    "SEPA_SHORT": "SEPA",
    "SEPA_INSTANT_SHORT": "SEPA Instant",
    "NATIONAL_BANK_SHORT": "National banks",
    "SAME_BANK_SHORT": "Same bank",
    "SPECIFIC_BANKS_SHORT": "Specific banks",
    "CASH_DEPOSIT_SHORT": "Cash Deposit",
    "F2F_SHORT": "F2F",
    "ZELLE_SHORT": "Zelle",
    "REVOLUT_SHORT": "Revolut",
    "BLOCK_CHAINS_SHORT": "Altcoins",
    "BLOCK_CHAINS_INSTANT_SHORT": "Altcoins Instant",
}


class Localizer:
    """Resolves string keys against a string table."""

    def __init__(self, base_currency_code: str = "BTC",
                 strings: Optional[Mapping[str, str]] = None) -> None:
        self._base_currency_code = base_currency_code
        self._strings = {**DEFAULT_STRINGS, **(strings or {})}

    @property
    def base_currency_code(self) -> str:
        return self._base_currency_code

    def get(self, key: str, *args: str) -> str:
        """
        Resolve a key and fill its positional placeholders.

        Missing keys are logged and the key itself is returned, so a gap in
        the string table shows up in the UI instead of failing the caller.
        Templates whose placeholders do not match the arguments are logged
        and returned unformatted.
        """
        template = self._strings.get(key)
        if template is None:
            logger.warning("Missing string resource", key=key)
            return key

        try:
            return template.format(*args)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning("Malformed string template", key=key, template=template, error=str(e))
            return template
