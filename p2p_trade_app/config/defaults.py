"""Default configuration parameters for the trade utilities."""

from dataclasses import dataclass, field

# ISO 4217 national currencies accepted as fiat trade currencies
ISO_FIAT_CURRENCY_CODES: frozenset[str] = frozenset({
    "AED", "ARS", "AUD", "BAM", "BDT", "BGN", "BHD", "BOB", "BRL", "BYN",
    "CAD", "CHF", "CLP", "CNY", "COP", "CRC", "CZK", "DKK", "DOP", "DZD",
    "EGP", "EUR", "GBP", "GEL", "GHS", "GTQ", "HKD", "HNL", "HRK", "HUF",
    "IDR", "ILS", "INR", "IQD", "IRR", "ISK", "JOD", "JPY", "KES", "KRW",
    "KWD", "KZT", "LBP", "LKR", "MAD", "MDL", "MKD", "MXN", "MYR", "NGN",
    "NIO", "NOK", "NPR", "NZD", "OMR", "PAB", "PEN", "PHP", "PKR", "PLN",
    "PYG", "QAR", "RON", "RSD", "RUB", "SAR", "SEK", "SGD", "THB", "TND",
    "TRY", "TWD", "TZS", "UAH", "UGX", "USD", "UYU", "VES", "VND", "XAF",
    "XOF", "ZAR",
})


@dataclass(frozen=True)
class LocaleParams:
    """Localization parameters."""
    base_currency_code: str = "BTC"                  # Currency every trade settles in
    language: str = "en"                             # Selects strings_<language>.yaml


@dataclass(frozen=True)
class CurrencyParams:
    """Currency classification parameters."""
    fiat_currency_codes: frozenset[str] = field(default_factory=lambda: ISO_FIAT_CURRENCY_CODES)


@dataclass(frozen=True)
class DurationFormatParams:
    """Human readable duration formatting parameters."""
    show_seconds: bool = False
    show_zero_values: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    locale: LocaleParams
    currency: CurrencyParams
    duration_format: DurationFormatParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        locale=LocaleParams(),
        currency=CurrencyParams(),
        duration_format=DurationFormatParams(),
    )
