"""
Trade utility facade.

Bundles the wallet catalog and the local key ring with the address resolver,
trade period tracker and label helpers, so callers can query a trade without
wiring the collaborators themselves.
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import structlog

from ..config.loader import ConfigLoader
from ..config.validation import ConfigValidator
from ..data.models import KeyRing, Trade, TradeAddresses
from ..errors import ConfigurationError
from ..locale.currency import CurrencyClassifier, IsoCurrencyClassifier
from ..locale.localizer import Localizer
from ..utils.time import Clock, DurationFormatter, utc_now
from ..wallet.catalog import WalletAddressCatalog
from .addresses import AddressResolver
from .descriptions import market_description, payment_method_name_with_country_code
from .durations import DurationTracker
from .roles import RoleDescriber

logger = structlog.get_logger(__name__)


class TradeUtil:
    """Trade utility methods for one wallet and one local identity."""

    def __init__(
        self,
        catalog: WalletAddressCatalog,
        key_ring: KeyRing,
        localizer: Optional[Localizer] = None,
        classifier: Optional[CurrencyClassifier] = None,
        clock: Clock = utc_now,
        formatter: Optional[DurationFormatter] = None,
    ) -> None:
        self.key_ring = key_ring
        self.localizer = localizer or Localizer()
        self.classifier = classifier or IsoCurrencyClassifier()

        self.address_resolver = AddressResolver(catalog)
        self.duration_tracker = DurationTracker(
            clock=clock,
            formatter=formatter or DurationFormatter(self.localizer),
        )
        self.role_describer = RoleDescriber(self.classifier, self.localizer)

    @classmethod
    def create(
        cls,
        catalog: WalletAddressCatalog,
        key_ring: KeyRing,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        clock: Optional[Clock] = None,
    ) -> "TradeUtil":
        """
        Build a TradeUtil from configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(config_dir)
        merged = loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid trade utility configuration", errors=errors)

        config = ConfigLoader.build_config(merged)
        localizer = Localizer(
            base_currency_code=config.locale.base_currency_code,
            strings=loader.load_strings(config.locale.language),
        )
        formatter = DurationFormatter(
            localizer,
            show_seconds=config.duration_format.show_seconds,
            show_zero_values=config.duration_format.show_zero_values,
        )

        logger.info(
            "Trade utilities initialized",
            base_currency_code=config.locale.base_currency_code,
            language=config.locale.language,
        )

        return cls(
            catalog,
            key_ring,
            localizer=localizer,
            classifier=IsoCurrencyClassifier(config.currency.fiat_currency_codes),
            clock=clock or utc_now,
            formatter=formatter,
        )

    def get_available_addresses(self, trade: Trade) -> Optional[TradeAddresses]:
        """Returns <MULTI_SIG, TRADE_PAYOUT> if and only if both are AVAILABLE, otherwise None."""
        return self.address_resolver.resolve_available_trade_addresses(
            trade, self.key_ring.pub_key_ring)

    def get_trade_addresses(self, trade: Trade) -> Optional[TradeAddresses]:
        """Returns <MULTI_SIG, TRADE_PAYOUT> if they're known by the wallet, otherwise None."""
        return self.address_resolver.resolve_trade_addresses(trade, self.key_ring.pub_key_ring)

    def get_remaining_trade_duration(self, trade: Trade) -> timedelta:
        return self.duration_tracker.remaining_duration(trade)

    def get_max_trade_period(self, trade: Trade) -> timedelta:
        return self.duration_tracker.max_trade_period(trade)

    def get_remaining_trade_duration_as_percentage(self, trade: Trade) -> float:
        return self.duration_tracker.remaining_duration_as_percentage(trade)

    def get_remaining_trade_duration_as_words(self, trade: Trade) -> str:
        return self.duration_tracker.remaining_duration_as_words(trade)

    def get_half_trade_period_date(self, trade: Optional[Trade]) -> Optional[datetime]:
        return self.duration_tracker.half_trade_period_date(trade)

    def get_date_for_open_dispute(self, trade: Trade) -> datetime:
        return self.duration_tracker.date_for_open_dispute(trade)

    def get_market_description(self, trade: Optional[Trade]) -> str:
        return market_description(trade, self.classifier, self.localizer)

    def get_payment_method_name_with_country_code(self, trade: Optional[Trade]) -> str:
        return payment_method_name_with_country_code(trade, self.localizer)

    def get_role(self, is_buyer_maker_and_seller_taker: bool, is_maker: bool,
                 currency_code: str) -> str:
        """Returns a string describing a trader's role."""
        return self.role_describer.describe_role(is_buyer_maker_and_seller_taker, is_maker, currency_code)
