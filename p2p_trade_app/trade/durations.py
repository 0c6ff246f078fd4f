"""
Trade period tracking.

Computes how much of a trade's maximum period is left, how much has been
used, and from when on a dispute may be opened.
"""

from datetime import datetime, timedelta
from typing import Optional

from ..data.models import Trade
from ..errors import MissingPaymentMethodError
from ..utils.time import Clock, DurationFormatter, clamp_non_negative, utc_now


class DurationTracker:
    """Trade period calculations against an injected clock."""

    def __init__(self, clock: Clock = utc_now,
                 formatter: Optional[DurationFormatter] = None) -> None:
        self.clock = clock
        self.formatter = formatter or DurationFormatter()

    def max_trade_period(self, trade: Trade) -> timedelta:
        """Maximum period of the trade's payment method, zero without an offer."""
        offer = trade.offer
        if offer is None:
            return timedelta(0)
        if offer.payment_method is None:
            raise MissingPaymentMethodError(
                "Trade offer has no payment method",
                trade_id=trade.trade_id,
                offer_id=offer.offer_id,
            )
        return offer.payment_method.max_trade_period

    def remaining_duration(self, trade: Trade) -> timedelta:
        """
        Time left until the trade deadline.

        Negative once the deadline has passed. Before a deadline is recorded
        the full maximum period is reported.
        """
        return self._remaining_at(trade, self.clock())

    def remaining_duration_as_percentage(self, trade: Trade) -> float:
        """
        Fraction of the trade period already used.

        Not clamped: exceeds 1.0 after the deadline.
        """
        max_period = self.max_trade_period(trade)
        remaining = self.remaining_duration(trade)
        if max_period != timedelta(0):
            return 1 - remaining / max_period
        return 0.0

    def remaining_duration_as_words(self, trade: Trade) -> str:
        return self.formatter.format(clamp_non_negative(self.remaining_duration(trade)))

    def half_trade_period_date(self, trade: Optional[Trade]) -> Optional[datetime]:
        return trade.half_trade_period_date if trade is not None else None

    def date_for_open_dispute(self, trade: Trade) -> datetime:
        """Earliest date a dispute may be opened; in the past once the deadline passed."""
        now = self.clock()
        return now + self._remaining_at(trade, now)

    def _remaining_at(self, trade: Trade, now: datetime) -> timedelta:
        if trade.max_trade_period_date is not None:
            return trade.max_trade_period_date - now
        return self.max_trade_period(trade)
