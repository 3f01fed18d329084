import logging
from typing import Iterable

from trade_summary.errors import MalformedRecord
from trade_summary.models import SymbolStatistic, SymbolSummary, TradeRecord

logger = logging.getLogger(__name__)

TIMESTAMP_MODULUS = 2**64


def _check_int(record, name: str) -> int:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecord(f"{name} must be an int, got {type(value).__name__}")
    return value


class TradeAggregator:
    """Folds trade records into one running statistic per symbol."""

    def __init__(self):
        self._stats: dict[str, SymbolStatistic] = {}

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._stats

    def get(self, symbol: str) -> SymbolStatistic | None:
        return self._stats.get(symbol)

    def fold(self, record: TradeRecord):
        try:
            symbol = record.symbol
            timestamp = _check_int(record, "timestamp")
            quantity = _check_int(record, "quantity")
            price = _check_int(record, "price")
        except AttributeError as e:
            raise MalformedRecord(f"not a trade record: {record!r}") from e

        if not isinstance(symbol, str) or not symbol:
            raise MalformedRecord(f"symbol must be a non-empty str, got {symbol!r}")
        if not 0 <= timestamp < TIMESTAMP_MODULUS:
            raise MalformedRecord(f"timestamp out of unsigned 64-bit range: {timestamp}")

        stat = self._stats.get(symbol)
        if stat is None:
            self._stats[symbol] = SymbolStatistic(
                last_timestamp=timestamp,
                max_trade_price=price,
                total_volume=quantity,
                weighted_price_sum=quantity * price,
            )
            logger.debug(f"New symbol: {symbol} @ {timestamp}")
            return

        stat.total_volume += quantity
        stat.weighted_price_sum += quantity * price
        stat.max_trade_price = max(stat.max_trade_price, price)

        # Unsigned subtraction: an earlier timestamp wraps to a huge gap
        gap = (timestamp - stat.last_timestamp) % TIMESTAMP_MODULUS
        stat.max_time_gap = max(stat.max_time_gap, gap)
        stat.last_timestamp = timestamp

    def fold_all(self, records: Iterable[TradeRecord]) -> int:
        count = 0
        for record in records:
            self.fold(record)
            count += 1
        return count

    def drain(self) -> list[SymbolSummary]:
        stats = self._stats
        self._stats = {}

        summaries = [
            SymbolSummary(
                symbol=symbol,
                max_time_gap=stat.max_time_gap,
                total_volume=stat.total_volume,
                average_price=stat.average_price,
                max_trade_price=stat.max_trade_price,
            )
            for symbol, stat in stats.items()
        ]
        for s in summaries:
            logger.debug(f"Drained: {s}")
        logger.info(f"Drained {len(summaries)} symbols")
        return summaries
