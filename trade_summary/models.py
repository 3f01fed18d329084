from dataclasses import dataclass, astuple


@dataclass(frozen=True)
class TradeRecord:
    timestamp: int  # Unsigned 64-bit, non-decreasing per symbol
    symbol: str
    quantity: int
    price: int


@dataclass
class SymbolStatistic:
    last_timestamp: int
    max_trade_price: int
    total_volume: int
    weighted_price_sum: int  # sum(quantity * price), divided only at report time
    max_time_gap: int = 0

    @property
    def average_price(self) -> int:
        return self.weighted_price_sum // self.total_volume


@dataclass(frozen=True)
class SymbolSummary:
    symbol: str
    max_time_gap: int
    total_volume: int
    average_price: int
    max_trade_price: int

    def __iter__(self):
        return iter(astuple(self))
