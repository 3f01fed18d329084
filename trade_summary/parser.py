import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from trade_summary.errors import InvalidTradeLine
from trade_summary.models import TradeRecord

logger = logging.getLogger(__name__)

DEFAULT_NUM_FIELDS = 4
MAX_TIMESTAMP = 2**64 - 1

_WHITESPACE_RE = re.compile(r"\s+")
_INT_RE = re.compile(r"[+-]?\d+")


def _parse_int(token: str, name: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"{name} is not an integer: {token!r}")
    return int(token)


class TradeParser:
    """Turns `timestamp,symbol,quantity,price` lines into validated TradeRecords."""

    def __init__(self, num_fields: int = DEFAULT_NUM_FIELDS, strict: bool = True, encoding: str = "utf-8"):
        if num_fields < DEFAULT_NUM_FIELDS:
            raise ValueError(f"num_fields must be at least {DEFAULT_NUM_FIELDS}, got {num_fields}")
        self.num_fields = num_fields
        self.strict = strict
        self.encoding = encoding
        self.parsed = 0
        self.skipped = 0

    def parse_line(self, line: str, line_number: int | None = None) -> TradeRecord:
        compact = _WHITESPACE_RE.sub("", line)
        tokens = compact.split(",")

        if len(tokens) < self.num_fields:
            raise InvalidTradeLine(
                f"number of entries in the trade are less than {self.num_fields}",
                line_number,
                line,
            )

        ts_raw, symbol, qty_raw, price_raw = tokens[:4]
        try:
            timestamp = _parse_int(ts_raw, "timestamp")
            quantity = _parse_int(qty_raw, "quantity")
            price = _parse_int(price_raw, "price")
        except ValueError as e:
            raise InvalidTradeLine(str(e), line_number, line) from e

        if not symbol:
            raise InvalidTradeLine("symbol is empty", line_number, line)
        if not 0 <= timestamp <= MAX_TIMESTAMP:
            raise InvalidTradeLine(f"timestamp out of range: {timestamp}", line_number, line)
        if quantity <= 0 or price <= 0:
            raise InvalidTradeLine("price or quantity is less than or equal to 0", line_number, line)

        return TradeRecord(timestamp=timestamp, symbol=symbol, quantity=quantity, price=price)

    def decode_line(self, raw: bytes, line_number: int | None = None) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise InvalidTradeLine(f"not valid {self.encoding}: {e.reason}", line_number, repr(raw)) from e

    def iter_records(self, lines: Iterable[str | bytes]) -> Iterator[TradeRecord]:
        """Lazily parse lines, given as text or as raw bytes decoded one line at a time."""
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                if isinstance(line, bytes):
                    line = self.decode_line(line, line_number)
                record = self.parse_line(line, line_number)
            except InvalidTradeLine as e:
                if self.strict:
                    raise
                self.skipped += 1
                logger.warning(f"Skipping invalid trade: {e}")
                continue
            self.parsed += 1
            yield record

    def parse_file(self, path: str | Path) -> Iterator[TradeRecord]:
        with open(path, "rb") as f:
            yield from self.iter_records(f)
        logger.info(f"Parsed {self.parsed} trades from {path} ({self.skipped} skipped)")
