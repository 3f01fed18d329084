import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from trade_summary.aggregator import TradeAggregator
from trade_summary.models import SymbolSummary

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL_WIDTH = 3


def format_line(summary: SymbolSummary) -> str:
    return ",".join(str(v) for v in summary)


class Reporter:
    """Formats drained summaries, sorts them by symbol prefix and writes them out."""

    def __init__(self, symbol_width: int | None = DEFAULT_SYMBOL_WIDTH):
        if symbol_width is not None and symbol_width < 1:
            raise ValueError(f"symbol_width must be positive, got {symbol_width}")
        self.symbol_width = symbol_width

    def sort_key(self, line: str) -> str:
        if self.symbol_width is None:
            return line.split(",", 1)[0]
        return line[: self.symbol_width]

    def sort_lines(self, lines: Iterable[str]) -> list[str]:
        return sorted(lines, key=self.sort_key)

    def write(self, lines: Iterable[str], out: str | Path | TextIO) -> int:
        if isinstance(out, (str, Path)):
            if str(out) == "-":
                return self._write_stream(lines, sys.stdout)
            path = Path(out)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                count = self._write_stream(lines, f)
            logger.info(f"Wrote {count} summary lines -> {path}")
            return count
        return self._write_stream(lines, out)

    def _write_stream(self, lines: Iterable[str], stream: TextIO) -> int:
        count = 0
        for line in lines:
            stream.write(line + "\n")
            count += 1
        return count

    def report(self, aggregator: TradeAggregator, out: str | Path | TextIO) -> list[SymbolSummary]:
        """Drain the aggregator and write one sorted line per symbol.

        Returns the drained summaries in the order their lines were written.
        """
        pairs = [(format_line(s), s) for s in aggregator.drain()]
        pairs.sort(key=lambda p: self.sort_key(p[0]))
        self.write([line for line, _ in pairs], out)
        return [s for _, s in pairs]
