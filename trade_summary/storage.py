import logging
from dataclasses import asdict
from pathlib import Path

import pandas as pd

from trade_summary.models import SymbolSummary

logger = logging.getLogger(__name__)

COLUMNS = ["symbol", "max_time_gap", "total_volume", "average_price", "max_trade_price"]


class SummaryStorage:
    def __init__(self, parquet_path: str | Path):
        self.parquet_path = Path(parquet_path)

    def write_parquet(self, summaries: list[SymbolSummary]) -> int:
        if not summaries:
            logger.debug("Nothing to export")
            return 0

        df = pd.DataFrame([asdict(s) for s in summaries], columns=COLUMNS)
        # Wrapped gaps from out-of-order input exceed int64
        df["max_time_gap"] = df["max_time_gap"].astype("uint64")
        df = df.sort_values("symbol").reset_index(drop=True)

        self.parquet_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_parquet(self.parquet_path, index=False, engine="pyarrow")
        logger.info(f"Exported {len(df)} summaries -> {self.parquet_path}")
        return len(df)

    def load(self) -> pd.DataFrame | None:
        if self.parquet_path.exists():
            return pd.read_parquet(self.parquet_path)
        return None
