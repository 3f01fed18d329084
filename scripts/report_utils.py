from __future__ import annotations

from pathlib import Path

import pandas as pd

from trade_summary.storage import COLUMNS


def load_report(path: str | Path) -> pd.DataFrame:
    """Load a summary report written as CSV lines or exported as parquet."""
    path = Path(path)
    if path.suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(
            path,
            header=None,
            names=COLUMNS,
            dtype={"symbol": str, "max_time_gap": "uint64"},
        )

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Report {path} is missing columns: {', '.join(missing)}")
    return df


def top_by_volume(df: pd.DataFrame, top: int = 10) -> pd.DataFrame:
    out = df.sort_values(["total_volume", "symbol"], ascending=[False, True])
    return out.head(top).reset_index(drop=True)


def notional(df: pd.DataFrame) -> pd.DataFrame:
    # Approximate: average_price is already truncated
    out = df.copy()
    out["notional"] = out["total_volume"] * out["average_price"]
    return out
