from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts.report_utils import load_report, notional, top_by_volume


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a per-symbol trade summary report")
    parser.add_argument("--report", default="output.csv", help="Report path (.csv lines or .parquet)")
    parser.add_argument("--top", type=int, default=10, help="Symbols to print")
    parser.add_argument("--save-csv", default=None, help="Optional output CSV path with notional column")
    args = parser.parse_args()

    df = load_report(args.report)

    print(f"Symbols: {len(df)}")
    print(f"Total volume: {df['total_volume'].sum()}")
    print(f"Widest time gap: {df['max_time_gap'].max() if len(df) else 0}")

    print(f"\nTop {args.top} symbols by volume:")
    print(top_by_volume(df, args.top).to_string(index=False))

    if args.save_csv:
        notional(df).to_csv(args.save_csv, index=False)
        print(f"\nSaved: {args.save_csv}")


if __name__ == "__main__":
    main()
