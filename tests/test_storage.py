"""
Tests for parquet export and report loading.
"""

from trade_summary.aggregator import TIMESTAMP_MODULUS
from trade_summary.models import SymbolSummary
from trade_summary.reporter import Reporter, format_line
from trade_summary.storage import COLUMNS, SummaryStorage

from scripts.report_utils import load_report, notional, top_by_volume

SUMMARIES = [
    SymbolSummary("BBB", 0, 2, 10, 10),
    SymbolSummary("AAA", 50, 15, 53, 60),
]


def test_write_parquet_sorted(tmp_path):
    storage = SummaryStorage(tmp_path / "out" / "summary.parquet")
    assert storage.write_parquet(SUMMARIES) == 2

    df = storage.load()
    assert list(df.columns) == COLUMNS
    assert df["symbol"].tolist() == ["AAA", "BBB"]
    assert df["average_price"].tolist() == [53, 10]


def test_write_parquet_empty(tmp_path):
    storage = SummaryStorage(tmp_path / "summary.parquet")
    assert storage.write_parquet([]) == 0
    assert storage.load() is None


def test_wrapped_gap_survives_export(tmp_path):
    gap = TIMESTAMP_MODULUS - 10
    storage = SummaryStorage(tmp_path / "summary.parquet")
    storage.write_parquet([SymbolSummary("W", gap, 2, 1, 1)])
    assert int(storage.load()["max_time_gap"].iloc[0]) == gap


def test_load_report_from_csv_lines(tmp_path):
    path = tmp_path / "output.csv"
    Reporter().write([format_line(s) for s in SUMMARIES], path)

    df = load_report(path)
    assert df["symbol"].tolist() == ["BBB", "AAA"]
    assert df["total_volume"].sum() == 17


def test_load_report_from_parquet(tmp_path):
    path = tmp_path / "summary.parquet"
    SummaryStorage(path).write_parquet(SUMMARIES)
    df = load_report(path)
    assert top_by_volume(df, 1)["symbol"].tolist() == ["AAA"]
    assert notional(df)["notional"].tolist() == [15 * 53, 2 * 10]
