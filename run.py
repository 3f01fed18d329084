import argparse
import sys
import logging
from dataclasses import replace

from trade_summary.aggregator import TradeAggregator
from trade_summary.config import AppConfig, load_config
from trade_summary.errors import InvalidTradeLine
from trade_summary.parser import TradeParser
from trade_summary.reporter import Reporter
from trade_summary.storage import SummaryStorage


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Summarize trades per symbol")
    parser.add_argument("--config", default="config.yaml", help="Path to YAML config")
    parser.add_argument("--input", default=None, help="Trade file, '-' for stdin")
    parser.add_argument("--output", default=None, help="Report file, '-' for stdout")
    parser.add_argument("--parquet", default=None, help="Optional parquet export path")
    parser.add_argument("--symbol-width", type=int, default=None, help="Sort key width")
    parser.add_argument("--lenient", action="store_true", help="Skip invalid lines instead of failing")
    parser.add_argument("--log-level", default=None, help="Logging level")
    return parser.parse_args(argv)


def _apply_overrides(config: AppConfig, args) -> AppConfig:
    overrides = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.parquet is not None:
        overrides["parquet_path"] = args.parquet
    if args.symbol_width is not None:
        overrides["symbol_width"] = args.symbol_width
    if args.lenient:
        overrides["strict"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides)


def main(argv=None):
    args = _parse_args(argv)
    try:
        config = _apply_overrides(load_config(args.config), args)
    except (ValueError, OSError) as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger("main").error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("main")

    parser = TradeParser(num_fields=config.num_fields, strict=config.strict)
    aggregator = TradeAggregator()
    reporter = Reporter(symbol_width=config.symbol_width)

    logger.info(f"Reading trades from {config.input_path}")
    try:
        if config.input_path == "-":
            count = aggregator.fold_all(parser.iter_records(sys.stdin.buffer))
        else:
            count = aggregator.fold_all(parser.parse_file(config.input_path))
    except InvalidTradeLine as e:
        logger.error(f"Invalid trade input: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read trades: {e}")
        sys.exit(1)

    logger.info(f"Folded {count} trades across {len(aggregator)} symbols")

    try:
        summaries = reporter.report(aggregator, config.output_path)
        if config.parquet_path:
            SummaryStorage(config.parquet_path).write_parquet(summaries)
    except OSError as e:
        logger.error(f"Cannot write report: {e}")
        sys.exit(1)

    logger.info("Done")


if __name__ == "__main__":
    main()
