# src/keeling_chart/cli.py
"""
Command-line runner: fetch the CO2 CSV and print the chart.

Writes SVG (or, with --html, a page holding the chart container) to stdout:

    keeling-chart > keeling.svg
    keeling-chart --source data/keeling_data.csv --html > keeling.html
"""
import argparse
import logging
import sys

from keeling_chart.chart import build_chart
from keeling_chart.config import DEFAULT_CONFIG, default_source
from keeling_chart.errors import ChartDataError
from keeling_chart.render import wrap_in_page

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the monthly average CO2 concentration chart as SVG.")
    parser.add_argument("--source", type=str, default=default_source(), help="CSV URL or path (default: KEELING_DATA_URL or the published dataset).")
    parser.add_argument("--split-index", type=int, default=DEFAULT_CONFIG.split_index, help="Last row index of the observed series.")
    parser.add_argument("--ignore-flag", action="store_true", help="Split by --split-index even if the CSV has an is_forecast column.")
    parser.add_argument("--html", action="store_true", help="Emit an HTML page with the chart container instead of bare SVG.")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level (logs go to stderr).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=LOG_FORMAT, stream=sys.stderr)

    if args.split_index < 0:
        print(f"ERROR: --split-index must be >= 0, got {args.split_index}", file=sys.stderr)
        sys.exit(2)

    config = DEFAULT_CONFIG.with_overrides(split_index=args.split_index, use_forecast_flag=not args.ignore_flag)
    try:
        result = build_chart(args.source, config)
    except ChartDataError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(wrap_in_page(result.svg, config) if args.html else result.svg)


if __name__ == "__main__":
    main()
