"""Entry point for running trade_analytics as a module.

Usage:
    python -m trade_analytics [command] [options]

Commands:
    summary     Headline metrics for a trade file
    symbols     Per-symbol table
    monthly     Monthly gross/net P&L
    export      Write the report to json/csv/parquet/xlsx
    files       List trade files under data/trades

Examples:
    python -m trade_analytics summary trades.csv
    python -m trade_analytics symbols trades.csv --top 5
    python -m trade_analytics export trades.csv -o reports/pnl -f json,xlsx
"""

import sys

from trade_analytics.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
