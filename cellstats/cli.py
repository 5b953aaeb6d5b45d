# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Load a phone CSV, print the analytics report, then drop
#   into the interactive shell.
#
# COMMANDS:
# ---------
#   python -m cellstats cells.csv
#   python -m cellstats cells.csv --no-shell
#   python -m cellstats --no-report --log-level DEBUG
#
#   With no CSV_PATH the path comes from CELLS_CSV_PATH / .env.
#
# EXIT STATUS:
# ------------
#   0 on success, 1 if the CSV cannot be read. A missing file
#   aborts before any core operation runs.
#
# ==============================================

import argparse
import csv
import sys
from dataclasses import replace
from typing import List, Optional

from cellstats.config import get_config
from cellstats.errors import MissingColumnsError
from cellstats.log import configure_logging
from cellstats.session import CellSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cellstats",
        description="Normalize a phone specification CSV and answer questions about it.",
    )
    parser.add_argument("csv_path", nargs="?", help="CSV file to load (default: CELLS_CSV_PATH)")
    parser.add_argument("--no-report", action="store_true", help="skip the report after loading")
    parser.add_argument("--no-shell", action="store_true", help="exit instead of starting the shell")
    parser.add_argument("--log-level", help="logging level (default: CELLS_LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    config = replace(
        config,
        csv_path=args.csv_path or config.csv_path,
        log_level=(args.log_level or config.log_level).upper(),
        report_on_load=config.report_on_load and not args.no_report,
        interactive=config.interactive and not args.no_shell,
    )
    configure_logging(config.log_level)

    session = CellSession(config)
    try:
        loaded = session.load()
    except FileNotFoundError:
        print(f"Error reading the CSV file: {config.csv_path} not found", file=sys.stderr)
        return 1
    except (OSError, csv.Error, MissingColumnsError, UnicodeDecodeError) as e:
        print(f"Error reading the CSV file: {e}", file=sys.stderr)
        return 1

    print(f"CSV file has been successfully processed ({loaded} cells).\n")

    if config.report_on_load:
        session.print_report()

    if config.interactive:
        session.run_shell()

    return 0


if __name__ == "__main__":
    sys.exit(main())
