# ==============================================
# CellSession — Session Object + Interactive Shell
# ==============================================
#
# PURPOSE:
#   The one object users interact with. It owns a CellStore and
#   ties the three topics together. It is constructed explicitly
#   and handed to whatever entry point needs it.
#
# HOW IT CONNECTS THE 3 TOPICS:
#
#   ┌──────────────────────────────────────────────────┐
#   │                   CellSession                    │
#   │                                                  │
#   │  CSV rows / prompt answers                       │
#   │        │                                         │
#   │        ▼                                         │
#   │  TOPIC 1: NORMALIZATION   Cell.from_raw          │
#   │        │                                         │
#   │        ▼                                         │
#   │  TOPIC 2: STORAGE         CellStore.insert       │
#   │        │                                         │
#   │        ▼                                         │
#   │  TOPIC 3: ANALYSIS        build_report,          │
#   │                           list_unique_values     │
#   └──────────────────────────────────────────────────┘
#
# CLASS: CellSession
# ------------------
#
#   Constructor:
#   ------------
#   - __init__(config=None, store=None, prompt=None, echo=None)
#       prompt/echo default to input/print; injecting them lets the shell be driven
#       without a terminal.
#
#   Public Methods:
#   ---------------
#   - load(path=None) -> int          Ingest a CSV file
#   - add(raw) -> int                 Normalize + insert, return key
#   - delete(key) -> bool
#   - update(key, name, raw) -> bool  Re-normalize one field
#   - list_unique_values() -> dict
#   - report() -> AnalyticsReport
#   - print_report() -> AnalyticsReport
#   - run_shell() -> None             add / delete / update / list / report / exit
#
# ==============================================

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Set

from cellstats.config import CellsConfig, get_config
from cellstats.errors import UnknownFieldError
from cellstats.normalization import CELL_FIELDS, Cell
from cellstats.storage import CellStore, load_cells
from cellstats.analysis import (
    AnalyticsReport,
    build_report,
    format_unique_values,
    list_unique_values,
)

logger = logging.getLogger(__name__)


ADD_QUESTIONS = {
    "oem": "Enter OEM: ",
    "model": "Enter model: ",
    "launch_announced": "Enter launch year announced: ",
    "launch_status": "Enter launch status: ",
    "body_dimensions": "Enter body dimensions: ",
    "body_weight": "Enter body weight (in grams): ",
    "body_sim": "Enter body SIM type: ",
    "display_type": "Enter display type: ",
    "display_size": "Enter display size (in inches): ",
    "display_resolution": "Enter display resolution: ",
    "features_sensors": "Enter features and sensors: ",
    "platform_os": "Enter platform OS: ",
}

MENU_PROMPT = "\nChoose an action (add, delete, update, list, report, exit): "


class CellSession:
    """
    Holds the store for one run of the program and exposes the
    operations the interactive shell and the CLI need.
    """

    def __init__(
        self,
        config: Optional[CellsConfig] = None,
        store: Optional[CellStore] = None,
        prompt: Optional[Callable[[str], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or get_config()
        self.store = store if store is not None else CellStore()
        self._prompt = prompt or input
        self._echo = echo or print

    # ======================================
    # Operations
    # ======================================
    def load(self, path: Optional[str] = None) -> int:
        """
        Ingest a CSV file into the store.

        Args:
            path: CSV path; defaults to config.csv_path

        Returns:
            Number of cells loaded
        """
        return load_cells(path or self.config.csv_path, self.store)

    def add(self, raw: Mapping[str, Any]) -> int:
        logger.debug("Adding cell with data: %r", dict(raw))
        key = self.store.insert(Cell.from_raw(raw))
        logger.info("Added cell %d", key)
        return key

    def delete(self, key: int) -> bool:
        return self.store.delete(key)

    def update(self, key: int, name: str, raw_value: Any) -> bool:
        return self.store.update_field(key, name, raw_value)

    def list_unique_values(self) -> Dict[str, Set[Any]]:
        return list_unique_values(self.store)

    def report(self) -> AnalyticsReport:
        return build_report(self.store)

    def print_report(self) -> AnalyticsReport:
        """Compute the report and echo it."""
        report = self.report()
        self._echo("=" * 60)
        for line in report.lines():
            self._echo(line)
        self._echo("=" * 60)
        return report

    # ======================================
    # Interactive shell
    # ======================================
    def run_shell(self) -> None:
        """
        Menu loop. Returns on "exit" or end of input.

        Every command finishes its single store call before the
        next prompt, so leaving the loop never leaves partial state.
        """
        commands = {
            "add": self._shell_add,
            "delete": self._shell_delete,
            "update": self._shell_update,
            "list": self._shell_list,
            "report": self.print_report,
        }

        while True:
            try:
                action = self._prompt(MENU_PROMPT).strip().lower()
            except EOFError:
                break

            if action == "exit":
                break

            handler = commands.get(action)
            if handler is None:
                self._echo("Invalid option")
                continue

            try:
                handler()
            except EOFError:
                break

    def _shell_add(self) -> None:
        raw = {name: self._prompt(question).strip() for name, question in ADD_QUESTIONS.items()}
        key = self.add(raw)
        self._echo(f"New cell added at index {key}: {self.store.get(key)}")

    def _ask_key(self, question: str) -> Optional[int]:
        answer = self._prompt(question).strip()
        try:
            return int(answer)
        except ValueError:
            self._echo(f"'{answer}' is not a valid index.")
            return None

    def _shell_delete(self) -> None:
        key = self._ask_key("\nEnter the index of the cell to delete: ")
        if key is None:
            return
        if self.delete(key):
            self._echo(f"Cell at index {key} has been deleted.")
        else:
            self._echo("No cell found at that index.")

    def _shell_update(self) -> None:
        key = self._ask_key("\nEnter the index of the cell to update: ")
        if key is None:
            return
        name = self._prompt(f"Enter the field to update ({', '.join(CELL_FIELDS)}): ").strip()
        raw_value = self._prompt("Enter the new value: ").strip()
        try:
            updated = self.update(key, name, raw_value)
        except UnknownFieldError as e:
            self._echo(str(e))
            return
        if updated:
            self._echo(f"Cell at index {key} updated: {self.store.get(key)}")
        else:
            self._echo("No cell found at that index.")

    def _shell_list(self) -> None:
        for line in format_unique_values(self.list_unique_values()):
            self._echo(line)
