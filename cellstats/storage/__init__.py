# ==============================================
# TOPIC 2: STORAGE
# ==============================================
#
# This package holds normalized cells in memory and
# fills the store from a CSV file.
#
# Modules:
# --------
# - cell_store.py → Keyed, ordered in-memory collection
# - csv_loader.py → CSV rows → Cell.from_raw → CellStore.insert
#
# ==============================================

from .cell_store import CellStore
from .csv_loader import REQUIRED_COLUMNS, load_cells, read_rows

__all__ = [
    "CellStore",
    "REQUIRED_COLUMNS",
    "load_cells",
    "read_rows",
]
