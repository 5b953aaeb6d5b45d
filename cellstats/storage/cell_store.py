# ==============================================
# CellStore
# ==============================================
#
# PURPOSE:
#   Ordered, keyed in-memory collection of Cell records.
#
# CLASS: CellStore
# ----------------
#   Stateful — owns the key counter and the key -> Cell map.
#
#   Methods:
#   --------
#   - insert(cell) -> int
#       Assign the next key (highest key ever assigned + 1, starting
#       at 1) and store the cell.
#
#   - delete(key) -> bool
#       Remove a key. False if it was not present. Never raises.
#
#   - get(key) -> Cell | None
#
#   - all() -> list[tuple[int, Cell]]
#       Entries in ascending key order (= insertion order).
#
#   - update_field(key, name, raw_value) -> bool
#       Replace the stored cell with cell.with_field(name, raw_value).
#
# KEYS:
# -----
#   Keys are never reused or renumbered. Deleting key 3 of 3 and
#   inserting again yields key 4.
#
# ==============================================

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from cellstats.normalization import Cell

logger = logging.getLogger(__name__)


class CellStore:
    """Keyed collection of cells, iterated in key order."""

    def __init__(self):
        self._cells: Dict[int, Cell] = {}  # key → Cell, insertion order == key order
        self._last_key: int = 0  # Highest key ever handed out

    def insert(self, cell: Cell) -> int:
        """
        Store a cell under a fresh key.

        Args:
            cell: The normalized record

        Returns:
            The assigned key
        """
        self._last_key += 1
        key = self._last_key
        self._cells[key] = cell
        logger.debug("Inserted cell %d: %s %s", key, cell.oem, cell.model)
        return key

    def delete(self, key: int) -> bool:
        """
        Remove a cell.

        Returns:
            True if a cell was removed, False if the key was absent
        """
        if key not in self._cells:
            logger.debug("Delete of missing key %r ignored", key)
            return False
        del self._cells[key]
        logger.debug("Deleted cell %d", key)
        return True

    def get(self, key: int) -> Optional[Cell]:
        return self._cells.get(key)

    def all(self) -> List[Tuple[int, Cell]]:
        return list(self._cells.items())

    def update_field(self, key: int, name: str, raw_value: Any) -> bool:
        """
        Re-normalize one field of a stored cell.

        Raises:
            UnknownFieldError: if name is not a cell field

        Returns:
            False if the key was absent
        """
        cell = self._cells.get(key)
        if cell is None:
            return False
        self._cells[key] = cell.with_field(name, raw_value)
        logger.debug("Updated field %s of cell %d", name, key)
        return True

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._cells
