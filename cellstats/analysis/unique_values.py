# ==============================================
# Unique Values
# ==============================================
#
# PURPOSE:
#   Collect the distinct normalized values of every cell field,
#   for the interactive "list" command.
#
# FUNCTIONS:
# ----------
#   - list_unique_values(store) -> dict[str, set]
#       field name → distinct known values. Unknown (None) values
#       are left out. Sensor tuples are hashable and kept whole.
#
#   - format_unique_values(values) -> list[str]
#       "field: v1, v2, ..." lines in field order.
#
# ==============================================

from typing import Any, Dict, List, Set

from cellstats.normalization import CELL_FIELDS
from cellstats.storage import CellStore


def _display(value: Any) -> str:
    if isinstance(value, tuple):
        return "[" + ", ".join(value) + "]"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(getattr(value, "value", value))


def list_unique_values(store: CellStore) -> Dict[str, Set[Any]]:
    """
    Distinct known values per field.

    Args:
        store: Cells to scan

    Returns:
        Mapping with all twelve field names, each to a (possibly empty) set
    """
    unique: Dict[str, Set[Any]] = {name: set() for name in CELL_FIELDS}

    for cell in store:
        for name, value in cell.to_dict().items():
            if value is not None:
                unique[name].add(value)

    return unique


def format_unique_values(values: Dict[str, Set[Any]]) -> List[str]:
    lines = []
    for name in CELL_FIELDS:
        shown = sorted(_display(value) for value in values.get(name, ()))
        lines.append(f"{name}: {', '.join(shown)}")
    return lines
