import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, TextIO, Union

from cellstats.errors import MissingColumnsError
from cellstats.normalization import CELL_FIELDS, Cell
from .cell_store import CellStore

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = frozenset(CELL_FIELDS)


def read_rows(stream: TextIO) -> Iterator[Dict[str, str]]:
    """
    Yield trimmed CSV rows keyed by column name.

    Rows with a different column count than the header are skipped.

    Args:
        stream: Text stream positioned at the header line

    Raises:
        MissingColumnsError: if the header lacks any cell field
    """
    reader = csv.DictReader(stream)
    header = [name.strip() for name in (reader.fieldnames or [])]
    missing = REQUIRED_COLUMNS - set(header)
    if missing:
        raise MissingColumnsError(missing)
    reader.fieldnames = header

    for row in reader:
        # DictReader puts surplus values under None and fills short rows with None
        if None in row or any(value is None for value in row.values()):
            logger.warning("Skipping malformed row on line %d", reader.line_num)
            continue
        yield {name: value.strip() for name, value in row.items()}


def load_cells(path: Union[str, Path], store: CellStore) -> int:
    """
    Normalize every row of a CSV file into the store.

    Args:
        path: CSV file with the twelve cell columns
        store: Destination store

    Returns:
        Number of cells inserted

    Raises:
        FileNotFoundError: if the file does not exist
        MissingColumnsError: if the header lacks any cell field
    """
    inserted = 0
    with open(path, newline="", encoding="utf-8-sig") as stream:
        for row in read_rows(stream):
            store.insert(Cell.from_raw(row))
            inserted += 1

    logger.info("Loaded %d cells from %s", inserted, path)
    return inserted
