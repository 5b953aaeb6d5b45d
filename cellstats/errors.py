from typing import Iterable


class CellStatsError(Exception):
    """Base class for errors raised by cellstats."""


class UnknownFieldError(CellStatsError, ValueError):
    """Raised when a field name is not one of the twelve cell fields."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown cell field '{name}'")


class MissingColumnsError(CellStatsError, ValueError):
    """Raised when a CSV header lacks required columns."""

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(f"CSV header missing required columns: {', '.join(self.missing)}")
