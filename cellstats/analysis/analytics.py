# ==============================================
# Analytics
# ==============================================
#
# PURPOSE:
#   Answer the fixed set of aggregate questions over a CellStore.
#   Every function is read-only and iterates the store in key order,
#   so tie-breaks ("first encountered") are deterministic.
#
# FUNCTIONS:
# ----------
#   - average_weight_by_oem(store) -> dict[oem, float]
#       Mean body_weight per OEM, over cells with a known weight.
#       Unknown OEM (None) is grouped like any other value.
#
#   - heaviest_oem_average(store) -> (oem, average) | None
#   - highest_average_weight_oem(store) -> oem | None
#
#   - count_single_sensor_phones(store) -> int
#       Cells with exactly one known sensor.
#
#   - count_different_announce_launch_years(store) -> int
#       Cells where announced year != launch status. A LaunchTag
#       status is never equal to a year, so it counts as different.
#
#   - mode_launch_year_after_1999(store) -> (year, count) | None
#
#   - build_report(store) -> AnalyticsReport
#       All four answers, plus the text shown after ingestion.
#
# ==============================================

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from cellstats.storage import CellStore

LAUNCH_YEAR_FLOOR = 1999


def average_weight_by_oem(store: CellStore) -> Dict[Optional[str], float]:
    """
    Average body weight per OEM.

    Args:
        store: Cells to aggregate

    Returns:
        OEM → average weight in grams, in first-encounter order
    """
    totals: Dict[Optional[str], float] = {}
    counts: Dict[Optional[str], int] = {}

    for cell in store:
        if cell.body_weight is None:
            continue
        totals[cell.oem] = totals.get(cell.oem, 0.0) + cell.body_weight
        counts[cell.oem] = counts.get(cell.oem, 0) + 1

    return {oem: totals[oem] / counts[oem] for oem in totals}


def heaviest_oem_average(store: CellStore) -> Optional[Tuple[Optional[str], float]]:
    """
    OEM with the highest average body weight, with that average.

    Ties keep the OEM encountered first.

    Returns:
        (oem, average) or None if no cell has a known weight
    """
    best: Optional[Tuple[Optional[str], float]] = None
    for oem, average in average_weight_by_oem(store).items():
        if best is None or average > best[1]:
            best = (oem, average)
    return best


def highest_average_weight_oem(store: CellStore) -> Optional[str]:
    best = heaviest_oem_average(store)
    return None if best is None else best[0]


def count_single_sensor_phones(store: CellStore) -> int:
    return sum(
        1 for cell in store
        if cell.features_sensors is not None and len(cell.features_sensors) == 1
    )


def count_different_announce_launch_years(store: CellStore) -> int:
    count = 0
    for cell in store:
        if cell.launch_announced is None or cell.launch_status is None:
            continue
        if cell.launch_announced != cell.launch_status:
            count += 1
    return count


def mode_launch_year_after_1999(store: CellStore) -> Optional[Tuple[int, int]]:
    """
    Most common launch year after 1999.

    Only launch statuses holding a year count; LaunchTag values are
    skipped. Ties keep the year that was seen first.

    Returns:
        (year, count) or None if no cell qualifies
    """
    year_counts: Dict[int, int] = {}
    for cell in store:
        year = cell.launch_status
        if isinstance(year, int) and not isinstance(year, bool) and year > LAUNCH_YEAR_FLOOR:
            year_counts[year] = year_counts.get(year, 0) + 1

    best: Optional[Tuple[int, int]] = None
    for year, count in year_counts.items():
        if best is None or count > best[1]:
            best = (year, count)
    return best


@dataclass
class AnalyticsReport:
    """The four answers, computed together."""

    heaviest_oem: Optional[Tuple[Optional[str], float]]
    different_year_count: int
    single_sensor_count: int
    top_launch_year: Optional[Tuple[int, int]]

    def lines(self) -> List[str]:
        """Human-readable report, one answer per line."""
        if self.heaviest_oem is None:
            heaviest = "OEM with the highest average body weight: none (no known weights)"
        else:
            oem, average = self.heaviest_oem
            heaviest = (
                f"OEM with the highest average body weight: {oem} "
                f"with average weight {average:.2f} (grams)"
            )

        if self.top_launch_year is None:
            top_year = "Year with most phones launched (post-1999): none"
        else:
            year, count = self.top_launch_year
            top_year = f"Year with most phones launched (post-1999): {year} with {count} launches"

        return [
            heaviest,
            f"Phones announced and launched in different years: {self.different_year_count}",
            f"Phones with exactly one sensor: {self.single_sensor_count}",
            top_year,
        ]


def build_report(store: CellStore) -> AnalyticsReport:
    return AnalyticsReport(
        heaviest_oem=heaviest_oem_average(store),
        different_year_count=count_different_announce_launch_years(store),
        single_sensor_count=count_single_sensor_phones(store),
        top_launch_year=mode_launch_year_after_1999(store),
    )
