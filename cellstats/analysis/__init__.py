# ==============================================
# TOPIC 3: ANALYSIS
# ==============================================
#
# This package answers questions over the cells held in a
# CellStore. Nothing here mutates the store.
#
# Modules:
# --------
# - analytics.py     → The four aggregate questions + the report
# - unique_values.py → Distinct values per field, for listing
#
# ==============================================

from .analytics import (
    AnalyticsReport,
    average_weight_by_oem,
    build_report,
    count_different_announce_launch_years,
    count_single_sensor_phones,
    heaviest_oem_average,
    highest_average_weight_oem,
    mode_launch_year_after_1999,
)
from .unique_values import format_unique_values, list_unique_values

__all__ = [
    "AnalyticsReport",
    "average_weight_by_oem",
    "build_report",
    "count_different_announce_launch_years",
    "count_single_sensor_phones",
    "heaviest_oem_average",
    "highest_average_weight_oem",
    "mode_launch_year_after_1999",
    "format_unique_values",
    "list_unique_values",
]
