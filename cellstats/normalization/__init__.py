# ==============================================
# TOPIC 1: NORMALIZATION
# ==============================================
#
# This package turns loosely formatted CSV fields into typed
# values BEFORE a record enters the store.
#
# Modules:
# --------
# - field_normalizer.py → Per-field parsing rules (pure, never raise)
# - cell.py             → Immutable Cell record built from those rules
#
# ==============================================

from .field_normalizer import (
    CELL_FIELDS,
    FIELD_RULES,
    LaunchTag,
    normalize_body_sim,
    normalize_text,
    parse_display_size,
    parse_features_sensors,
    parse_launch_status,
    parse_platform_os,
    parse_weight,
    parse_year,
)
from .cell import Cell

__all__ = [
    "CELL_FIELDS",
    "FIELD_RULES",
    "LaunchTag",
    "Cell",
    "normalize_body_sim",
    "normalize_text",
    "parse_display_size",
    "parse_features_sensors",
    "parse_launch_status",
    "parse_platform_os",
    "parse_weight",
    "parse_year",
]
