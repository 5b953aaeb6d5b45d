# ==============================================
# FieldNormalizer
# ==============================================
#
# PURPOSE:
#   Convert a single raw CSV field into its typed value, or None
#   when the value is missing, a placeholder, or cannot be parsed.
#
# WHY THIS MODULE EXISTS:
#   The phone dataset is loosely formatted. The same column can hold
#     - "2019, September 25" or "Released 2019" or "Discontinued"
#     - "150 g (5.29 oz)" or "-" or ""
#     - "6.5 inches, 102.0 cm2 (~83.3% screen-to-body ratio)"
#   Every rule here is pure and total: it never raises, it degrades
#   to None instead.
#
# FUNCTIONS:
# ----------
#   - normalize_text(value)          oem, model, body_dimensions,
#                                    display_type, display_resolution
#   - normalize_body_sim(value)      like normalize_text, "No" -> None
#   - parse_year(value)              launch_announced
#   - parse_launch_status(value)     launch_status (year or LaunchTag)
#   - parse_weight(value)            body_weight (grams, float)
#   - parse_display_size(value)      display_size ("<n> inches...")
#   - parse_features_sensors(value)  features_sensors (tuple of str)
#   - parse_platform_os(value)       platform_os (text before first comma)
#
#   FIELD_RULES maps every cell field name to its rule.
#
# RULES:
# ------
#   1. None, "" and "-" (after trimming) are always unknown
#   2. Years are the first four consecutive digits in the text
#   3. Weight is the digit run anchored at the start of the text
#   4. Re-applying a rule to its own output returns the same output
#
# ==============================================

import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class LaunchTag(str, Enum):
    """Literal launch status values that carry no year."""
    DISCONTINUED = "Discontinued"
    CANCELLED = "Cancelled"


LaunchStatus = Union[int, LaunchTag]

PLACEHOLDER = "-"

YEAR_PATTERN = re.compile(r'(\d{4})')
WEIGHT_PATTERN = re.compile(r'^(\d+)')
DISPLAY_SIZE_PATTERN = re.compile(r'(\d+(?:\.\d+)?)\s*in(?:ch(?:es)?)?(.*)', re.IGNORECASE)

# Purely numeric sensor entries are noise, except this one
KEPT_NUMERIC_SENSOR = "V1"


def _is_missing(value: Any) -> bool:
    """True for None, empty/whitespace text and the "-" placeholder."""
    if value is None:
        return True
    text = str(value).strip()
    return text == "" or text == PLACEHOLDER


def _format_number(text: str) -> str:
    # 6.0 -> "6", 6.50 -> "6.5"
    number = float(text)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _is_numeric(piece: str) -> bool:
    if piece == "":
        return True
    if not any(ch.isdigit() for ch in piece):
        return False
    try:
        float(piece)
    except ValueError:
        return False
    return True


def normalize_text(value: Any) -> Optional[str]:
    """
    Plain text rule.

    Trimming is only used to detect emptiness; the original
    text is returned untouched.
    """
    if _is_missing(value):
        return None
    return value


def normalize_body_sim(value: Any) -> Optional[str]:
    """Plain text rule where a literal "No" also means unknown."""
    text = normalize_text(value)
    if text is None or str(text).strip() == "No":
        return None
    return text


def parse_year(value: Any) -> Optional[int]:
    """
    Extract a year from free text.

    Args:
        value: Raw text such as "2019, September 25" (or an int year)

    Returns:
        The first four consecutive digits as an int, or None
    """
    if _is_missing(value):
        return None

    match = YEAR_PATTERN.search(str(value).strip())
    if match is None:
        logger.debug("No valid year found in %r", value)
        return None
    return int(match.group(1))


def parse_launch_status(value: Any) -> Optional[LaunchStatus]:
    """
    Launch status is either a LaunchTag or a year.

    Args:
        value: Raw text such as "Discontinued" or "Available. Released 2019"

    Returns:
        LaunchTag, int year, or None
    """
    if value is None:
        return None
    if isinstance(value, LaunchTag):
        return value

    text = str(value).strip()
    for tag in LaunchTag:
        if text == tag.value:
            return tag

    return parse_year(value)


def parse_weight(value: Any) -> Optional[float]:
    """Leading digit run as grams, e.g. "150 g (5.29 oz)" -> 150.0."""
    if _is_missing(value):
        return None

    match = WEIGHT_PATTERN.match(str(value))
    if match is None:
        return None
    return float(match.group(1))


def parse_display_size(value: Any) -> Optional[str]:
    """
    Re-render a display size as "<number> inches<trailing text>".

    Args:
        value: Raw text such as "6.5 inches, 102.0 cm2"

    Returns:
        Normalized size text, or None when no inch marker is present
    """
    if not isinstance(value, str) or _is_missing(value):
        return None

    match = DISPLAY_SIZE_PATTERN.search(value)
    if match is None:
        return None

    number, trailing = match.group(1), match.group(2)
    return f"{_format_number(number)} inches{trailing}"


def parse_platform_os(value: Any) -> Optional[str]:
    """Everything before the first comma, trimmed."""
    if _is_missing(value):
        return None

    platform = str(value).split(",", 1)[0].strip()
    return platform or None


def parse_features_sensors(value: Any) -> Optional[Tuple[str, ...]]:
    """
    Split a comma separated sensor list.

    Purely numeric entries are dropped, except "V1".

    Args:
        value: Raw text such as "Accelerometer, 3, V1", or an
               already parsed sequence of sensor names

    Returns:
        Tuple of sensor names, or None if nothing survives
    """
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(item) for item in value)
    if _is_missing(value):
        return None

    pieces = [piece.strip() for piece in str(value).split(",")]
    sensors = tuple(
        piece for piece in pieces
        if not _is_numeric(piece) or piece == KEPT_NUMERIC_SENSOR
    )
    return sensors or None


FIELD_RULES: Dict[str, Callable[[Any], Any]] = {
    "oem": normalize_text,
    "model": normalize_text,
    "launch_announced": parse_year,
    "launch_status": parse_launch_status,
    "body_dimensions": normalize_text,
    "body_weight": parse_weight,
    "body_sim": normalize_body_sim,
    "display_type": normalize_text,
    "display_size": parse_display_size,
    "display_resolution": normalize_text,
    "features_sensors": parse_features_sensors,
    "platform_os": parse_platform_os,
}

CELL_FIELDS: Tuple[str, ...] = tuple(FIELD_RULES)
