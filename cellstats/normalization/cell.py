# ==============================================
# Cell (Record)
# ==============================================
#
# PURPOSE:
#   One phone specification with every field already normalized.
#
# CLASS: Cell (frozen dataclass)
# ------------------------------
#   Twelve Optional fields, see FIELD_RULES for the rule behind each.
#
#   Methods:
#   --------
#   - from_raw(raw: Mapping) -> Cell  (classmethod)
#       Apply FIELD_RULES to a raw row. Missing keys are unknown.
#
#   - with_field(name: str, raw_value) -> Cell
#       Return a copy with one field re-normalized by its rule.
#
#   - to_dict() -> dict
#       Field name -> normalized value, in field order.
#
# ==============================================

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from cellstats.errors import UnknownFieldError
from .field_normalizer import FIELD_RULES, LaunchStatus


@dataclass(frozen=True)
class Cell:
    """
    Immutable, normalized phone record.

    None means the value was missing or could not be parsed.
    """

    oem: Optional[str] = None
    model: Optional[str] = None
    launch_announced: Optional[int] = None
    launch_status: Optional[LaunchStatus] = None
    body_dimensions: Optional[str] = None
    body_weight: Optional[float] = None  # grams
    body_sim: Optional[str] = None
    display_type: Optional[str] = None
    display_size: Optional[str] = None
    display_resolution: Optional[str] = None
    features_sensors: Optional[Tuple[str, ...]] = None
    platform_os: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Cell":
        """
        Build a Cell from raw text values.

        Args:
            raw: Mapping of field name -> raw value (e.g. a CSV row)

        Returns:
            A normalized Cell
        """
        values = {name: rule(raw.get(name)) for name, rule in FIELD_RULES.items()}
        return cls(**values)

    def with_field(self, name: str, raw_value: Any) -> "Cell":
        """
        Return a copy with one field replaced.

        The raw value goes through the same rule used at construction.

        Raises:
            UnknownFieldError: if name is not a cell field
        """
        rule = FIELD_RULES.get(name)
        if rule is None:
            raise UnknownFieldError(name)
        return replace(self, **{name: rule(raw_value)})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
