"""Type-safe enums for the bolt weight calculator."""

from enum import Enum
from typing import Union


class StandardFamily(Enum):
    """Dimension standard family - selects table and length unit"""
    METRIC = "metric"  # ISO 4014/4017, DIN 931/933 - lengths in mm
    INCH = "inch"  # ASME B18.2.1 - lengths in inches
    METRIC_CARRIAGE = "metric_carriage"  # DIN 603 carriage bolts - lengths in mm

    @property
    def is_metric(self) -> bool:
        return self is not StandardFamily.INCH

    @property
    def length_unit(self) -> str:
        return "mm" if self.is_metric else "in"


class Material(Enum):
    """Fastener material identifier"""
    STEEL = "STEEL"
    STAINLESS_STEEL = "STAINLESS_STEEL"
    ALUMINIUM = "ALUMINIUM"
    BRASS = "BRASS"


# Catalogue names accepted in place of the enum values
_STANDARD_ALIASES = {
    "ISO": StandardFamily.METRIC,
    "DIN": StandardFamily.METRIC,
    "ASME": StandardFamily.INCH,
    "ANSI": StandardFamily.INCH,
    "DIN603": StandardFamily.METRIC_CARRIAGE,
    "DIN_CARRIAGE": StandardFamily.METRIC_CARRIAGE,
    "CARRIAGE": StandardFamily.METRIC_CARRIAGE,
}


def coerce_standard(value: Union[StandardFamily, str]) -> StandardFamily:
    """
    Convert a StandardFamily or string to StandardFamily.

    Accepts enum values ("metric"), enum names ("METRIC") and catalogue
    aliases ("ISO", "DIN", "ASME", "ANSI", "DIN603"), case-insensitively.

    Raises:
        ValueError: If the value names no known family
    """
    if isinstance(value, StandardFamily):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unrecognized standard family: {value!r}")

    token = value.strip().upper().replace("-", "_").replace(" ", "_")
    if token in StandardFamily.__members__:
        return StandardFamily[token]
    if token in _STANDARD_ALIASES:
        return _STANDARD_ALIASES[token]
    raise ValueError(f"Unrecognized standard family: {value!r}")
