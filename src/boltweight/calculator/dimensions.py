"""
Bolt dimension tables.

Catalogue dimensions per standard family:
- METRIC: ISO 4014 / ISO 4017, DIN 931 / DIN 933 hex head bolts (mm)
- INCH: ASME B18.2.1 hex bolts (inches, pitch in threads per inch)
- METRIC_CARRIAGE: DIN 603 mushroom head carriage bolts (mm, no pitch)

Tables are read-only mappings of frozen profiles, built once at import.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..enums import StandardFamily, coerce_standard
from ..errors import InvalidInputError, UnknownSizeError
from ..io import DimensionProfile


def _table(rows) -> Mapping[str, DimensionProfile]:
    return MappingProxyType({
        size: DimensionProfile(
            nominal_size=size,
            shank_diameter=d,
            head_diameter=head_d,
            head_height=head_h,
            thread_pitch=pitch,
        )
        for size, d, head_h, head_d, pitch in rows
    })


# (size, diameter, head height, head diameter, pitch mm)
METRIC_DIMENSIONS = _table([
    ("M3", 3, 2.0, 5.5, 0.5),
    ("M4", 4, 2.8, 7.0, 0.7),
    ("M5", 5, 3.5, 8.0, 0.8),
    ("M6", 6, 4.0, 10.0, 1.0),
    ("M8", 8, 5.3, 13.0, 1.25),
    ("M10", 10, 6.4, 17.0, 1.5),
    ("M12", 12, 7.5, 19.0, 1.75),
    ("M16", 16, 10.0, 24.0, 2.0),
    ("M20", 20, 12.5, 30.0, 2.5),
    ("M24", 24, 15.0, 36.0, 3.0),
])

# (size, diameter, head height, head diameter, TPI) - all in inches
INCH_DIMENSIONS = _table([
    ("1/4", 0.25, 0.162, 0.438, 20),
    ("5/16", 0.3125, 0.203, 0.562, 18),
    ("3/8", 0.375, 0.244, 0.688, 16),
    ("1/2", 0.5, 0.325, 0.875, 13),
    ("5/8", 0.625, 0.406, 1.062, 11),
    ("3/4", 0.75, 0.487, 1.250, 10),
    ("7/8", 0.875, 0.568, 1.438, 9),
    ("1", 1.0, 0.650, 1.625, 8),
])

# (size, diameter, head height, head diameter, pitch) - DIN 603 lists no pitch
METRIC_CARRIAGE_DIMENSIONS = _table([
    ("M6", 6, 4.0, 11.5, None),
    ("M8", 8, 5.0, 15.0, None),
    ("M10", 10, 6.0, 18.0, None),
    ("M12", 12, 7.0, 22.0, None),
])

DIMENSION_TABLES: Mapping[StandardFamily, Mapping[str, DimensionProfile]] = MappingProxyType({
    StandardFamily.METRIC: METRIC_DIMENSIONS,
    StandardFamily.INCH: INCH_DIMENSIONS,
    StandardFamily.METRIC_CARRIAGE: METRIC_CARRIAGE_DIMENSIONS,
})


def resolve_standard(standard: Union[StandardFamily, str]) -> StandardFamily:
    """Coerce to StandardFamily, raising InvalidInputError on unknown values"""
    try:
        return coerce_standard(standard)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def get_dimensions(size: str, standard: Union[StandardFamily, str] = StandardFamily.METRIC) -> DimensionProfile:
    """
    Look up catalogue dimensions for a nominal size.

    Metric designators match case-insensitively ("m10" finds "M10").
    Inch fraction tokens must match exactly ("1/2").

    Args:
        size: Nominal size token
        standard: Standard family (enum or accepted alias)

    Returns:
        DimensionProfile for the size

    Raises:
        UnknownSizeError: If the family has no entry for the size
        InvalidInputError: If the standard family is not recognized
    """
    family = resolve_standard(standard)
    table = DIMENSION_TABLES[family]

    if not isinstance(size, str):
        raise UnknownSizeError(str(size), family.name)

    key = size.upper() if family.is_metric else size
    profile = table.get(key)
    if profile is None:
        raise UnknownSizeError(size, family.name)
    return profile


def available_sizes(standard: Union[StandardFamily, str] = StandardFamily.METRIC) -> Tuple[str, ...]:
    """List nominal sizes of a family in catalogue order"""
    return tuple(DIMENSION_TABLES[resolve_standard(standard)])
