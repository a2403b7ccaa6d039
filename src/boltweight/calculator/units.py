"""Ad-hoc unit conversion (mm/in, g/oz, kg/lb), independent of the weight model."""

from ..errors import InvalidInputError
from .constants import CONVERSION_FACTORS


def convert_units(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a value between supported units.

    Supported pairs: mm <-> in, g <-> oz, kg <-> lb.

    Raises:
        InvalidInputError: If the unit pair is not supported
    """
    from_unit = from_unit.strip().lower()
    to_unit = to_unit.strip().lower()
    if from_unit == to_unit:
        return value

    factor = CONVERSION_FACTORS.get((from_unit, to_unit))
    if factor is None:
        raise InvalidInputError(f"Cannot convert {from_unit} to {to_unit}")
    return value * factor
