"""
Batch weight calculation for bolt lists.

Maps estimate_weight over a list of {size, length, quantity} records and
totals the project weight. Output order always matches input order.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Union

from ..enums import Material, StandardFamily
from ..errors import InvalidInputError
from ..io import BatchItem, BatchLine, BatchReport, EstimateOptions
from .core import estimate_weight, material_name
from .dimensions import resolve_standard

logger = logging.getLogger(__name__)

ItemInput = Union[BatchItem, Mapping]


def _as_item(item: ItemInput) -> BatchItem:
    if isinstance(item, BatchItem):
        return item
    return BatchItem.model_validate(dict(item))


def calculate_batch(
    items: Iterable[ItemInput],
    standard: Union[StandardFamily, str] = StandardFamily.METRIC,
    material: Union[Material, str, None] = None,
    options: Optional[EstimateOptions] = None
) -> List[BatchLine]:
    """
    Calculate the unit weight of every line in a bolt list.

    Args:
        items: BatchItem models or dicts with size, length, quantity
        standard: Standard family shared by all lines
        material: Material shared by all lines
        options: Grade / full-thread adjustments shared by all lines

    Returns:
        BatchLine per input item, in input order

    Raises:
        UnknownSizeError: If any line has an unknown size
        InvalidInputError: If any line has a bad length or quantity
    """
    family = resolve_standard(standard)
    lines = []

    for index, raw in enumerate(items):
        item = _as_item(raw)
        if item.quantity < 1:
            raise InvalidInputError(f"Line {index + 1}: quantity must be at least 1, got {item.quantity}")

        weight = estimate_weight(item.size, item.length, family, material, options)
        lines.append(BatchLine(
            size=item.size,
            length=item.length,
            quantity=item.quantity,
            weight=weight,
        ))

    logger.debug(f"Calculated {len(lines)} batch lines for {family.name}")
    return lines


def calculate_project_weight(lines: Iterable[Union[BatchLine, Mapping]]) -> float:
    """
    Total project weight in kilograms.

    Sums unit kilograms × quantity. Lines without a weight count as zero.
    """
    total = 0.0
    for line in lines:
        if isinstance(line, Mapping):
            weight = line.get('weight')
            quantity = line.get('quantity', 1)
            kilograms = weight.get('kilograms', 0.0) if isinstance(weight, Mapping) else getattr(weight, 'kilograms', 0.0)
        else:
            weight = line.weight
            quantity = line.quantity
            kilograms = weight.kilograms if weight is not None else 0.0
        total += (kilograms or 0.0) * quantity
    return total


def build_report(
    items: Iterable[ItemInput],
    standard: Union[StandardFamily, str] = StandardFamily.METRIC,
    material: Union[Material, str, None] = None,
    options: Optional[EstimateOptions] = None
) -> BatchReport:
    """Calculate a bolt list and wrap it with its project total"""
    family = resolve_standard(standard)
    lines = calculate_batch(items, family, material, options)

    return BatchReport(
        standard=family,
        material=material_name(material),
        lines=lines,
        total_kilograms=calculate_project_weight(lines),
    )
