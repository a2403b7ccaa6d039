"""
Bolt Weight Calculator - Core Calculations

Pure functions that estimate fastener mass by geometric approximation:
shank cylinder + head cylinder - thread volume, times material density.
Returns typed WeightResult models.

Reference standards:
- ISO 4014 / ISO 4017, DIN 931 / DIN 933 (metric hex bolts)
- ASME B18.2.1 / B18.2.2 (inch hex bolts and nuts)
- DIN 603 (carriage bolts)
- ISO 68-1 (metric thread form)

Model simplifications:
- The hex head is treated as a cylinder of the head diameter, which
  overestimates a true hexagon prism.
- Thread volume is only deducted where a metric pitch is known. Inch
  sizes and DIN 603 carriage bolts get shank + head volume only.
"""

import logging
from math import isfinite, pi
from numbers import Real
from typing import Optional, Union

from ..enums import Material, StandardFamily
from ..errors import InvalidInputError, UnknownSizeError
from ..io import EstimateOptions, FastenerSpec, WeightResult
from .constants import (
    DEFAULT_GRADE_FACTOR,
    DEFAULT_MATERIAL,
    DENSITY_G_PER_CM3,
    FULL_THREAD_FACTOR,
    G_PER_KG,
    G_PER_LB,
    G_PER_OZ,
    GRADE_FACTORS,
    MM3_PER_CM3,
    MM_PER_INCH,
    NUT_WEIGHTS_OZ,
    THREAD_DEPTH_FACTOR,
)
from .dimensions import get_dimensions, resolve_standard

logger = logging.getLogger(__name__)


def calculate_shank_volume(diameter_mm: float, length_mm: float) -> float:
    """Shank cylinder volume (cm³)"""
    return pi * (diameter_mm / 2) ** 2 * length_mm / MM3_PER_CM3


def calculate_head_volume(head_diameter_mm: float, head_height_mm: float) -> float:
    """Head volume (cm³), head approximated as a cylinder"""
    return pi * (head_diameter_mm / 2) ** 2 * head_height_mm / MM3_PER_CM3


def calculate_volumes(
    diameter_mm: float,
    head_diameter_mm: float,
    head_height_mm: float,
    length_mm: float,
    pitch_mm: Optional[float] = None
) -> dict:
    """
    Calculate the volume breakdown of a bolt.

    Thread removal is modelled as the annulus between the nominal
    diameter and an effective diameter reduced by twice the thread depth:

        thread_depth = pitch × 0.6134
        d_eff = d - 2 × thread_depth
        deduction = (π(d/2)² - π(d_eff/2)²) × L

    When the thread depth exceeds the shank radius (very small diameter
    with coarse pitch) d_eff is clamped to zero, so no more than the whole
    shank is removed. A net volume below zero is clamped as well. Either
    clamp sets 'clamped' in the result.

    Args:
        diameter_mm: Nominal shank diameter (mm)
        head_diameter_mm: Head diameter (mm)
        head_height_mm: Head height (mm)
        length_mm: Shank length under head (mm)
        pitch_mm: Thread pitch (mm), None to skip thread deduction

    Returns:
        Dict with shank_cm3, head_cm3, thread_deduction_cm3, net_cm3,
        effective_diameter_mm and clamped
    """
    shank_cm3 = calculate_shank_volume(diameter_mm, length_mm)
    head_cm3 = calculate_head_volume(head_diameter_mm, head_height_mm)
    clamped = False

    if pitch_mm is None:
        effective_diameter_mm = diameter_mm
        thread_deduction_cm3 = 0.0
    else:
        thread_depth_mm = pitch_mm * THREAD_DEPTH_FACTOR
        effective_diameter_mm = diameter_mm - 2 * thread_depth_mm
        if effective_diameter_mm < 0:
            logger.warning(
                f"Thread depth {thread_depth_mm:.3f}mm exceeds shank radius "
                f"{diameter_mm / 2:.3f}mm, clamping effective diameter to zero"
            )
            effective_diameter_mm = 0.0
            clamped = True
        thread_deduction_cm3 = (
            pi * (diameter_mm / 2) ** 2 - pi * (effective_diameter_mm / 2) ** 2
        ) * length_mm / MM3_PER_CM3

    net_cm3 = shank_cm3 + head_cm3 - thread_deduction_cm3
    if net_cm3 < 0:
        logger.warning(f"Net volume {net_cm3:.6f}cm³ is negative, clamping to zero")
        net_cm3 = 0.0
        clamped = True

    logger.debug(
        f"Volumes: shank={shank_cm3:.4f}cm³ head={head_cm3:.4f}cm³ "
        f"thread={thread_deduction_cm3:.4f}cm³ net={net_cm3:.4f}cm³"
    )

    return {
        "shank_cm3": shank_cm3,
        "head_cm3": head_cm3,
        "thread_deduction_cm3": thread_deduction_cm3,
        "net_cm3": net_cm3,
        "effective_diameter_mm": effective_diameter_mm,
        "clamped": clamped,
    }


def material_name(material: Union[Material, str, None] = None) -> str:
    """Canonical identifier of the material whose density will be used"""
    if isinstance(material, Material):
        return material.value
    if material is None:
        return DEFAULT_MATERIAL
    key = str(material).strip().upper()
    return key if key in DENSITY_G_PER_CM3 else DEFAULT_MATERIAL


def resolve_density(material: Union[Material, str, None] = None) -> float:
    """
    Density (g/cm³) for a material identifier.

    Matching is case-insensitive. None and unrecognized identifiers fall
    back to steel.
    """
    name = material_name(material)
    if isinstance(material, str) and material.strip().upper() != name:
        logger.info(f"Unknown material {material!r}, using {DEFAULT_MATERIAL} density")
    return DENSITY_G_PER_CM3[name]


def project_units(grams: float, volume_clamped: bool = False) -> WeightResult:
    """Express a mass in grams as a WeightResult (g, kg, lb, oz)"""
    return WeightResult(
        grams=grams,
        kilograms=grams / G_PER_KG,
        pounds=grams / G_PER_LB,
        ounces=grams / G_PER_OZ,
        volume_clamped=volume_clamped,
    )


def scale_weight(result: WeightResult, factor: float) -> WeightResult:
    """Scale a result by a factor, re-deriving every unit from the scaled grams"""
    return project_units(result.grams * factor, result.volume_clamped)


def grade_factor(grade: Optional[str]) -> float:
    """ISO 898-1 property class multiplier, 1.00 for unrecognized grades"""
    if grade is None:
        return DEFAULT_GRADE_FACTOR
    return GRADE_FACTORS.get(str(grade).strip(), DEFAULT_GRADE_FACTOR)


def apply_grade(result: WeightResult, grade: Optional[str]) -> WeightResult:
    """Apply the strength grade correction to all units"""
    return scale_weight(result, grade_factor(grade))


def apply_full_thread(result: WeightResult) -> WeightResult:
    """Apply the full-thread (thread to head) correction to all units"""
    return scale_weight(result, FULL_THREAD_FACTOR)


def _check_length(length) -> float:
    if isinstance(length, bool) or not isinstance(length, Real):
        raise InvalidInputError(f"Length must be a number, got {length!r}")
    length = float(length)
    if not isfinite(length) or length <= 0:
        raise InvalidInputError(f"Length must be positive, got {length}")
    return length


def calculate_bolt_mass(
    size: str,
    length: float,
    standard: Union[StandardFamily, str] = StandardFamily.METRIC,
    material: Union[Material, str, None] = None
) -> WeightResult:
    """
    Unadjusted bolt weight from the geometric model.

    Inch dimensions and length are converted to mm before the volume
    model runs; the inch pitch (threads per inch) is not used.
    """
    family = resolve_standard(standard)
    length = _check_length(length)
    dims = get_dimensions(size, family)
    density = resolve_density(material)

    if family is StandardFamily.INCH:
        volumes = calculate_volumes(
            diameter_mm=dims.shank_diameter * MM_PER_INCH,
            head_diameter_mm=dims.head_diameter * MM_PER_INCH,
            head_height_mm=dims.head_height * MM_PER_INCH,
            length_mm=length * MM_PER_INCH,
        )
    else:
        volumes = calculate_volumes(
            diameter_mm=dims.shank_diameter,
            head_diameter_mm=dims.head_diameter,
            head_height_mm=dims.head_height,
            length_mm=length,
            pitch_mm=dims.thread_pitch,
        )

    return project_units(volumes["net_cm3"] * density, volumes["clamped"])


def estimate_weight(
    size: str,
    length: float,
    standard: Union[StandardFamily, str] = StandardFamily.METRIC,
    material: Union[Material, str, None] = None,
    options: Optional[EstimateOptions] = None,
    *,
    grade: Optional[str] = None,
    full_thread: Optional[bool] = None
) -> WeightResult:
    """
    Estimate the weight of a bolt.

    Args:
        size: Nominal size ("M10" for metric, "1/2" for inch)
        length: Length under head (mm for metric families, inches for INCH)
        standard: Standard family (enum or "ISO", "DIN", "ASME", ...)
        material: Material identifier, steel if absent or unrecognized
        options: Optional grade / full-thread adjustments
        grade: Property class, overrides options.grade. Only metric
            families are graded; inch bolts ignore it
        full_thread: Apply the full-thread factor, overrides
            options.full_thread

    Returns:
        WeightResult in grams, kilograms, pounds and ounces

    Raises:
        UnknownSizeError: If the size is not in the family's table
        InvalidInputError: If length or standard family is invalid
    """
    if options is not None:
        if grade is None:
            grade = options.grade
        if full_thread is None:
            full_thread = options.full_thread

    family = resolve_standard(standard)
    result = calculate_bolt_mass(size, length, family, material)

    if grade is not None and family.is_metric:
        result = apply_grade(result, grade)
    if full_thread:
        result = apply_full_thread(result)

    return result


def estimate_from_spec(spec: FastenerSpec) -> WeightResult:
    """Estimate the weight described by a FastenerSpec"""
    return estimate_weight(
        spec.size,
        spec.length,
        spec.standard,
        spec.material,
        grade=spec.grade,
        full_thread=spec.full_thread,
    )


def estimate_nut_weight(size: str, material: Union[Material, str, None] = None) -> WeightResult:
    """
    Weight of an ASME B18.2.2 hex nut.

    Uses tabulated steel nut weights scaled by material density relative
    to steel.

    Args:
        size: Inch size token ("1/2")
        material: Material identifier, steel if absent or unrecognized

    Raises:
        UnknownSizeError: If the size has no tabulated nut weight
    """
    weight_oz = NUT_WEIGHTS_OZ.get(size)
    if weight_oz is None:
        raise UnknownSizeError(size, "ASME B18.2.2 nut")

    density_factor = resolve_density(material) / DENSITY_G_PER_CM3[DEFAULT_MATERIAL]
    return project_units(weight_oz * density_factor * G_PER_OZ)
