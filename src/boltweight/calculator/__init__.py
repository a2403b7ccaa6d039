"""
Bolt Weight Calculator - mass estimation for threaded fasteners.

Estimates bolt weight from nominal size, length, material and standard
family by geometric approximation. All estimate functions return
WeightResult models.

Example:
    >>> from boltweight.calculator import estimate_weight
    >>>
    >>> weight = estimate_weight("M10", 50, "ISO", "STEEL", grade="10.9")
    >>> print(f"{weight.grams:.1f} g")
"""

from .core import (
    # Volume model
    calculate_shank_volume,
    calculate_head_volume,
    calculate_volumes,

    # Density and units
    material_name,
    resolve_density,
    project_units,

    # Standard adjustments
    grade_factor,
    scale_weight,
    apply_grade,
    apply_full_thread,

    # Estimators
    calculate_bolt_mass,
    estimate_weight,
    estimate_from_spec,
    estimate_nut_weight,
)

from .dimensions import (
    METRIC_DIMENSIONS,
    INCH_DIMENSIONS,
    METRIC_CARRIAGE_DIMENSIONS,
    DIMENSION_TABLES,
    get_dimensions,
    available_sizes,
)

from .batch import (
    calculate_batch,
    calculate_project_weight,
    build_report,
)

from .validation import (
    validate_bolt_spec,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .units import convert_units

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from ..enums import StandardFamily, Material
from ..errors import BoltWeightError, UnknownSizeError, InvalidInputError
from ..io import DimensionProfile, WeightResult, EstimateOptions, FastenerSpec


__all__ = [
    # Enums
    "StandardFamily",
    "Material",

    # Errors
    "BoltWeightError",
    "UnknownSizeError",
    "InvalidInputError",

    # Records
    "DimensionProfile",
    "WeightResult",
    "EstimateOptions",
    "FastenerSpec",

    # Dimension tables
    "METRIC_DIMENSIONS",
    "INCH_DIMENSIONS",
    "METRIC_CARRIAGE_DIMENSIONS",
    "DIMENSION_TABLES",
    "get_dimensions",
    "available_sizes",

    # Volume model
    "calculate_shank_volume",
    "calculate_head_volume",
    "calculate_volumes",

    # Density and units
    "material_name",
    "resolve_density",
    "project_units",

    # Standard adjustments
    "grade_factor",
    "scale_weight",
    "apply_grade",
    "apply_full_thread",

    # Estimators
    "calculate_bolt_mass",
    "estimate_weight",
    "estimate_from_spec",
    "estimate_nut_weight",

    # Batch
    "calculate_batch",
    "calculate_project_weight",
    "build_report",

    # Validation
    "validate_bolt_spec",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Units
    "convert_units",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
