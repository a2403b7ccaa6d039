"""
Boltweight - geometric weight estimation for threaded fasteners.

Estimates bolt and nut weight from nominal size, length, material and
standard (ISO/DIN metric, ASME/ANSI inch, DIN 603 carriage).

Example:
    >>> from boltweight import estimate_weight, StandardFamily
    >>>
    >>> weight = estimate_weight("M10", 50, StandardFamily.METRIC, "STEEL")
    >>> print(f"{weight.kilograms:.4f} kg / {weight.pounds:.4f} lb")

Note: All imports are lazy-loaded. Importing the enums does not pull in
Pydantic.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"StandardFamily", "Material"}

_ERRORS = {"BoltWeightError", "UnknownSizeError", "InvalidInputError"}

_CALCULATOR = {
    "estimate_weight",
    "estimate_from_spec",
    "estimate_nut_weight",
    "get_dimensions",
    "available_sizes",
    "resolve_density",
    "apply_grade",
    "apply_full_thread",
    "calculate_batch",
    "calculate_project_weight",
    "build_report",
    "validate_bolt_spec",
    "convert_units",
    "Severity",
    "ValidationResult",
}

_IO = {
    "load_batch_json",
    "save_report_json",
    "DimensionProfile",
    "WeightResult",
    "EstimateOptions",
    "FastenerSpec",
    "BatchItem",
    "BatchLine",
    "BatchRequest",
    "BatchReport",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _ERRORS:
        if "errors" not in _modules:
            from . import errors
            _modules["errors"] = errors
        return getattr(_modules["errors"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'boltweight' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums
    "StandardFamily",
    "Material",

    # Errors
    "BoltWeightError",
    "UnknownSizeError",
    "InvalidInputError",

    # Calculator
    "estimate_weight",
    "estimate_from_spec",
    "estimate_nut_weight",
    "get_dimensions",
    "available_sizes",
    "resolve_density",
    "apply_grade",
    "apply_full_thread",
    "calculate_batch",
    "calculate_project_weight",
    "build_report",
    "validate_bolt_spec",
    "convert_units",
    "Severity",
    "ValidationResult",

    # IO
    "load_batch_json",
    "save_report_json",
    "DimensionProfile",
    "WeightResult",
    "EstimateOptions",
    "FastenerSpec",
    "BatchItem",
    "BatchLine",
    "BatchRequest",
    "BatchReport",
]
