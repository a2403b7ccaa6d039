"""
Engineering constants for bolt weight calculations.

This module centralizes all numerical constants used in the calculator and
validation modules. Each constant is documented with its source (ISO/DIN
standard, ASME standard, or engineering practice).

MODIFICATION GUIDELINES:
- Unit conversion constants are fixed; results must be reproducible
  against other implementations of the same model
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _G, _G_PER_CM3)

Constants are grouped by category:
- Material densities
- Unit conversion
- ISO 68-1: Metric thread form
- Standard adjustment factors
- ASME B18.2.2: Nut weights
- Validation ranges
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# =============================================================================
# Material Densities
# =============================================================================

# Density per material identifier (g/cm³)
DENSITY_G_PER_CM3: Mapping[str, float] = MappingProxyType({
    "STEEL": 7.85,            # 7850 kg/m³, carbon/alloy steel
    "STAINLESS_STEEL": 7.93,  # A2/A4 austenitic stainless
    "ALUMINIUM": 2.70,
    "BRASS": 8.50,
})

# Used for absent or unrecognized material identifiers
DEFAULT_MATERIAL: str = "STEEL"

# =============================================================================
# Unit Conversion
# =============================================================================

MM_PER_INCH: float = 25.4
MM3_PER_CM3: float = 1000.0

G_PER_KG: float = 1000.0
G_PER_LB: float = 453.592
G_PER_OZ: float = 28.3495

# Ad-hoc conversion factors for convert_units (value × factor)
CONVERSION_FACTORS: Mapping[Tuple[str, str], float] = MappingProxyType({
    ("mm", "in"): 0.0393701,
    ("in", "mm"): 25.4,
    ("g", "oz"): 0.035274,
    ("oz", "g"): 28.3495,
    ("kg", "lb"): 2.20462,
    ("lb", "kg"): 0.453592,
})

# =============================================================================
# ISO 68-1 - Metric Thread Form
# =============================================================================

# Thread depth as a fraction of pitch (external thread, basic profile)
THREAD_DEPTH_FACTOR: float = 0.6134

# =============================================================================
# Standard Adjustment Factors (empirical)
# =============================================================================

# ISO 898-1 property class -> weight multiplier
# Higher grades carry slightly more material in practice
GRADE_FACTORS: Mapping[str, float] = MappingProxyType({
    "4.6": 0.98,
    "5.8": 0.99,
    "8.8": 1.00,
    "10.9": 1.01,
    "12.9": 1.02,
})
DEFAULT_GRADE_FACTOR: float = 1.00
BASELINE_GRADE: str = "8.8"

# DIN 933 full-thread bolts: thread runs to the head, +2.5%
FULL_THREAD_FACTOR: float = 1.025

# =============================================================================
# ASME B18.2.2 - Hex Nut Weights
# =============================================================================

# Steel hex nut weight per nominal size (oz)
NUT_WEIGHTS_OZ: Mapping[str, float] = MappingProxyType({
    "1/4": 1.5,
    "5/16": 2.8,
    "3/8": 5.0,
    "1/2": 11.0,
    "5/8": 19.0,
    "3/4": 31.0,
    "7/8": 50.0,
    "1": 75.0,
})

# =============================================================================
# Validation Ranges (catalogue practice)
# =============================================================================

METRIC_LENGTH_MIN_MM: float = 10.0
METRIC_LENGTH_MAX_MM: float = 500.0

INCH_LENGTH_MIN_IN: float = 0.5
INCH_LENGTH_MAX_IN: float = 12.0
