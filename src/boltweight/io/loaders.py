"""
JSON input/output for bolt weight calculations.

Typed records exchanged between the calculator, the batch layer and the
CLI, plus loaders for batch files and savers for batch reports.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import Material, StandardFamily, coerce_standard
from .schema import SCHEMA_VERSION


class DimensionProfile(BaseModel):
    """Catalogue dimensions for one nominal size of one standard family.

    Lengths are in the family's native unit (mm for metric, inches for
    inch sizes). thread_pitch is mm per thread for metric sizes, threads
    per inch for inch sizes, and None where the catalogue gives no pitch.
    """
    nominal_size: str
    shank_diameter: float
    head_diameter: float
    head_height: float
    thread_pitch: Optional[float] = None

    model_config = ConfigDict(frozen=True, extra='ignore')


class WeightResult(BaseModel):
    """One computed mass expressed in four units."""
    grams: float
    kilograms: float
    pounds: float
    ounces: float
    volume_clamped: bool = False  # Net volume went negative and was clamped to zero

    model_config = ConfigDict(frozen=True, extra='ignore')


class EstimateOptions(BaseModel):
    """Optional standard adjustments."""
    grade: Optional[str] = None  # ISO 898-1 property class, e.g. "8.8"
    full_thread: bool = False  # DIN 933 style thread to head

    model_config = ConfigDict(frozen=True, extra='ignore')


class FastenerSpec(BaseModel):
    """Caller input for a single estimate."""
    size: str
    length: float
    standard: StandardFamily = StandardFamily.METRIC
    material: Optional[str] = None
    grade: Optional[str] = None
    full_thread: bool = False

    @field_validator('standard', mode='before')
    @classmethod
    def coerce_standard_family(cls, v):
        return coerce_standard(v)

    @field_validator('material', mode='before')
    @classmethod
    def coerce_material(cls, v):
        if isinstance(v, Material):
            return v.value
        return v

    model_config = ConfigDict(extra='ignore')


class BatchItem(BaseModel):
    """One line of a bolt list."""
    size: str
    length: float
    quantity: int = 1

    model_config = ConfigDict(extra='ignore')


class BatchLine(BatchItem):
    """A bolt list line with its computed weight."""
    weight: Optional[WeightResult] = None


class BatchRequest(BaseModel):
    """A bolt list with the settings shared by all its lines."""
    standard: StandardFamily = StandardFamily.METRIC
    material: Optional[str] = None
    grade: Optional[str] = None
    full_thread: bool = False
    items: List[BatchItem]

    @field_validator('standard', mode='before')
    @classmethod
    def coerce_standard_family(cls, v):
        return coerce_standard(v)

    @field_validator('material', mode='before')
    @classmethod
    def coerce_material(cls, v):
        if isinstance(v, Material):
            return v.value
        return v

    model_config = ConfigDict(extra='ignore')


class BatchReport(BaseModel):
    """Computed bolt list with its project total."""
    standard: StandardFamily
    material: str
    lines: List[BatchLine]
    total_kilograms: float

    model_config = ConfigDict(extra='ignore')


def load_batch_json(filepath: Union[str, Path]) -> BatchRequest:
    """
    Load a bolt list from JSON.

    Accepts either a bare list of items or an object with an 'items' list
    and optional 'standard', 'material', 'grade' and 'full_thread' keys.

    Args:
        filepath: Path to JSON file

    Returns:
        BatchRequest with validated items

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON has no item list
        ValidationError: If items are missing required fields
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Batch file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if isinstance(data, list):
        data = {'items': data}

    if not isinstance(data, dict) or 'items' not in data:
        raise ValueError("Invalid batch JSON - expected a list of items or an object with 'items'")

    return BatchRequest.model_validate(data)


def report_to_dict(report: BatchReport) -> Dict[str, Any]:
    """Convert a report to a JSON-compatible dict with schema version."""
    data = report.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION
    return data


def save_report_json(report: BatchReport, filepath: Union[str, Path]) -> None:
    """
    Save a batch report to a JSON file.

    Args:
        report: Computed batch report
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    with open(filepath, 'w') as f:
        json.dump(report_to_dict(report), f, indent=2)
