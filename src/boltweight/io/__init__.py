"""
Boltweight IO - typed records, batch loaders and report exporters.

Example:
    >>> from boltweight.io import load_batch_json, save_report_json
    >>> from boltweight.calculator import build_report
    >>>
    >>> request = load_batch_json("bolts.json")
    >>> report = build_report(request.items, request.standard, request.material)
    >>> save_report_json(report, "report.json")
"""

from .loaders import (
    load_batch_json,
    save_report_json,
    report_to_dict,
    DimensionProfile,
    WeightResult,
    EstimateOptions,
    FastenerSpec,
    BatchItem,
    BatchLine,
    BatchRequest,
    BatchReport,
)

from .schema import SCHEMA_VERSION

__all__ = [
    # Loaders
    "load_batch_json",
    "save_report_json",
    "report_to_dict",

    # Records
    "DimensionProfile",
    "WeightResult",
    "EstimateOptions",
    "FastenerSpec",
    "BatchItem",
    "BatchLine",
    "BatchRequest",
    "BatchReport",

    # Schema
    "SCHEMA_VERSION",
]
