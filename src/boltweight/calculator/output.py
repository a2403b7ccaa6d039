"""Output formatters for bolt weight results.

Converts WeightResult and BatchReport models to JSON, Markdown and plain
text summaries.

Uses Pydantic's model_dump(mode='json') for serialization including
automatic enum-to-string conversion.
"""

import json
from typing import Optional, TYPE_CHECKING, Union

from ..io import BatchReport, FastenerSpec, WeightResult
from ..io.schema import SCHEMA_VERSION
from .core import material_name

if TYPE_CHECKING:
    from .validation import ValidationResult


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _messages_to_list(messages) -> list:
    return [
        {
            'severity': msg.severity.value,
            'code': msg.code,
            'message': msg.message,
            'suggestion': msg.suggestion
        }
        for msg in messages
    ]


def to_json(
    result: Union[WeightResult, BatchReport],
    spec: Optional[FastenerSpec] = None,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert a WeightResult or BatchReport to JSON string.

    Args:
        result: Single weight or batch report
        spec: Optional input spec to echo alongside a single weight
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version and the result fields
    """
    if isinstance(result, BatchReport):
        data = _model_to_dict(result)
    else:
        data = {'weight': _model_to_dict(result)}
        if spec is not None:
            data['spec'] = _model_to_dict(spec)

    data['schema_version'] = SCHEMA_VERSION

    if validation:
        data['validation'] = {
            'valid': validation.valid,
            'errors': _messages_to_list(validation.errors),
            'warnings': _messages_to_list(validation.warnings),
            'infos': _messages_to_list(validation.infos),
        }

    return json.dumps(data, indent=indent)


def to_markdown(
    report: BatchReport,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert a BatchReport to a markdown bill of weights.

    Args:
        report: BatchReport from build_report()
        validation: Optional validation results to include

    Returns:
        Markdown string with one table row per line and the project total
    """
    unit = report.standard.length_unit

    md = "# Bolt Weight Report\n\n"
    md += f"| Parameter | Value |\n"
    md += f"|-----------|-------|\n"
    md += f"| Standard | {report.standard.name} |\n"
    md += f"| Material | {report.material} |\n"
    md += f"| Lines | {len(report.lines)} |\n\n"

    md += "## Lines\n\n"
    md += f"| Size | Length ({unit}) | Qty | Unit Weight (g) | Line Weight (kg) |\n"
    md += f"|------|--------|-----|-----------------|------------------|\n"
    for line in report.lines:
        grams = line.weight.grams if line.weight else 0.0
        line_kg = (line.weight.kilograms if line.weight else 0.0) * line.quantity
        md += f"| {line.size} | {line.length:g} | {line.quantity} | {grams:.2f} | {line_kg:.4f} |\n"
    md += "\n"

    md += f"**Project Total:** {report.total_kilograms:.4f} kg\n"

    if any(line.weight and line.weight.volume_clamped for line in report.lines):
        md += "\n> Some lines had thread depth beyond the shank radius; their volume was clamped.\n"

    if validation and validation.messages:
        md += "\n## Validation\n\n"
        for msg in validation.messages:
            md += f"- **{msg.severity.value.upper()}** `{msg.code}`: {msg.message}\n"

    return md


def to_summary(result: WeightResult, spec: Optional[FastenerSpec] = None) -> str:
    """Convert a WeightResult to formatted text summary.

    Args:
        result: Weight from estimate_weight()
        spec: Optional input spec for the header line

    Returns:
        Multi-line formatted summary string
    """
    lines = ["═══ Bolt Weight ═══"]

    if spec is not None:
        header = f"{spec.size} x {spec.length:g} {spec.standard.length_unit} ({spec.standard.name}, {material_name(spec.material)})"
        lines.append(header)
        if spec.grade:
            lines.append(f"Grade: {spec.grade}")
        if spec.full_thread:
            lines.append("Full thread: Yes")
        lines.append("")

    lines.extend([
        f"  Grams:     {result.grams:.2f} g",
        f"  Kilograms: {result.kilograms:.4f} kg",
        f"  Pounds:    {result.pounds:.4f} lb",
        f"  Ounces:    {result.ounces:.3f} oz",
    ])

    if result.volume_clamped:
        lines.extend(["", "Note: volume clamped (thread depth exceeds shank radius)"])

    return "\n".join(lines)
