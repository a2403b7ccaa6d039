"""
Bolt Weight Calculator - Validation Rules

Advisory checks on a bolt specification before it is estimated:
- Size token format per standard family
- Length within the catalogue range of the family

Findings are warnings; the estimator itself remains the authority on
what it can compute. Only an unrecognized standard family is an error.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import List, Optional, Union

from ..enums import StandardFamily, coerce_standard
from .constants import (
    INCH_LENGTH_MAX_IN,
    INCH_LENGTH_MIN_IN,
    METRIC_LENGTH_MAX_MM,
    METRIC_LENGTH_MIN_MM,
)
from .dimensions import INCH_DIMENSIONS

_METRIC_SIZE = re.compile(r"^M\d+")


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]

    def as_strings(self) -> List[str]:
        """Messages as plain strings, in order"""
        return [m.message for m in self.messages]


def validate_bolt_spec(
    size: str,
    length: float,
    standard: Union[StandardFamily, str] = StandardFamily.METRIC
) -> ValidationResult:
    """
    Validate a bolt specification against catalogue conventions.

    Args:
        size: Nominal size token
        length: Length (mm for metric families, inches for INCH)
        standard: Standard family (enum or accepted alias)

    Returns:
        ValidationResult with all findings
    """
    try:
        family = coerce_standard(standard)
    except ValueError:
        return ValidationResult(valid=False, messages=[ValidationMessage(
            severity=Severity.ERROR,
            code="STANDARD_UNKNOWN",
            message=f"Unrecognized standard family: {standard!r}",
            suggestion="Use one of: " + ", ".join(f.name for f in StandardFamily)
        )])

    messages: List[ValidationMessage] = []
    length_is_number = isinstance(length, Real) and not isinstance(length, bool)
    if not length_is_number:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LENGTH_NOT_NUMBER",
            message="Length should be a number",
            suggestion=f"Got {length!r}"
        ))

    if family.is_metric:
        messages.extend(_validate_metric_size(size))
        if length_is_number:
            messages.extend(_validate_metric_length(length))
    else:
        messages.extend(_validate_inch_size(size))
        if length_is_number:
            messages.extend(_validate_inch_length(length))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_metric_size(size: str) -> List[ValidationMessage]:
    """Metric sizes are written M followed by the diameter"""
    if isinstance(size, str) and _METRIC_SIZE.match(size):
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="METRIC_SIZE_FORMAT",
        message="Metric bolts should start with M (e.g., M10)",
        suggestion=f"Got {size!r}"
    )]


def _validate_metric_length(length: float) -> List[ValidationMessage]:
    if METRIC_LENGTH_MIN_MM <= length <= METRIC_LENGTH_MAX_MM:
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="METRIC_LENGTH_RANGE",
        message=f"Length should be between {METRIC_LENGTH_MIN_MM:.0f}-{METRIC_LENGTH_MAX_MM:.0f} mm for metric bolts",
        suggestion=f"Got {length} mm"
    )]


def _validate_inch_size(size: str) -> List[ValidationMessage]:
    if isinstance(size, str) and size in INCH_DIMENSIONS:
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="INCH_SIZE_UNKNOWN",
        message=f"ASME size should be one of: {', '.join(INCH_DIMENSIONS)}",
        suggestion=f"Got {size!r}"
    )]


def _validate_inch_length(length: float) -> List[ValidationMessage]:
    if INCH_LENGTH_MIN_IN <= length <= INCH_LENGTH_MAX_IN:
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="INCH_LENGTH_RANGE",
        message=f"Length should be between {INCH_LENGTH_MIN_IN}-{INCH_LENGTH_MAX_IN:.0f} inches for ASME bolts",
        suggestion=f"Got {length} in"
    )]
