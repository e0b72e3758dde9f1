"""ryandata-validation-utils: stateless validation primitives.

This package provides small checks for configuration values that report
problems as human-readable messages instead of raising:
- Array length, string length and number range bounds
- Allowed attribute sets of mappings
- Regular-expression matching

Only a malformed call (an inverted ``min``/``max`` range, or parameters of the
wrong type) raises ConfigurationError.

Quick Start:
    >>> from ryandata_validation_utils import validate_array_length, validate_reg_exp
    >>> validate_array_length(value=[], min=2)
    ['must have at least 2 elements']
    >>> validate_reg_exp(value="abc", reg_exp=r"^[0-9]+$", message_prefix="port: ")
    ['port: must match regExp /^[0-9]+$/']

    # Aggregate a report for a composite object
    >>> props = {"name": "", "replicas": 0}
    >>> errors = [
    ...     *validate_object_attributes(
    ...         input_object=props, mandatory_attributes=["name"], optional_attributes=["replicas"]
    ...     ),
    ...     *validate_string_length(value=props["name"], min=1, message_prefix="name: "),
    ...     *validate_number_range(value=props["replicas"], min=1, message_prefix="replicas: "),
    ... ]
    >>> errors
    ['name: must be at least 1 character long', 'replicas: must be at least 1']
"""

from __future__ import annotations

from ryandata_validation_utils.core import (
    PACKAGE_NAME,
    ConfigurationError,
    format_number,
    pluralize,
    render_pattern,
)
from ryandata_validation_utils.models import (
    ArrayLengthRequest,
    BoundRequest,
    NumberRangeRequest,
    ObjectAttributesRequest,
    RegExpRequest,
    StringLengthRequest,
    ValidationRequest,
)
from ryandata_validation_utils.protocols import ValidationRequestProtocol, ValidatorProtocol
from ryandata_validation_utils.validation import (
    validate_array_length,
    validate_number_range,
    validate_object_attributes,
    validate_reg_exp,
    validate_string_length,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-validation-utils"

__all__ = [
    # Version
    "__version__",
    # Validators
    "validate_array_length",
    "validate_string_length",
    "validate_number_range",
    "validate_object_attributes",
    "validate_reg_exp",
    # Request models
    "ValidationRequest",
    "BoundRequest",
    "ArrayLengthRequest",
    "StringLengthRequest",
    "NumberRangeRequest",
    "ObjectAttributesRequest",
    "RegExpRequest",
    # Errors
    "ConfigurationError",
    "PACKAGE_NAME",
    # Protocols
    "ValidationRequestProtocol",
    "ValidatorProtocol",
    # Message rendering
    "format_number",
    "pluralize",
    "render_pattern",
]
