"""Validation function implementations.

This module provides the five stateless validators: array length,
string length, number range, object attributes and regular expression.
"""

from ryandata_validation_utils.validation.validators import (
    validate_array_length,
    validate_number_range,
    validate_object_attributes,
    validate_reg_exp,
    validate_string_length,
)

__all__ = [
    "validate_array_length",
    "validate_string_length",
    "validate_number_range",
    "validate_object_attributes",
    "validate_reg_exp",
]
