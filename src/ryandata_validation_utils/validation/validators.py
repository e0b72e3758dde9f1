"""Validation functions.

Every function takes keyword arguments only and returns a list of error
messages, empty when the value is valid. Expected validation failures are
never raised. A malformed call (for example ``min > max``, or a value of the
wrong type) raises ConfigurationError.

Example:
    >>> validate_array_length(value=[], min=1)
    ['must have at least 1 element']
    >>> validate_number_range(value=2, min=4, message_prefix="port: ")
    ['port: must be at least 4']
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from ryandata_validation_utils.core.errors import ConfigurationError
from ryandata_validation_utils.models.requests import (
    ArrayLengthRequest,
    NumberRangeRequest,
    ObjectAttributesRequest,
    RegExpRequest,
    StringLengthRequest,
    ValidationRequest,
)

logger = logging.getLogger(__name__)


def _run(request_cls: type[ValidationRequest], params: dict[str, Any]) -> list[str]:
    try:
        request = request_cls.from_mapping(params)
    except ConfigurationError as e:
        logger.debug("Rejected %s request: %s", request_cls.validator_name, e)
        raise

    errors = request.check()
    logger.debug("%s check found %d error(s)", request_cls.validator_name, len(errors))
    return errors


def validate_array_length(
    *,
    value: Sequence[Any],
    min: float | None = None,
    max: float | None = None,
    message: str | None = None,
    message_prefix: str | None = None,
) -> list[str]:
    """Validate that the length of a sequence falls within optional bounds.

    Args:
        value: The sequence to validate.
        min: Minimum allowed length (inclusive).
        max: Maximum allowed length (inclusive).
        message: Custom text replacing the default min and max texts.
        message_prefix: Text prepended to every error message.

    Returns:
        Error messages; empty if the length is valid or no bounds are given.

    Raises:
        ConfigurationError: If both bounds are given and ``min > max``.
    """
    return _run(
        ArrayLengthRequest,
        {
            "value": value,
            "min": min,
            "max": max,
            "message": message,
            "message_prefix": message_prefix,
        },
    )


def validate_string_length(
    *,
    value: str,
    min: float | None = None,
    max: float | None = None,
    message: str | None = None,
    message_prefix: str | None = None,
) -> list[str]:
    """Validate that the length of a string falls within optional bounds.

    Args:
        value: The string to validate.
        min: Minimum allowed number of characters (inclusive).
        max: Maximum allowed number of characters (inclusive).
        message: Custom text replacing the default min and max texts.
        message_prefix: Text prepended to every error message.

    Returns:
        Error messages; empty if the length is valid or no bounds are given.

    Raises:
        ConfigurationError: If both bounds are given and ``min > max``.
    """
    return _run(
        StringLengthRequest,
        {
            "value": value,
            "min": min,
            "max": max,
            "message": message,
            "message_prefix": message_prefix,
        },
    )


def validate_number_range(
    *,
    value: float,
    min: float | None = None,
    max: float | None = None,
    message: str | None = None,
    message_prefix: str | None = None,
) -> list[str]:
    """Validate that a number falls within optional bounds.

    Args:
        value: The number to validate.
        min: Minimum allowed value (inclusive).
        max: Maximum allowed value (inclusive).
        message: Custom text replacing the default min and max texts.
        message_prefix: Text prepended to every error message.

    Returns:
        Error messages; empty if the number is valid or no bounds are given.

    Raises:
        ConfigurationError: If both bounds are given and ``min > max``.
    """
    return _run(
        NumberRangeRequest,
        {
            "value": value,
            "min": min,
            "max": max,
            "message": message,
            "message_prefix": message_prefix,
        },
    )


def validate_object_attributes(
    *,
    input_object: Mapping[str, Any],
    mandatory_attributes: Sequence[str],
    optional_attributes: Sequence[str] = (),
    message: str | None = None,
    message_prefix: str | None = None,
) -> list[str]:
    """Validate that a mapping holds only the allowed attributes.

    Missing mandatory attributes are reported first, in the order given,
    then unknown keys, in the mapping's iteration order.

    Args:
        input_object: The mapping to validate.
        mandatory_attributes: Attribute names that must be present.
        optional_attributes: Attribute names that may be present.
        message: Custom text replacing every generated error text.
        message_prefix: Text prepended to every error message.

    Returns:
        Error messages; empty if the mapping is valid.
    """
    return _run(
        ObjectAttributesRequest,
        {
            "input_object": input_object,
            "mandatory_attributes": mandatory_attributes,
            "optional_attributes": optional_attributes,
            "message": message,
            "message_prefix": message_prefix,
        },
    )


def validate_reg_exp(
    *,
    value: str,
    reg_exp: re.Pattern[str] | str,
    message: str | None = None,
    message_prefix: str | None = None,
) -> list[str]:
    """Validate that a string contains a match for a regular expression.

    Args:
        value: The string to validate.
        reg_exp: Compiled pattern, or a pattern string to compile.
        message: Custom text replacing the default ``must match regExp /.../``.
        message_prefix: Text prepended to the error message.

    Returns:
        A single error message if there is no match, otherwise an empty list.
    """
    return _run(
        RegExpRequest,
        {
            "value": value,
            "reg_exp": reg_exp,
            "message": message,
            "message_prefix": message_prefix,
        },
    )
