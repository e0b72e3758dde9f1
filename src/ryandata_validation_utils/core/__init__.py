"""RyanData Validation Utils Core - errors and default message texts.

Usage:
    from ryandata_validation_utils.core import (
        ConfigurationError,
        PACKAGE_NAME,
        format_number,
        pluralize,
        render_pattern,
    )
"""

from __future__ import annotations

from ryandata_validation_utils.core.errors import (
    INVALID_REQUEST,
    INVERTED_BOUNDS,
    PACKAGE_NAME,
    ConfigurationError,
)
from ryandata_validation_utils.core.messages import (
    compose,
    format_number,
    pluralize,
    render_pattern,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "INVALID_REQUEST",
    "INVERTED_BOUNDS",
    "PACKAGE_NAME",
    # Message rendering
    "compose",
    "format_number",
    "pluralize",
    "render_pattern",
]
