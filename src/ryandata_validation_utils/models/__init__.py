"""Request models package.

One immutable Pydantic model per validator kind, plus the shared bases.
"""

from __future__ import annotations

from ryandata_validation_utils.models.requests import (
    ArrayLengthRequest,
    Bound,
    BoundRequest,
    NumberRangeRequest,
    ObjectAttributesRequest,
    RegExpRequest,
    StringLengthRequest,
    ValidationRequest,
)

__all__ = [
    # Bases
    "Bound",
    "ValidationRequest",
    "BoundRequest",
    # Bound validators
    "ArrayLengthRequest",
    "StringLengthRequest",
    "NumberRangeRequest",
    # Structural and pattern validators
    "ObjectAttributesRequest",
    "RegExpRequest",
]
