"""Configuration error raised for malformed validator calls.

Validation failures are never raised; they are returned as lists of
messages. ConfigurationError is reserved for calls that cannot be
evaluated at all, such as an inverted bound range.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_validation_utils"

INVERTED_BOUNDS = "inverted_bounds"
INVALID_REQUEST = "invalid_request"


class ConfigurationError(PydanticCustomError):
    """Malformed validator invocation.

    Inherits from PydanticCustomError (and therefore ValueError), so it can be
    raised from inside Pydantic validators and recovered afterwards with
    from_validation_error().

    Error types:
    - ``inverted_bounds``: both bounds given and ``min > max``
    - ``invalid_request``: any other parameter that fails model validation
    """

    @classmethod
    def inverted_bounds(cls, min: float, max: float) -> ConfigurationError:
        """Create the error for a ``min > max`` bound pair.

        Args:
            min: The requested lower bound.
            max: The requested upper bound.

        Returns:
            ConfigurationError of type ``inverted_bounds``.
        """
        return cls(
            INVERTED_BOUNDS,
            "min must be less than max",
            {"package": PACKAGE_NAME, "min": min, "max": max},
        )

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict[str, Any] | None = None
    ) -> ConfigurationError:
        """Wrap a pydantic.ValidationError or extract a contained ConfigurationError.

        Args:
            error: The ValidationError to wrap.
            context: Additional context to include in the error.

        Returns:
            ConfigurationError with extracted or converted error details.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            # An inverted range raised inside a model validator keeps its type
            for err_dict in error.errors():
                if err_dict.get("type") == INVERTED_BOUNDS:
                    ctx = {
                        "package": PACKAGE_NAME,
                        **(err_dict.get("ctx") or {}),
                    }
                    return cls(
                        INVERTED_BOUNDS,
                        err_dict.get("msg", str(error)),
                        ctx,
                    )

            error_messages = "; ".join(_describe(e) for e in error.errors())
            ctx = {
                "package": PACKAGE_NAME,
                **(context or {}),
            }
            return cls(INVALID_REQUEST, error_messages, ctx)

        ctx = {
            "package": PACKAGE_NAME,
            **(context or {}),
        }
        return cls(INVALID_REQUEST, str(error), ctx)

    @property
    def is_inverted_bounds(self) -> bool:
        """Whether this error reports a ``min > max`` bound pair."""
        return self.type == INVERTED_BOUNDS

    def __repr__(self) -> str:
        return f"ConfigurationError({self.type!r}, {self.message()!r})"


def _describe(err_dict: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in err_dict.get("loc", ()))
    message = err_dict.get("msg", "")
    return f"{location}: {message}" if location else message
