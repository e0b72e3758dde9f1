from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValidationRequestProtocol(Protocol):
    """Protocol for request objects that can run their own check.

    Implementations hold the parameters of one validator call and return
    the resulting error messages, without raising on invalid values.
    """

    def check(self) -> list[str]:
        """Run the validation.

        Returns:
            Error messages in the order the checks ran; empty when valid.
        """
        ...


class ValidatorProtocol(Protocol):
    """Protocol for validation functions.

    Callers that build a full report for a composite object can collect
    validators of this shape and concatenate their results.
    """

    def __call__(self, **params: Any) -> list[str]:
        """Validate a value described by keyword parameters.

        Returns:
            Error messages; empty when valid.

        Raises:
            ConfigurationError: If the parameters are malformed.
        """
        ...
