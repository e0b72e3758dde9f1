"""Request models for the validation functions.

Each validator takes one set of named, mostly optional parameters. These
Pydantic models hold those parameters, document their defaults, and run
the check itself. Requests are immutable and scoped to a single call.

Field names are snake_case; camelCase aliases (``messagePrefix``,
``inputObject``, ``mandatoryAttributes``, ``optionalAttributes``,
``regExp``) are accepted as well, so a request can be loaded straight from
configuration data.
"""

from __future__ import annotations

import re
from abc import abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ryandata_validation_utils.core.errors import ConfigurationError
from ryandata_validation_utils.core.messages import (
    array_max_text,
    array_min_text,
    compose,
    missing_attribute_text,
    number_max_text,
    number_min_text,
    pattern_mismatch_text,
    string_max_text,
    string_min_text,
    unknown_attribute_text,
)

# Numeric bound or number under test; bools and numeric strings are rejected
Bound = StrictInt | StrictFloat


class ValidationRequest(BaseModel):
    """Parameters shared by every validator.

    Subclasses add the value under test and implement check().
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    validator_name: ClassVar[str] = "validation"

    message: StrictStr | None = Field(
        default=None,
        description="Custom text replacing every default error text of this call",
    )
    message_prefix: StrictStr | None = Field(
        default=None,
        description="Text prepended verbatim (no separator) to every error of this call",
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build a request from a mapping of snake_case or camelCase keys.

        Args:
            data: Request parameters.

        Returns:
            Validated, immutable request.

        Raises:
            ConfigurationError: If the parameters do not form a valid request.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(
                e, {"validator": cls.validator_name}
            ) from e

    @classmethod
    def from_params(cls, **params: Any) -> Self:
        """Build a request from keyword arguments. See from_mapping()."""
        return cls.from_mapping(params)

    def render(self, default: str) -> str:
        """Apply message_prefix and the message override to a default text."""
        return compose(default, self.message, self.message_prefix)

    @abstractmethod
    def check(self) -> list[str]:
        """Run the validation.

        Returns:
            Error messages in the order the checks ran; empty when valid.
        """
        ...


class BoundRequest(ValidationRequest):
    """A measured quantity checked against an optional inclusive range.

    With neither bound set the check is a no-op. With both set, ``min`` must
    not exceed ``max``; an inverted range raises ConfigurationError when the
    request is built.
    """

    min: Bound | None = Field(default=None, description="Inclusive lower bound")
    max: Bound | None = Field(default=None, description="Inclusive upper bound")

    @model_validator(mode="after")
    def check_bound_order(self) -> Self:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ConfigurationError.inverted_bounds(self.min, self.max)
        return self

    @abstractmethod
    def measure(self) -> float:
        """Return the quantity compared against the bounds."""
        ...

    @abstractmethod
    def min_text(self, bound: float) -> str: ...

    @abstractmethod
    def max_text(self, bound: float) -> str: ...

    def check(self) -> list[str]:
        if self.min is None and self.max is None:
            return []

        measured = self.measure()
        errors: list[str] = []
        if self.min is not None and measured < self.min:
            errors.append(self.render(self.min_text(self.min)))
        if self.max is not None and measured > self.max:
            errors.append(self.render(self.max_text(self.max)))
        return errors


class ArrayLengthRequest(BoundRequest):
    """Bounds on the number of elements in a sequence."""

    validator_name: ClassVar[str] = "array_length"

    value: Sequence[Any] = Field(description="Sequence whose length is checked")

    def measure(self) -> int:
        return len(self.value)

    def min_text(self, bound: float) -> str:
        return array_min_text(bound)

    def max_text(self, bound: float) -> str:
        return array_max_text(bound)


class StringLengthRequest(BoundRequest):
    """Bounds on the number of characters in a string."""

    validator_name: ClassVar[str] = "string_length"

    value: StrictStr = Field(description="String whose length is checked")

    def measure(self) -> int:
        return len(self.value)

    def min_text(self, bound: float) -> str:
        return string_min_text(bound)

    def max_text(self, bound: float) -> str:
        return string_max_text(bound)


class NumberRangeRequest(BoundRequest):
    """Bounds on a number."""

    validator_name: ClassVar[str] = "number_range"

    value: Bound = Field(description="Number checked against the bounds")

    def measure(self) -> float:
        return self.value

    def min_text(self, bound: float) -> str:
        return number_min_text(bound)

    def max_text(self, bound: float) -> str:
        return number_max_text(bound)


class ObjectAttributesRequest(ValidationRequest):
    """Allowed attribute set of a mapping.

    Every mandatory attribute must be present. Keys that are neither
    mandatory nor optional are reported as unknown. Optional attributes are
    only used to exempt keys from the unknown-attribute check.
    """

    validator_name: ClassVar[str] = "object_attributes"

    input_object: Mapping[str, Any] = Field(
        description="Mapping whose keys are checked; insertion order is preserved"
    )
    mandatory_attributes: Sequence[StrictStr] = Field(
        description="Attribute names that must be present"
    )
    optional_attributes: Sequence[StrictStr] = Field(
        default=(),
        description="Attribute names that may be present",
    )

    def check(self) -> list[str]:
        errors: list[str] = []
        allowed = {*self.mandatory_attributes, *self.optional_attributes}

        for attribute in self.mandatory_attributes:
            if attribute not in self.input_object:
                errors.append(self.render(missing_attribute_text(attribute)))

        for key in self.input_object:
            if key not in allowed:
                errors.append(self.render(unknown_attribute_text(key)))

        return errors


class RegExpRequest(ValidationRequest):
    """A string that must contain a match for a regular expression.

    Matching uses search semantics: the pattern may match anywhere unless it
    is anchored.
    """

    validator_name: ClassVar[str] = "reg_exp"

    value: StrictStr = Field(description="String searched for a match")
    reg_exp: re.Pattern[str] = Field(
        description="Compiled pattern, or a pattern string to compile"
    )

    def check(self) -> list[str]:
        if self.reg_exp.search(self.value) is None:
            return [self.render(pattern_mismatch_text(self.reg_exp))]
        return []
