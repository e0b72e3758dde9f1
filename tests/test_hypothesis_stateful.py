"""Stateful property-based tests using Hypothesis.

This module uses a RuleBasedStateMachine to interleave calls to every
validator with different parameters, checking that no call leaks state into
another.
"""

from __future__ import annotations

import re
from typing import Any

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from ryandata_validation_utils import (
    ConfigurationError,
    ValidatorProtocol,
    validate_array_length,
    validate_number_range,
    validate_object_attributes,
    validate_reg_exp,
    validate_string_length,
)
from tests.strategies import (
    PREFIXES,
    array_strategy,
    inverted_bounds_strategy,
    length_bound_strategy,
    message_strategy,
    number_strategy,
    optional,
    text_value_strategy,
)

# Reference calls re-run after every step; their results must never change
REFERENCE_CALLS: list[tuple[ValidatorProtocol, dict[str, Any], list[str]]] = [
    (
        validate_array_length,
        {"value": [], "min": 1},
        ["must have at least 1 element"],
    ),
    (
        validate_string_length,
        {"value": "abc", "max": 2, "message_prefix": "name: "},
        ["name: must be at most 2 characters long"],
    ),
    (
        validate_number_range,
        {"value": 2, "min": 4},
        ["must be at least 4"],
    ),
    (
        validate_object_attributes,
        {
            "input_object": {"a": 1, "b": 2, "c": 3},
            "mandatory_attributes": ["a", "b"],
            "optional_attributes": [],
        },
        ["contains unknown attribute: c"],
    ),
    (
        validate_reg_exp,
        {"value": "abc", "reg_exp": re.compile(r"^[0-9]+$")},
        ["must match regExp /^[0-9]+$/"],
    ),
]


class InterleavedValidatorMachine(RuleBasedStateMachine):
    """Interleaves validator calls and tracks an aggregated report.

    The aggregated report mirrors how callers concatenate the lists of
    several validators; every rule appends the list it got and the machine
    checks the total stays consistent.
    """

    def __init__(self) -> None:
        super().__init__()
        self.report: list[str] = []
        self.expected_report_size = 0

    def _record(self, errors: list[str]) -> None:
        self.report.extend(errors)
        self.expected_report_size += len(errors)

    @rule(
        value=array_strategy(),
        low=optional(length_bound_strategy()),
        message=optional(message_strategy()),
        prefix=st.sampled_from(PREFIXES),
    )
    def check_array(
        self, value: list[Any], low: int | None, message: str | None, prefix: str
    ) -> None:
        errors = validate_array_length(
            value=value, min=low, message=message, message_prefix=prefix
        )
        assert len(errors) == (1 if low is not None and len(value) < low else 0)
        self._record(errors)

    @rule(value=text_value_strategy(), high=optional(length_bound_strategy()))
    def check_string(self, value: str, high: int | None) -> None:
        errors = validate_string_length(value=value, max=high)
        assert len(errors) == (1 if high is not None and len(value) > high else 0)
        self._record(errors)

    @rule(value=number_strategy(), bounds=inverted_bounds_strategy(number_strategy()))
    def check_inverted_number(self, value: float, bounds: tuple[float, float]) -> None:
        try:
            validate_number_range(value=value, min=bounds[0], max=bounds[1])
        except ConfigurationError as e:
            assert e.is_inverted_bounds
        else:
            raise AssertionError("inverted bounds were accepted")

    @rule(
        keys=st.lists(st.sampled_from(["a", "b", "c", "d"]), unique=True),
        prefix=st.sampled_from(PREFIXES),
    )
    def check_object(self, keys: list[str], prefix: str) -> None:
        errors = validate_object_attributes(
            input_object={key: None for key in keys},
            mandatory_attributes=["a"],
            optional_attributes=["b"],
            message_prefix=prefix,
        )
        expected = int("a" not in keys) + len([k for k in keys if k not in ("a", "b")])
        assert len(errors) == expected
        self._record(errors)

    @rule(value=st.text(alphabet="abc123", max_size=6))
    def check_reg_exp(self, value: str) -> None:
        errors = validate_reg_exp(value=value, reg_exp=r"[0-9]")
        assert len(errors) == (0 if any(c.isdigit() for c in value) else 1)
        self._record(errors)

    @invariant()
    def reference_results_unchanged(self) -> None:
        for validator, params, expected in REFERENCE_CALLS:
            assert validator(**params) == expected

    @invariant()
    def report_is_consistent(self) -> None:
        assert len(self.report) == self.expected_report_size


# Create pytest test case
TestInterleavedValidators = InterleavedValidatorMachine.TestCase
TestInterleavedValidators.settings = settings(
    max_examples=30,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
