"""Tests for the error taxonomy."""

import pytest

from arbsign.domain.errors import (
    InvalidAddress,
    InvalidFixedBytes,
    InvalidInteger,
    InvalidPrivateKey,
    MissingConfig,
    NegativeValue,
    OpportunityError,
    OutOfRange,
    Rule,
    SemanticViolation,
    SigningFailure,
    UnsafeChainId,
)

ERROR_CODES = [
    (InvalidAddress, "INVALID_ADDRESS"),
    (InvalidFixedBytes, "INVALID_FIXED_BYTES"),
    (InvalidInteger, "INVALID_INTEGER"),
    (NegativeValue, "NEGATIVE_VALUE"),
    (OutOfRange, "OUT_OF_RANGE"),
    (UnsafeChainId, "UNSAFE_CHAIN_ID"),
    (InvalidPrivateKey, "INVALID_PRIVATE_KEY"),
    (SigningFailure, "SIGNING_FAILURE"),
]


@pytest.mark.parametrize(("cls", "code"), ERROR_CODES)
def test_codes(cls: type[OpportunityError], code: str) -> None:
    exc = cls("boom", name="KEY")
    assert isinstance(exc, OpportunityError)
    assert exc.code == code
    assert exc.detail() == {"key": "KEY"}
    assert str(exc) == "boom"


def test_missing_config_message() -> None:
    exc = MissingConfig("CHAIN_ID")
    assert exc.code == "MISSING_CONFIG"
    assert exc.message == "Missing env var: CHAIN_ID"
    assert exc.name == "CHAIN_ID"


def test_semantic_violation_carries_rule() -> None:
    exc = SemanticViolation(Rule.POSITIVE_DEADLINE, "DEADLINE must be greater than zero")
    assert exc.rule is Rule.POSITIVE_DEADLINE
    assert exc.message.startswith("PositiveDeadline: ")
    assert exc.detail() == {"rule": "PositiveDeadline"}


def test_detail_without_key() -> None:
    assert SigningFailure("nope").detail() == {}
