"""Error taxonomy for the opportunity pipeline.

Every failure is terminal: the first error raised aborts the run and is
reported verbatim. The service layer maps each error onto a
``ServiceError`` using the class-level ``code``.

INVARIANT: messages never contain private key material.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class Rule(StrEnum):
    """Cross-field rules enforced before signing."""

    DISTINCT_TOKENS = "DistinctTokens"
    POSITIVE_AMOUNTS = "PositiveAmounts"
    POSITIVE_DEADLINE = "PositiveDeadline"
    CHAIN_ID_SAFETY = "ChainIdSafety"


class OpportunityError(Exception):
    """Base class for all pipeline failures.

    Attributes:
        code: Stable machine-readable error code.
        name: Configuration key that failed, or None for record-level rules.
    """

    code: ClassVar[str] = "OPPORTUNITY_ERROR"

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name

    def detail(self) -> dict[str, str]:
        """Structured context for ``ServiceError.detail``."""
        return {"key": self.name} if self.name else {}


class MissingConfig(OpportunityError):
    code = "MISSING_CONFIG"

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing env var: {name}", name=name)


class InvalidAddress(OpportunityError):
    code = "INVALID_ADDRESS"


class InvalidFixedBytes(OpportunityError):
    code = "INVALID_FIXED_BYTES"


class InvalidInteger(OpportunityError):
    code = "INVALID_INTEGER"


class NegativeValue(OpportunityError):
    code = "NEGATIVE_VALUE"


class OutOfRange(OpportunityError):
    code = "OUT_OF_RANGE"


class UnsafeChainId(OpportunityError):
    code = "UNSAFE_CHAIN_ID"


class InvalidPrivateKey(OpportunityError):
    code = "INVALID_PRIVATE_KEY"


class SemanticViolation(OpportunityError):
    """A cross-field rule failed on an otherwise well-typed record."""

    code = "SEMANTIC_VIOLATION"

    def __init__(self, rule: Rule, message: str, *, name: str | None = None) -> None:
        super().__init__(f"{rule}: {message}", name=name)
        self.rule = rule

    def detail(self) -> dict[str, str]:
        return {**super().detail(), "rule": str(self.rule)}


class SigningFailure(OpportunityError):
    code = "SIGNING_FAILURE"
