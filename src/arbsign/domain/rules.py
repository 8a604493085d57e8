"""Semantic validation of a fully-typed Opportunity.

Field parsers guarantee syntax (non-negative integers, valid addresses);
these rules guarantee meaning. ``nonce`` is the one uint256 field that may
legitimately be zero, which is why positivity lives here and not in
:func:`~arbsign.domain.parsing.required_uint_string`.
"""

from __future__ import annotations

from itertools import combinations

from arbsign.domain.errors import Rule, SemanticViolation
from arbsign.domain.opportunity import ENV_KEYS, Opportunity

POSITIVE_AMOUNT_FIELDS: tuple[str, ...] = (
    "amountIn",
    "minOutAB",
    "minOutBC",
    "minOutCA",
    "minProfit",
)


def check_distinct_tokens(opportunity: Opportunity) -> None:
    """The route must visit three different assets."""
    hops = dict(zip(("tokenIn", "tokenMidA", "tokenMidB"), opportunity.route, strict=True))
    for (left, a), (right, b) in combinations(hops.items(), 2):
        if a == b:
            msg = f"{ENV_KEYS[left]} and {ENV_KEYS[right]} are the same token {a}"
            raise SemanticViolation(Rule.DISTINCT_TOKENS, msg, name=ENV_KEYS[right])


def check_positive_amounts(opportunity: Opportunity) -> None:
    wire = opportunity.to_wire()
    for field in POSITIVE_AMOUNT_FIELDS:
        if int(wire[field]) == 0:
            msg = f"{ENV_KEYS[field]} must be greater than zero"
            raise SemanticViolation(Rule.POSITIVE_AMOUNTS, msg, name=ENV_KEYS[field])


def check_positive_deadline(opportunity: Opportunity) -> None:
    if int(opportunity.deadline) == 0:
        msg = f"{ENV_KEYS['deadline']} must be greater than zero"
        raise SemanticViolation(Rule.POSITIVE_DEADLINE, msg, name=ENV_KEYS["deadline"])


RULES = (check_distinct_tokens, check_positive_amounts, check_positive_deadline)


def validate_opportunity(opportunity: Opportunity) -> Opportunity:
    """Apply every rule in order; the first violation is raised.

    Returns the same record so callers can chain extraction and validation.

    Raises:
        SemanticViolation: If any rule fails.
    """
    for rule in RULES:
        rule(opportunity)
    return opportunity
