"""Typed parsers for raw configuration strings.

Each parser reads one key from an explicit :data:`ConfigSource` and
either returns the strict typed value or raises a specific
:class:`~arbsign.domain.errors.OpportunityError`. Nothing here touches
``os.environ``; the caller decides where configuration comes from.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    to_checksum_address,
)

from arbsign.domain.errors import (
    InvalidAddress,
    InvalidFixedBytes,
    InvalidInteger,
    InvalidPrivateKey,
    MissingConfig,
    NegativeValue,
    OutOfRange,
    UnsafeChainId,
)

ConfigSource = Mapping[str, str]

UINT24_MAX = 2**24 - 1
UINT256_LIMIT = 2**256
MAX_SAFE_CHAIN_ID = 2**53 - 1

_BYTES32_RE = re.compile(r"0x[0-9a-fA-F]{64}")
_INTEGER_RE = re.compile(r"-?[0-9]+|0[xX][0-9a-fA-F]+")


def is_valid_address(value: str) -> bool:
    """True for 40 hex digits whose mixed-case form, if any, is a valid checksum."""
    if not is_hex_address(value):
        return False
    return not is_checksum_formatted_address(value) or is_checksum_address(value)


def required_string(source: ConfigSource, name: str) -> str:
    """Return the raw value for *name*; absent or empty is an error."""
    value = source.get(name)
    if not value:
        raise MissingConfig(name)
    return value


def required_address(source: ConfigSource, name: str) -> str:
    """Return *name* as a checksummed account address."""
    value = required_string(source, name)
    if not is_valid_address(value):
        msg = f"{name} is not a valid address: {value!r}"
        raise InvalidAddress(msg, name=name)
    return to_checksum_address(value)


def required_bytes32(source: ConfigSource, name: str) -> str:
    """Return *name* as a lower-case ``0x``-prefixed 32-byte hex string."""
    value = required_string(source, name)
    if not _BYTES32_RE.fullmatch(value):
        msg = f"{name} must be 0x-prefixed hex of exactly 32 bytes: {value!r}"
        raise InvalidFixedBytes(msg, name=name)
    return value.lower()


def _parse_integer(name: str, value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        msg = f"{name} is not an integer: {value!r}"
        raise InvalidInteger(msg, name=name)
    try:
        return int(value, 16) if value[:2].lower() == "0x" else int(value)
    except ValueError as exc:
        # int() refuses digit strings past the interpreter's conversion limit
        msg = f"{name} is too large"
        raise OutOfRange(msg, name=name) from exc


def required_uint_string(source: ConfigSource, name: str) -> str:
    """Return *name* as a canonical non-negative uint256 decimal string.

    Zero is accepted here; positivity is a semantic rule applied later.
    """
    number = _parse_integer(name, required_string(source, name))
    if number < 0:
        msg = f"{name} must not be negative: {number}"
        raise NegativeValue(msg, name=name)
    if number >= UINT256_LIMIT:
        msg = f"{name} does not fit in uint256"
        raise OutOfRange(msg, name=name)
    return str(number)


def required_uint24(source: ConfigSource, name: str) -> int:
    """Return *name* as an int in ``(0, 2**24 - 1]``."""
    number = _parse_integer(name, required_string(source, name))
    if not 0 < number <= UINT24_MAX:
        msg = f"{name} must be in range 1..{UINT24_MAX}: {number}"
        raise OutOfRange(msg, name=name)
    return number


def required_chain_id(source: ConfigSource, name: str) -> int:
    """Return *name* as a positive chain id representable without precision loss."""
    number = int(required_uint_string(source, name))
    if not 0 < number <= MAX_SAFE_CHAIN_ID:
        msg = f"{name} must be a positive safe integer: {number}"
        raise UnsafeChainId(msg, name=name)
    return number


def required_private_key(source: ConfigSource, name: str) -> str:
    """Return *name* as a ``0x``-prefixed 32-byte hex private key."""
    value = required_string(source, name)
    if not _BYTES32_RE.fullmatch(value):
        msg = f"{name} must be 0x-prefixed hex of exactly 32 bytes"
        raise InvalidPrivateKey(msg, name=name)
    return value
