"""EIP-712 signing adapter over eth-account.

The only module that handles key material. Library errors of any kind
surface as :class:`~arbsign.domain.errors.SigningFailure`. Errors raised
while handling the key are not chained, so their text cannot leak it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from eth_account import Account
from eth_account.messages import SignableMessage, encode_typed_data
from eth_utils import to_checksum_address, to_hex

from arbsign.domain.errors import SigningFailure
from arbsign.domain.opportunity import OPPORTUNITY_SCHEMA, PRIMARY_TYPE, schema_fields

if TYPE_CHECKING:
    from arbsign.domain.opportunity import Opportunity, SigningDomain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedOpportunity:
    """Signer address, 65-byte signature, and the signed EIP-712 digest."""

    signer: str
    signature: str
    digest: str


def encode_opportunity(domain: SigningDomain, opportunity: Opportunity) -> SignableMessage:
    """Encode *opportunity* under *domain* with the fixed Opportunity schema."""
    try:
        return encode_typed_data(
            domain_data=domain.to_domain_data(),
            message_types={PRIMARY_TYPE: schema_fields(OPPORTUNITY_SCHEMA)},
            message_data=opportunity.to_message(),
        )
    except Exception as exc:
        msg = f"Could not encode typed data: {exc}"
        raise SigningFailure(msg) from exc


def sign_typed_data(
    domain: SigningDomain,
    opportunity: Opportunity,
    private_key: str,
) -> SignedOpportunity:
    """Sign *opportunity* with *private_key* and derive the signer address."""
    signable = encode_opportunity(domain, opportunity)
    try:
        account = Account.from_key(private_key)
        signed = account.sign_message(signable)
    except Exception as exc:
        # Library messages for bad keys may echo the key; keep only the type.
        msg = f"Signing failed ({type(exc).__name__})"
        raise SigningFailure(msg) from None
    logger.debug("Signed opportunity digest %s", to_hex(signed.message_hash))
    return SignedOpportunity(
        signer=to_checksum_address(account.address),
        signature=to_hex(signed.signature),
        digest=to_hex(signed.message_hash),
    )


def recover_signer(domain: SigningDomain, opportunity: Opportunity, signature: str) -> str:
    """Return the checksummed address that produced *signature* over the record."""
    signable = encode_opportunity(domain, opportunity)
    try:
        address = Account.recover_message(signable, signature=signature)
    except Exception as exc:
        msg = f"Could not recover signer: {exc}"
        raise SigningFailure(msg) from exc
    return to_checksum_address(address)
