"""SigningService — the extract, validate, sign pipeline.

Pipeline: EXTRACT KEY → EXTRACT DOMAIN → EXTRACT RECORD → VALIDATE → SIGN → RESPOND

Each stage either hands a fully-typed value to the next or aborts the run.
There are no retries and no partial results.
"""

from __future__ import annotations

import logging

from arbsign.domain.errors import OpportunityError
from arbsign.domain.opportunity import (
    CHAIN_ID_KEY,
    DOMAIN_NAME,
    DOMAIN_VERSION,
    ENV_KEYS,
    OPPORTUNITY_SCHEMA,
    PRIMARY_TYPE,
    PRIVATE_KEY_KEY,
    SCHEMA_VERSION,
    VERIFYING_CONTRACT_KEY,
    Opportunity,
    SigningDomain,
    build_typed_data,
    extract_domain,
    extract_opportunity,
    schema_fields,
)
from arbsign.domain.parsing import required_private_key
from arbsign.domain.rules import validate_opportunity
from arbsign.infrastructure.signer import recover_signer, sign_typed_data
from arbsign.services.base import BaseService
from arbsign.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SigningService(BaseService):
    """Builds, validates, signs, and verifies the configured Opportunity."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def sign(self) -> ServiceResult:
        """Sign the configured opportunity and report signer and signature."""
        op = "sign_opportunity"
        try:
            private_key = required_private_key(self._source, PRIVATE_KEY_KEY)
            domain, opportunity = self._prepare()
            signed = sign_typed_data(domain, opportunity, private_key)
        except OpportunityError as exc:
            return self._failure(op, exc)

        logger.info("Signed opportunity %s as %s", opportunity.prediction_id, signed.signer)
        return ServiceResult(
            ok=True,
            op=op,
            data={"signer": signed.signer, "signature": signed.signature},
            meta={
                "digest": signed.digest,
                "chain_id": domain.chain_id,
                "verifying_contract": domain.verifying_contract,
            },
        )

    def typed_data(self) -> ServiceResult:
        """Return the EIP-712 document for the configured opportunity, unsigned."""
        op = "typed_data"
        try:
            domain, opportunity = self._prepare()
        except OpportunityError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=build_typed_data(domain, opportunity))

    def verify(self, signature: str, *, expected_signer: str | None = None) -> ServiceResult:
        """Recover the signer of *signature* over the configured opportunity.

        With *expected_signer*, a different recovered address is an error.
        """
        op = "verify_signature"
        try:
            domain, opportunity = self._prepare()
            signer = recover_signer(domain, opportunity, signature)
        except OpportunityError as exc:
            return self._failure(op, exc)

        if expected_signer is not None and signer.lower() != expected_signer.lower():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="SIGNER_MISMATCH",
                    message=f"Signature was produced by {signer}, not {expected_signer}",
                    detail={"recovered": signer, "expected": expected_signer},
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"signer": signer, "verified": expected_signer is not None},
        )

    def schema(self) -> ServiceResult:
        """Describe the fixed Opportunity schema and domain identity."""
        return ServiceResult(
            ok=True,
            op="opportunity_schema",
            data={
                "primary_type": PRIMARY_TYPE,
                "version": SCHEMA_VERSION,
                "domain": {"name": DOMAIN_NAME, "version": DOMAIN_VERSION},
                "fields": schema_fields(OPPORTUNITY_SCHEMA),
                "env_keys": {
                    "privateKey": PRIVATE_KEY_KEY,
                    "chainId": CHAIN_ID_KEY,
                    "verifyingContract": VERIFYING_CONTRACT_KEY,
                    **ENV_KEYS,
                },
            },
        )

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def _prepare(self) -> tuple[SigningDomain, Opportunity]:
        """Extract the domain and record, then apply the semantic rules."""
        domain = extract_domain(self._source)
        opportunity = validate_opportunity(extract_opportunity(self._source))
        logger.debug(
            "Validated opportunity %s on chain %d route=%s",
            opportunity.prediction_id,
            domain.chain_id,
            "->".join(opportunity.route),
        )
        return domain, opportunity
