"""Opportunity record, signing domain, and the versioned typed-data schema.

The field order in :data:`OPPORTUNITY_SCHEMA` is part of the EIP-712 type
hash and must match the ``Opportunity`` struct of the ArbSupervisor
contract exactly. Never reorder or rename entries; bump
:data:`SCHEMA_VERSION` together with the contract instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from arbsign.domain.parsing import (
    ConfigSource,
    required_address,
    required_bytes32,
    required_chain_id,
    required_uint24,
    required_uint_string,
)

DOMAIN_NAME = "ArbSupervisor"
DOMAIN_VERSION = "1"
SCHEMA_VERSION = "1"
PRIMARY_TYPE = "Opportunity"

OPPORTUNITY_SCHEMA: tuple[tuple[str, str], ...] = (
    ("predictionId", "bytes32"),
    ("recipient", "address"),
    ("tokenIn", "address"),
    ("tokenMidA", "address"),
    ("tokenMidB", "address"),
    ("feeAB", "uint24"),
    ("feeBC", "uint24"),
    ("feeCA", "uint24"),
    ("amountIn", "uint256"),
    ("minOutAB", "uint256"),
    ("minOutBC", "uint256"),
    ("minOutCA", "uint256"),
    ("minProfit", "uint256"),
    ("nonce", "uint256"),
    ("deadline", "uint256"),
)

DOMAIN_SCHEMA: tuple[tuple[str, str], ...] = (
    ("name", "string"),
    ("version", "string"),
    ("chainId", "uint256"),
    ("verifyingContract", "address"),
)

# --- Configuration keys ---

PRIVATE_KEY_KEY = "SUPERVISOR_SIGNER_PRIVATE_KEY"
CHAIN_ID_KEY = "CHAIN_ID"
VERIFYING_CONTRACT_KEY = "SUPERVISOR_ADDRESS"

ENV_KEYS: dict[str, str] = {
    "predictionId": "PREDICTION_ID",
    "recipient": "RECIPIENT",
    "tokenIn": "TOKEN_IN",
    "tokenMidA": "TOKEN_MID_A",
    "tokenMidB": "TOKEN_MID_B",
    "feeAB": "FEE_AB",
    "feeBC": "FEE_BC",
    "feeCA": "FEE_CA",
    "amountIn": "AMOUNT_IN",
    "minOutAB": "MIN_OUT_AB",
    "minOutBC": "MIN_OUT_BC",
    "minOutCA": "MIN_OUT_CA",
    "minProfit": "MIN_PROFIT",
    "nonce": "NONCE",
    "deadline": "DEADLINE",
}

_PARSERS = {
    "bytes32": required_bytes32,
    "address": required_address,
    "uint24": required_uint24,
    "uint256": required_uint_string,
}


def schema_fields(schema: tuple[tuple[str, str], ...]) -> list[dict[str, str]]:
    """Render a schema as the ``[{"name", "type"}, ...]`` list EIP-712 expects."""
    return [{"name": name, "type": type_} for name, type_ in schema]


class SigningDomain(BaseModel):
    """EIP-712 domain binding a signature to one contract on one chain."""

    model_config = {"frozen": True}

    name: str = DOMAIN_NAME
    version: str = DOMAIN_VERSION
    chain_id: int
    verifying_contract: str

    def to_domain_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": self.verifying_contract,
        }


class Opportunity(BaseModel):
    """The canonical signed record of a three-hop trade.

    Attribute names are snake_case; the camelCase aliases are the struct
    member names in the contract and in :data:`OPPORTUNITY_SCHEMA`.
    uint256 fields hold canonical decimal strings.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    prediction_id: str = Field(alias="predictionId")
    recipient: str
    token_in: str = Field(alias="tokenIn")
    token_mid_a: str = Field(alias="tokenMidA")
    token_mid_b: str = Field(alias="tokenMidB")
    fee_ab: int = Field(alias="feeAB")
    fee_bc: int = Field(alias="feeBC")
    fee_ca: int = Field(alias="feeCA")
    amount_in: str = Field(alias="amountIn")
    min_out_ab: str = Field(alias="minOutAB")
    min_out_bc: str = Field(alias="minOutBC")
    min_out_ca: str = Field(alias="minOutCA")
    min_profit: str = Field(alias="minProfit")
    nonce: str
    deadline: str

    @property
    def route(self) -> tuple[str, str, str]:
        """Token route in hop order."""
        return (self.token_in, self.token_mid_a, self.token_mid_b)

    def to_wire(self) -> dict[str, Any]:
        """Return the record keyed by struct member name, in schema order."""
        data = self.model_dump(by_alias=True)
        return {name: data[name] for name, _ in OPPORTUNITY_SCHEMA}

    def to_message(self) -> dict[str, Any]:
        """Return the EIP-712 message with values in their signing types."""
        message: dict[str, Any] = {}
        for (name, type_), value in zip(OPPORTUNITY_SCHEMA, self.to_wire().values(), strict=True):
            if type_ == "bytes32":
                message[name] = bytes.fromhex(value[2:])
            elif type_ == "uint256":
                message[name] = int(value)
            else:
                message[name] = value
        return message


def extract_domain(source: ConfigSource) -> SigningDomain:
    """Build the signing domain from *source*."""
    return SigningDomain(
        chain_id=required_chain_id(source, CHAIN_ID_KEY),
        verifying_contract=required_address(source, VERIFYING_CONTRACT_KEY),
    )


def extract_opportunity(source: ConfigSource) -> Opportunity:
    """Coerce every Opportunity field from *source*, in schema order.

    The first field that fails aborts extraction; no partial record is
    ever returned.
    """
    values = {
        name: _PARSERS[type_](source, ENV_KEYS[name]) for name, type_ in OPPORTUNITY_SCHEMA
    }
    return Opportunity.model_validate(values)


def build_typed_data(domain: SigningDomain, opportunity: Opportunity) -> dict[str, Any]:
    """Return the full EIP-712 document as JSON-safe data.

    uint256 values are kept as decimal strings so no consumer loses
    precision when parsing the document.
    """
    return {
        "types": {
            "EIP712Domain": schema_fields(DOMAIN_SCHEMA),
            PRIMARY_TYPE: schema_fields(OPPORTUNITY_SCHEMA),
        },
        "primaryType": PRIMARY_TYPE,
        "domain": domain.to_domain_data(),
        "message": opportunity.to_wire(),
    }
