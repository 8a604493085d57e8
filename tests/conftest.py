"""Shared pytest fixtures and test data for arbsign tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from arbsign.domain.opportunity import (
    CHAIN_ID_KEY,
    ENV_KEYS,
    PRIVATE_KEY_KEY,
    VERIFYING_CONTRACT_KEY,
)

# Well-known development key (Hardhat/Anvil account #0) and its address.
SIGNER_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
SIGNER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
RECIPIENT = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
SUPERVISOR = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
PREDICTION_ID = "0x" + "ab" * 32

ALL_KEYS: tuple[str, ...] = (
    PRIVATE_KEY_KEY,
    CHAIN_ID_KEY,
    VERIFYING_CONTRACT_KEY,
    *ENV_KEYS.values(),
)


def make_env(**overrides: str | None) -> dict[str, str]:
    """Build a valid configuration mapping; ``None`` overrides drop the key."""
    env = {
        PRIVATE_KEY_KEY: SIGNER_KEY,
        CHAIN_ID_KEY: "1",
        VERIFYING_CONTRACT_KEY: SUPERVISOR,
        "PREDICTION_ID": PREDICTION_ID,
        "RECIPIENT": RECIPIENT,
        "TOKEN_IN": WETH,
        "TOKEN_MID_A": USDC,
        "TOKEN_MID_B": DAI,
        "FEE_AB": "500",
        "FEE_BC": "3000",
        "FEE_CA": "500",
        "AMOUNT_IN": "1000000000000000000",
        "MIN_OUT_AB": "1",
        "MIN_OUT_BC": "1",
        "MIN_OUT_CA": "1",
        "MIN_PROFIT": "1",
        "NONCE": "0",
        "DEADLINE": "9999999999",
    }
    for key, value in overrides.items():
        if value is None:
            env.pop(key, None)
        else:
            env[key] = value
    return env


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def valid_env() -> dict[str, str]:
    """A configuration mapping that passes every parser and rule."""
    return make_env()


@pytest.fixture
def _clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every opportunity key from the process environment.

    Use via ``@pytest.mark.usefixtures("_clean_environ")`` on CLI test classes
    so values from the developer's shell never leak into a run.
    """
    for key in ALL_KEYS:
        monkeypatch.delenv(key, raising=False)
    for key in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON", "ENV_FILE"):
        monkeypatch.delenv(f"ARBSIGN_{key}", raising=False)
