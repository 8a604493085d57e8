"""Tests for operation-specific Rich renderers."""

from arbsign.output.renderers import render_quiet, render_result
from arbsign.services.result import ServiceError, ServiceResult

SIGNATURE = "0x" + "1b" * 65
SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def _signed() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="sign_opportunity",
        data={"signer": SIGNER, "signature": SIGNATURE},
        meta={"digest": "0x" + "00" * 32, "chain_id": 1},
    )


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class TestSignatureRenderer:
    def test_exactly_two_lines(self) -> None:
        output = render_result(_signed())
        assert output.splitlines() == [
            f"SIGNER: {SIGNER}",
            f"OPPORTUNITY_SIGNATURE: {SIGNATURE}",
        ]

    def test_long_signature_not_wrapped(self) -> None:
        lines = render_result(_signed()).splitlines()
        assert lines[1].endswith(SIGNATURE)

    def test_verbose_adds_meta(self) -> None:
        output = render_result(_signed(), verbose=True)
        assert "digest" in output
        assert output.splitlines()[0] == f"SIGNER: {SIGNER}"

    def test_quiet_prints_signature(self) -> None:
        assert render_quiet(_signed()) == SIGNATURE


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("sign_opportunity", "MISSING_CONFIG", "Missing env var: NONCE"))
        assert "ERROR" in output
        assert "sign_opportunity" in output
        assert "Missing env var: NONCE" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("sign_opportunity", "SEMANTIC_VIOLATION", "bad", rule="DistinctTokens")
        output = render_result(result, verbose=True)
        assert "SEMANTIC_VIOLATION" in output
        assert "DistinctTokens" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))

    def test_quiet_error(self) -> None:
        output = render_quiet(_err("verify_signature", "SIGNER_MISMATCH", "mismatch"))
        assert output.startswith("ERROR: verify_signature")


class TestOtherRenderers:
    def test_verify(self) -> None:
        result = ServiceResult(
            ok=True, op="verify_signature", data={"signer": SIGNER, "verified": True}
        )
        output = render_result(result)
        assert "OK" in output
        assert SIGNER in output
        assert "verified: True" in output

    def test_typed_data_is_plain_json(self) -> None:
        import json

        data = {"primaryType": "Opportunity", "message": {"nonce": "0"}}
        output = render_result(ServiceResult(ok=True, op="typed_data", data=data))
        assert json.loads(output) == data

    def test_schema_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="opportunity_schema",
            data={
                "primary_type": "Opportunity",
                "version": "1",
                "domain": {"name": "ArbSupervisor", "version": "1"},
                "fields": [{"name": "predictionId", "type": "bytes32"}],
            },
        )
        output = render_result(result)
        assert "ArbSupervisor v1" in output
        assert "predictionId" in output
        assert "bytes32" in output

    def test_generic_fallback(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"items": [1, 2]}))
        assert "OK" in output
        assert "items: [1,2]" in output
