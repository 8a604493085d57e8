"""Tests for the opportunity configuration source."""

from pathlib import Path

import click
import pytest

from arbsign.config.source import load_source


class TestLoadSource:
    def test_explicit_environ(self) -> None:
        assert load_source(environ={"CHAIN_ID": "1"}) == {"CHAIN_ID": "1"}

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NONCE", "7")
        assert load_source()["NONCE"] == "7"

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "opportunity.env"
        env_file.write_text("CHAIN_ID=137\nFEE_AB=500\n")
        source = load_source(env_file, environ={})
        assert source == {"CHAIN_ID": "137", "FEE_AB": "500"}

    def test_environment_wins_over_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "opportunity.env"
        env_file.write_text("CHAIN_ID=137\n")
        source = load_source(env_file, environ={"CHAIN_ID": "1"})
        assert source["CHAIN_ID"] == "1"

    def test_empty_environment_value_does_not_mask_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "opportunity.env"
        env_file.write_text("NONCE=3\n")
        assert load_source(env_file, environ={"NONCE": ""}) == {"NONCE": "3"}

    def test_valueless_file_keys_ignored(self, tmp_path: Path) -> None:
        env_file = tmp_path / "opportunity.env"
        env_file.write_text("NONCE\nDEADLINE=5\n")
        assert load_source(env_file, environ={}) == {"DEADLINE": "5"}

    def test_missing_env_file(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Env file not found"):
            load_source(tmp_path / "absent.env", environ={})
