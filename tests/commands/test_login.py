"""Tests for the login command."""

from pathlib import Path

from click.testing import CliRunner

from tests.test_utils.project import REGISTRY_URL, write_config
from vpub.cli.cli import cli
from vpub.core.context import PublishContext
from vpub.core.credentials import build_auth_token, read_auth_file


def test_login_writes_npmrc(tmp_path: Path) -> None:
    write_config(tmp_path)
    (tmp_path / ".npmrc").write_text("foo=bar\n", encoding="utf-8")
    ctx = PublishContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 0, result.output
    record = read_auth_file(tmp_path / ".npmrc")
    assert record["foo"] == "bar"
    assert record["_auth"] == build_auth_token("bot", "s3cret")
    assert record["registry"] == REGISTRY_URL


def test_login_replace_mode_from_env(tmp_path: Path) -> None:
    write_config(tmp_path)
    (tmp_path / ".npmrc").write_text("foo=bar\n", encoding="utf-8")
    ctx = PublishContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(
        cli, ["login"], obj=ctx, env={"VPUB_CREDENTIAL_MODE": "replace"}
    )

    assert result.exit_code == 0, result.output
    assert "foo" not in read_auth_file(tmp_path / ".npmrc")


def test_login_dry_run_writes_nothing(tmp_path: Path) -> None:
    write_config(tmp_path)
    ctx = PublishContext.for_test(cwd=tmp_path, dry_run=True)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would write merge credentials" in result.output
    assert not (tmp_path / ".npmrc").exists()


def test_login_missing_config(tmp_path: Path) -> None:
    ctx = PublishContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: config file not found" in result.output
