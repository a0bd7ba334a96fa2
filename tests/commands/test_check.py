"""Tests for the check command."""

from pathlib import Path

from click.testing import CliRunner

from tests.fakes.npm import FakeNpm
from tests.fakes.registry import FakeRegistry
from tests.test_utils.project import write_project
from vpub.cli.cli import cli
from vpub.core.context import PublishContext
from vpub.core.errors import ParseError


def test_check_reports_unpublished_version(tmp_path: Path) -> None:
    write_project(tmp_path, version="1.0.1")
    npm = FakeNpm()
    ctx = PublishContext.for_test(
        npm=npm, registry=FakeRegistry(packages={"pkg": ["1.0.0"]}), cwd=tmp_path
    )

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "pkg@1.0.1 is not yet published" in result.output
    assert npm.publish_calls == []
    assert not (tmp_path / ".npmrc").exists()


def test_check_fails_on_duplicate(tmp_path: Path) -> None:
    write_project(tmp_path, version="1.0.0")
    ctx = PublishContext.for_test(
        registry=FakeRegistry(packages={"pkg": ["1.0.0"]}), cwd=tmp_path
    )

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_check_surfaces_parse_error(tmp_path: Path) -> None:
    write_project(tmp_path)
    ctx = PublishContext.for_test(
        registry=FakeRegistry(error=ParseError("failed to parse JSON response")),
        cwd=tmp_path,
    )

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert "failed to parse JSON response" in result.output


def test_check_allow_new_package(tmp_path: Path) -> None:
    write_project(tmp_path)
    ctx = PublishContext.for_test(registry=FakeRegistry(), cwd=tmp_path)

    result = CliRunner().invoke(cli, ["check", "--allow-new-package"], obj=ctx)

    assert result.exit_code == 0, result.output
