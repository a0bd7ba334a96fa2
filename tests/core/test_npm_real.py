"""Tests for RealNpm and DryRunNpm."""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from tests.fakes.npm import FakeNpm
from vpub.core.npm.dry_run import DryRunNpm
from vpub.core.npm.real import RealNpm


def test_is_installed_checks_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(shutil, "which", lambda name: None)
    assert not RealNpm().is_installed()

    monkeypatch.setattr(shutil, "which", lambda name: f"/usr/bin/{name}")
    assert RealNpm().is_installed()


def test_publish_runs_npm_in_package_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[tuple[list[str], Path]] = []

    def fake_run(cmd, *, cwd, check, stdout):
        assert stdout is None
        calls.append((cmd, cwd))
        return subprocess.CompletedProcess(cmd, returncode=1)

    monkeypatch.setattr(subprocess, "run", fake_run)

    exit_code = RealNpm().publish(tmp_path, "http://r")

    assert exit_code == 1
    assert calls == [(["npm", "publish", "--registry", "http://r"], tmp_path)]


def test_publish_can_route_npm_stdout_to_stderr(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    stdouts: list[object] = []

    def fake_run(cmd, *, cwd, check, stdout):
        stdouts.append(stdout)
        return subprocess.CompletedProcess(cmd, returncode=0)

    monkeypatch.setattr(subprocess, "run", fake_run)

    RealNpm().publish(tmp_path, "http://r", stdout_to_stderr=True)

    assert stdouts == [sys.stderr]


def test_dry_run_npm_does_not_publish() -> None:
    wrapped = FakeNpm()

    exit_code = DryRunNpm(wrapped).publish(Path("/pkg"), "http://r")

    assert exit_code == 0
    assert wrapped.publish_calls == []


def test_dry_run_npm_delegates_install_check() -> None:
    assert not DryRunNpm(FakeNpm(installed=False)).is_installed()
