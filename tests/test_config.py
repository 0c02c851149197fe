"""Tests for settings resolution, logging setup and the root guard."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import typer

from pageres.config import Settings
from pageres.guard import EXIT_ELEVATED, block_elevated
from pageres.log import get_logger, setup_logging


def test_defaults(monkeypatch, tmp_path):
    for name in ("PAGERES_RUNNER", "PAGERES_DEST", "PAGERES_ALLOW_ROOT", "PAGERES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    s = Settings()
    assert s.runner == "pageres.runner.dry_run:DryRunRunner"
    assert s.dest is None
    assert s.dest_dir == Path.cwd()
    assert s.allow_root is False
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PAGERES_RUNNER", "mypkg.capture:ChromeRunner")
    monkeypatch.setenv("PAGERES_DEST", str(tmp_path))
    monkeypatch.setenv("PAGERES_ALLOW_ROOT", "yes")
    monkeypatch.setenv("PAGERES_LOG_LEVEL", "debug")

    s = Settings()
    assert s.runner == "mypkg.capture:ChromeRunner"
    assert s.dest_dir == tmp_path
    assert s.allow_root is True
    assert s.log_level == "DEBUG"


class TestLogging:
    def test_loggers_are_namespaced(self) -> None:
        assert get_logger("args.grouper").name == "pageres.args.grouper"
        assert get_logger("pageres.runner").name == "pageres.runner"

    def test_setup_is_idempotent(self) -> None:
        logger = setup_logging("DEBUG")
        handlers = list(logger.handlers)
        setup_logging("INFO")
        assert logger.handlers == handlers
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self) -> None:
        assert setup_logging("chatty").level == logging.WARNING


class TestBlockElevated:
    def test_allows_regular_user(self, monkeypatch) -> None:
        monkeypatch.setattr("pageres.guard.is_elevated", lambda: False)
        block_elevated()

    def test_allows_root_when_configured(self, monkeypatch) -> None:
        monkeypatch.setattr("pageres.guard.is_elevated", lambda: True)
        block_elevated(allow=True)

    def test_blocks_root(self, monkeypatch) -> None:
        monkeypatch.setattr("pageres.guard.is_elevated", lambda: True)
        with pytest.raises(typer.Exit) as info:
            block_elevated()
        assert info.value.exit_code == EXIT_ELEVATED
