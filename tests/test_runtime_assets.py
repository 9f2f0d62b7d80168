"""Tests for engine binary discovery and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pikaqi.runtime_assets import (
    ENGINE_ENV_VAR,
    engine_binary_name,
    engine_dir,
    resolve_engine_path,
)
from pikaqi.ui.bootstrap import LOG_LEVEL_ENV_VAR, setup_logging


def test_configured_path_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENGINE_ENV_VAR, "/from/env/pikafish")
    assert resolve_engine_path("/opt/pikafish") == Path("/opt/pikafish")


def test_env_var_used_when_unconfigured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENGINE_ENV_VAR, "/from/env/pikafish")
    assert resolve_engine_path("") == Path("/from/env/pikafish")


def test_bundled_binary_is_the_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)
    assert resolve_engine_path() == engine_dir() / engine_binary_name()


def test_binary_name_per_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.platform", "win32")
    assert engine_binary_name() == "pikafish.exe"
    monkeypatch.setattr("sys.platform", "linux")
    assert engine_binary_name() == "pikafish"


def test_setup_logging_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    setup_logging()

    assert calls[0]["level"] == logging.DEBUG


def test_setup_logging_unknown_level_defaults_to_info(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    setup_logging("chatty")

    assert calls[0]["level"] == logging.INFO
