# tests/test_logging.py

from __future__ import annotations

import logging

import pytest

from namefully.config import Settings
from namefully.logging import (
    LogOptions,
    configure_logging,
    get_logger,
    list_active_loggers,
    reset_logging,
)


@pytest.fixture()
def fresh_logging():
    reset_logging()
    yield
    reset_logging()
    configure_logging()


def test_module_loggers_are_nested_under_the_package():
    assert get_logger("namefully.parsing").name == "namefully.parsing"
    assert get_logger("tests.sample").name == "namefully.tests.sample"
    assert get_logger().name == "namefully"


def test_base_logger_owns_the_handlers():
    base = get_logger()
    assert base.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)
    assert get_logger("namefully.formatting").propagate is True


def test_loggers_are_configured_once():
    count = len(get_logger().handlers)
    get_logger("namefully.builder")
    get_logger("namefully.builder")
    assert len(get_logger().handlers) == count


def test_list_active_loggers():
    get_logger("namefully.cli")
    assert "namefully.cli" in list_active_loggers()


def test_options_from_settings(tmp_path):
    settings = Settings({"logging": {"level": "warning", "dir": str(tmp_path), "rotate": True}})
    options = LogOptions.from_settings(settings)
    assert options.level == logging.WARNING
    assert options.dir == tmp_path
    assert options.rotate is True
    assert options.file is None

    assert LogOptions.from_settings(settings, verbose=True).level == logging.DEBUG
    assert LogOptions.from_settings(Settings({"debug": True})).level == logging.DEBUG


def test_reconfigure_swaps_handlers(fresh_logging):
    base = configure_logging(Settings({}))
    assert base.level == logging.INFO
    count = len(base.handlers)

    base = configure_logging(Settings({}), verbose=True)
    assert base.level == logging.DEBUG
    assert len(base.handlers) == count


def test_master_and_module_files(fresh_logging, tmp_path):
    settings = Settings(
        {"logging": {"dir": str(tmp_path), "file": "namefully.log", "per_module": True}}
    )
    configure_logging(settings)
    get_logger("namefully.sample").info("hello")

    assert (tmp_path / "namefully.log").exists()
    assert (tmp_path / "namefully_sample.log").exists()
