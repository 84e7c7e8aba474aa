import copy
import io
import logging

import pytest
from pydantic import ValidationError

from funcmode.core.config import Settings
from funcmode.core.enums import DuplicateMode, PassMode
from funcmode.core.types import ensure_callable, ensure_operation
from funcmode.logger.logger import setup_logger


def test_settings_default(monkeypatch):
    monkeypatch.delenv("FUNCMODE_DUPLICATE_MODE", raising=False)
    assert Settings.load().DUPLICATE_MODE is DuplicateMode.DEEP


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FUNCMODE_DUPLICATE_MODE", " Shallow ")
    assert Settings.load().DUPLICATE_MODE is DuplicateMode.SHALLOW


def test_settings_invalid_environment(monkeypatch):
    monkeypatch.setenv("FUNCMODE_DUPLICATE_MODE", "sideways")
    with pytest.raises(ValidationError):
        Settings.load()


def test_duplicate_mode_duplicators():
    assert DuplicateMode.SHALLOW.duplicator() is copy.copy
    assert DuplicateMode.DEEP.duplicator() is copy.deepcopy


def test_pass_mode_indirect():
    assert PassMode.INDIRECT_REF.is_indirect
    assert PassMode.INDIRECT_MUT_REF.is_indirect
    assert not PassMode.MUT_REF.is_indirect
    assert PassMode("ref") is PassMode.REF


def test_ensure_callable():
    assert ensure_callable(len) is len
    with pytest.raises(TypeError, match="predicate must be callable"):
        ensure_callable("len", name="predicate")


def test_ensure_operation():
    assert ensure_operation("append") == "append"
    assert ensure_operation(max) is max
    with pytest.raises(TypeError):
        ensure_operation("")


def test_setup_logger_level():
    log = setup_logger("funcmode.test_config", level="debug")
    assert log.level == logging.DEBUG
    assert not log.propagate
    assert len(log.handlers) == 1

    # Reconfiguring keeps the existing handler
    assert setup_logger("funcmode.test_config", level="error") is log
    assert len(log.handlers) == 1


def test_setup_logger_reads_package_level(monkeypatch):
    monkeypatch.setenv("FUNCMODE_LOG_LEVEL", "warning")
    log = setup_logger("funcmode.test_config_env")
    assert log.level == logging.WARNING


def test_setup_logger_stream():
    buffer = io.StringIO()
    log = setup_logger("funcmode.test_config_stream", level="info", stream=buffer)
    log.info("hello")
    assert "funcmode.test_config_stream - INFO - hello" in buffer.getvalue()
