# tests/unit/test_logging_config.py
import logging

import pytest

from portastore import logging_config


@pytest.fixture
def captured(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_level_comes_from_environment(monkeypatch, captured):
    monkeypatch.setenv("PORTASTORE_LOG_LEVEL", "debug")
    logging_config.setup_logging()
    assert captured[-1]["level"] == logging.DEBUG


def test_default_level_is_warning(monkeypatch, captured):
    monkeypatch.delenv("PORTASTORE_LOG_LEVEL", raising=False)
    logging_config.setup_logging()
    assert captured[-1]["level"] == logging.WARNING


def test_unknown_level_name_falls_back_to_warning(monkeypatch, captured):
    monkeypatch.setenv("PORTASTORE_LOG_LEVEL", "chatty")
    logging_config.setup_logging()
    assert captured[-1]["level"] == logging.WARNING
