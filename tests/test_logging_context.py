"""Tests for logging context propagation."""

import logging

from resume_match.logging import ComponentLoggerAdapter, get_logger
from resume_match.logging.context import (
    get_log_context,
    log_context,
    new_match_id,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    """Test that context starts empty."""
    assert get_log_context() == {}


def test_push_and_pop():
    """Test pushing fields and restoring the previous state."""
    token = push_log_context(match_id="abc123", output_format="json")
    assert get_log_context() == {"match_id": "abc123", "output_format": "json"}
    pop_log_context(token)
    assert get_log_context() == {}


def test_context_override():
    """Test that pushing the same key overwrites the previous value."""
    token1 = push_log_context(match_id="abc123")
    token2 = push_log_context(match_id="xyz789")
    assert get_log_context() == {"match_id": "xyz789"}

    pop_log_context(token2)
    assert get_log_context() == {"match_id": "abc123"}

    pop_log_context(token1)
    assert get_log_context() == {}


def test_context_manager_nested():
    """Test nested context managers."""
    with log_context(match_id="abc123"):
        with log_context(component="scoring"):
            assert get_log_context() == {"match_id": "abc123", "component": "scoring"}
        assert get_log_context() == {"match_id": "abc123"}

    assert get_log_context() == {}


def test_context_manager_restores_on_exception():
    """Test that context is restored even if the block raises."""
    try:
        with log_context(match_id="abc123"):
            raise ValueError("boom")
    except ValueError:
        pass

    assert get_log_context() == {}


def test_get_log_context_returns_copy():
    """Test that mutating the returned dict does not change the context."""
    with log_context(match_id="abc123"):
        context = get_log_context()
        context["match_id"] = "changed"
        assert get_log_context() == {"match_id": "abc123"}


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger_without_component(self):
        """Test get_logger returns a plain Logger without component."""
        assert isinstance(get_logger("tests.plain"), logging.Logger)

    def test_adapter_injects_component(self):
        """Test the adapter merges component with call extras (call wins)."""
        adapter = get_logger("tests.adapter", component="matching")
        assert isinstance(adapter, ComponentLoggerAdapter)

        _, kwargs = adapter.process("msg", {"extra": {"event": "match.computed"}})
        assert kwargs["extra"] == {"component": "matching", "event": "match.computed"}

        _, kwargs = adapter.process("msg", {"extra": {"component": "override"}})
        assert kwargs["extra"]["component"] == "override"


def test_new_match_id():
    """Test match ids are short and unique."""
    first, second = new_match_id(), new_match_id()
    assert len(first) == 12
    assert first != second


def test_context_manager_yields_bound_fields():
    """Test the with-target exposes the merged fields."""
    with log_context(match_id="abc123") as fields:
        assert fields == {"match_id": "abc123"}
