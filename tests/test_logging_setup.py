import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from note_aggregator.logging_setup import SESSION_ID, EnsureSessionFilter, SessionAdapter


def test_filter_sets_session():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", (), None)
    assert EnsureSessionFilter().filter(record)
    assert record.session == SESSION_ID


def test_adapter_injects_session():
    adapter = SessionAdapter(logging.getLogger("note-aggregator.test"), {})
    msg, kwargs = adapter.process("hello", {})
    assert msg == "hello"
    assert kwargs["extra"]["session"] == SESSION_ID
