from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List

import pytest

from textops import delimiters, render, validation
from textops.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[tuple[str, str, Any]] = []
        self.context: Dict[str, str] = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    def warning_with(self, message: str, pairs: Any) -> None:
        self.records.append(("warning", message, dict(pairs)))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message, None))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str):
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str):
        self.components.append(name)
        yield


@pytest.fixture
def recording_logger(monkeypatch) -> RecordingLogger:
    fake = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: fake)
    return fake


def test_configure_adopts_explicit_config(monkeypatch) -> None:
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", telemetry._ACTIVE_CONFIG)
    sentinel = object()
    monkeypatch.setitem(telemetry._LOGGER_CACHE, "stale", object())

    telemetry.configure(sentinel)

    assert telemetry._ACTIVE_CONFIG is sentinel
    assert "stale" not in telemetry._LOGGER_CACHE


def test_record_event_prefers_structured_method(recording_logger) -> None:
    telemetry.record_event("sample", level="warning", data={"count": 2})

    assert recording_logger.records == [
        ("warning", "event::sample", {"event": "sample", "count": "2"})
    ]


def test_record_event_falls_back_to_plain_method(recording_logger) -> None:
    telemetry.record_event("sample", level="debug")

    level, message, _ = recording_logger.records[0]
    assert level == "debug"
    assert message.startswith("event::sample")


def test_record_event_unknown_level(recording_logger) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("sample", level="loud")


def test_span_reports_metadata_when_done(recording_logger) -> None:
    with telemetry.span("work", component="jobs", metadata={"item": 1}) as handle:
        handle.add_metadata("extra", [1, 2])
        assert handle.metadata == {"item": "1", "extra": "[1, 2]"}

    assert recording_logger.profiled == ["work"]
    assert recording_logger.components == ["jobs"]
    level, message, _ = recording_logger.records[-1]
    assert level == "debug"
    assert message.startswith("span::done")
    assert "'extra': '[1, 2]'" in message
    assert "'component': 'jobs'" in message


def test_span_skips_done_record_on_error(recording_logger) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("work", metadata={"k": "v"}):
            raise RuntimeError("boom")

    assert recording_logger.records == []


def test_operations_leave_logger_context_alone(recording_logger) -> None:
    recording_logger.context["delimiter"] = "outer"

    assert delimiters.split("a::b", "::") == ["a", "b"]
    assert render.delimit(["a", "b"]) == "a, b"

    assert recording_logger.context == {"delimiter": "outer"}
    assert recording_logger.profiled == ["delimiters::split", "render::delimit"]
    assert "'working_delimiter': '|'" in recording_logger.records[0][1]


def test_split_validates_arguments_once(monkeypatch, recording_logger) -> None:
    calls: List[str] = []
    original = validation.ensure_not_empty

    def counting(value, name):
        calls.append(name)
        return original(value, name)

    monkeypatch.setattr(validation, "ensure_not_empty", counting)

    delimiters.split("a:b::c", "::")

    assert calls == ["delimiter"]


def test_split_fallback_is_reported(monkeypatch) -> None:
    events: List[tuple[str, Dict[str, Any]]] = []

    def capture(name: str, **kwargs: Any) -> None:
        events.append((name, kwargs))

    monkeypatch.setattr(delimiters, "record_event", capture)

    assert delimiters.choose_working_delimiter(":|^=/-", "~~") == "~"
    assert delimiters.choose_working_delimiter("a:b", "~~") == "|"

    assert len(events) == 1
    name, kwargs = events[0]
    assert name == "delimiters.candidates_exhausted"
    assert kwargs["level"] == "warning"
    assert kwargs["data"] == {"delimiter": "~~", "fallback": "~"}
