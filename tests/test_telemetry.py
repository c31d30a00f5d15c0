from __future__ import annotations

import pytest

from caret_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("caret_engine.tests") is telemetry.get_logger(
        "caret_engine.tests"
    )


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="chatty")


def test_span_reraises_and_yields_handle() -> None:
    with telemetry.span("tests::ok", component=True, metadata={"k": 1}) as handle:
        handle.add_metadata("extra", [1, 2])

    assert handle.metadata == {"k": "1", "extra": "[1, 2]"}
    assert handle.component_name == "tests::ok"

    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom"):
            raise RuntimeError("boom")


def test_configure_drops_cached_loggers() -> None:
    first = telemetry.get_logger("caret_engine.tests.cache")

    telemetry.configure()

    assert telemetry.get_logger("caret_engine.tests.cache") is not first


def test_span_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    failures: list[str] = []

    def record_failure(self: telemetry.SpanHandle, reason: str) -> None:
        failures.append(reason)

    monkeypatch.setattr(telemetry.SpanHandle, "fail", record_failure)

    with pytest.raises(ValueError):
        with telemetry.span("tests::fail", component="tests"):
            raise ValueError("bad input")

    assert failures == ["bad input"]
