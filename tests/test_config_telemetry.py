from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from line_engine.config import EditorLimits
from line_engine.runtime import telemetry


@pytest.fixture
def restore_telemetry() -> Iterator[None]:
    yield
    telemetry.configure()


def test_limits_defaults_and_sticky_sentinel() -> None:
    limits = EditorLimits()

    assert limits.max_line_length == 1000
    assert limits.max_line_count == 10000
    assert limits.sticky_end == limits.max_line_length


def test_limits_from_env_overrides_and_ignores_garbage() -> None:
    limits = EditorLimits.from_env(
        {
            "LINE_ENGINE_MAX_LINE_LENGTH": "80",
            "LINE_ENGINE_MAX_LINE_COUNT": "not-a-number",
            "LINE_ENGINE_TAB_WIDTH": "0",
            "LINE_ENGINE_PAGE_MARGIN": "0",
        }
    )

    assert limits.max_line_length == 80
    assert limits.max_line_count == 10000
    assert limits.tab_width == 4
    assert limits.page_margin == 0


def test_limits_reject_non_positive_capacities() -> None:
    with pytest.raises(ValueError):
        EditorLimits(max_line_length=0)


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.TelemetryConfig(), preset="development")


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def test_file_output_receives_events(tmp_path: Path, restore_telemetry: None) -> None:
    log_file = tmp_path / "engine.log"
    config = telemetry.TelemetryConfig()
    config.with_min_level("DEBUG").with_console_output(False).with_file_output(
        str(log_file)
    )
    telemetry.configure(config=config)

    telemetry.record_event("unit.test", data={"answer": 42})
    with telemetry.span("unit::span", component=True, metadata={"k": "v"}):
        pass
    for handler in logging.getLogger(telemetry.DEFAULT_LOGGER_NAME).handlers:
        handler.flush()

    written = log_file.read_text(encoding="utf-8")
    assert "event::unit.test" in written
    assert "answer=42" in written
    assert "span::end" in written
    assert "component=unit::span" in written


def test_span_logs_failure_and_reraises(
    caplog: pytest.LogCaptureFixture, restore_telemetry: None
) -> None:
    config = telemetry.TelemetryConfig().with_console_output(False)
    telemetry.configure(config=config)
    logger = telemetry.get_logger()
    logger.propagate = True

    with caplog.at_level(logging.ERROR, logger=telemetry.DEFAULT_LOGGER_NAME):
        with pytest.raises(RuntimeError):
            with telemetry.span("unit::boom"):
                raise RuntimeError("boom")

    assert any("span::fail" in record.getMessage() for record in caplog.records)


def test_get_logger_nests_under_engine_namespace() -> None:
    logger = telemetry.get_logger("custom")

    assert logger.name == f"{telemetry.DEFAULT_LOGGER_NAME}.custom"
    assert telemetry.get_logger("custom") is logger


def test_first_logger_request_installs_default_handlers(
    restore_telemetry: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LINE_ENGINE_DISABLE_CONSOLE", "1")
    monkeypatch.delenv("LINE_ENGINE_LOG_FILE", raising=False)
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", None)
    monkeypatch.setattr(telemetry, "_LOGGER_CACHE", {})

    logger = telemetry.get_logger("lazy")

    assert logger.name == f"{telemetry.DEFAULT_LOGGER_NAME}.lazy"
    assert telemetry._ACTIVE_CONFIG is not None
    assert telemetry._ACTIVE_CONFIG.console is False
    root = logging.getLogger(telemetry.DEFAULT_LOGGER_NAME)
    assert [type(handler) for handler in root.handlers] == [logging.NullHandler]
