"""
test_sinks.py
-------------
Unit tests for the call_sink boundary guard.
"""

from unittest.mock import MagicMock, patch

from stressfall.core.services.sinks import NullRenderSink, call_sink


def test_returns_method_result():
    sink = MagicMock()
    sink.render.return_value = "drawn"
    assert call_sink(sink, "render", 1, 2) == "drawn"
    sink.render.assert_called_once_with(1, 2)


def test_none_sink_is_skipped():
    assert call_sink(None, "render") is None


def test_null_sink_accepts_every_call():
    sink = NullRenderSink()
    call_sink(sink, "render", None, (), 0, 44.0)
    call_sink(sink, "present_overlay", "title", [], {})
    call_sink(sink, "hide_overlay")


def test_failure_logged_under_caller_category():
    sink = MagicMock()
    sink.present_overlay.side_effect = RuntimeError("display gone")

    with patch("stressfall.core.services.sinks.DebugLogger") as logger:
        assert call_sink(sink, "present_overlay", "t", [], {}, category="game_state") is None

    assert logger.warn.call_args.kwargs["category"] == "game_state"
    assert "category" not in sink.present_overlay.call_args.kwargs


def test_failure_defaults_to_system_category():
    sink = MagicMock()
    sink.render.side_effect = RuntimeError("surface lost")

    with patch("stressfall.core.services.sinks.DebugLogger") as logger:
        call_sink(sink, "render")

    assert logger.warn.call_args.kwargs["category"] == "system"
