"""Tests for Span, trace_span and @traced."""

from __future__ import annotations

from rosterctl.services.result import ServiceResult
from rosterctl.services.telemetry import (
    Span,
    enable_telemetry,
    trace_span,
    traced,
)


@traced
def _operation(ok: bool = True) -> ServiceResult:
    with trace_span("inner") as span:
        if span is not None:
            span.annotate("rows", 3)
    return ServiceResult(ok=ok, op="sample")


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="x").duration_ms == 0.0

    def test_to_dict(self) -> None:
        span = Span(name="outer")
        span.children.append(Span(name="child"))
        span.annotate("k", "v")
        span.end()
        data = span.to_dict()
        assert data["name"] == "outer"
        assert data["annotations"] == {"k": "v"}
        assert data["children"][0]["name"] == "child"
        assert data["duration_ms"] >= 0


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        assert _operation().meta is None

    def test_trace_span_yields_none_when_disabled(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()
        result = _operation()
        assert result.meta is not None
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("_operation")
        (child,) = telemetry["children"]
        assert child["name"] == "inner"
        assert child["annotations"] == {"rows": 3}

    def test_enabled_on_failed_result(self) -> None:
        enable_telemetry()
        result = _operation(ok=False)
        assert result.ok is False
        assert "telemetry" in (result.meta or {})
