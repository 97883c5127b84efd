"""Unit tests for the rolling result window and its metrics."""

from __future__ import annotations

import pytest

from uptime_toolkit.domain.entities import HISTORY_WINDOW, MonitoringResult, TargetHistory
from uptime_toolkit.domain.errors import ConfigurationError
from uptime_toolkit.domain.value_objects import Url, parse_seconds

import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))
from conftest import EPOCH, make_result  # noqa: E402


# ---------------------------------------------------------------------------
# MonitoringResult
# ---------------------------------------------------------------------------
class TestMonitoringResult:
    def test_200_is_up(self):
        assert make_result(200).is_up is True

    @pytest.mark.parametrize("status", [0, 204, 301, 404, 500, 503])
    def test_anything_else_is_down(self, status):
        assert make_result(status).is_up is False

    def test_failure_has_no_status(self):
        from uptime_toolkit.domain.value_objects import Timestamp

        r = MonitoringResult.failure(Timestamp(EPOCH), 42.0, "connection refused")
        assert r.status == 0
        assert r.is_up is False
        assert r.response_time == 42.0
        assert r.error == "connection refused"

    def test_result_is_frozen(self):
        r = make_result(200)
        with pytest.raises(AttributeError):
            r.is_up = False  # type: ignore[misc]

    def test_to_dict(self):
        d = make_result(503, 12.5).to_dict()
        assert d["status"] == 503
        assert d["is_up"] is False
        assert d["response_time"] == 12.5
        assert d["timestamp"].startswith("2026-01-01T12:00:00")


# ---------------------------------------------------------------------------
# TargetHistory window
# ---------------------------------------------------------------------------
class TestTargetHistory:
    @pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 25])
    def test_length_is_capped(self, n):
        history = TargetHistory(target="https://example.com")
        for i in range(n):
            history.record(make_result(200, second=i))
        assert len(history) == min(n, HISTORY_WINDOW)

    def test_oldest_is_evicted_first(self):
        history = TargetHistory(target="https://example.com")
        results = [make_result(200, ms=float(i), second=i) for i in range(11)]
        for r in results:
            history.record(r)
        assert list(history.results) == results[1:]

    def test_newest_first(self):
        history = TargetHistory(target="https://example.com")
        results = [make_result(200, second=i) for i in range(3)]
        for r in results:
            history.record(r)
        assert history.newest_first() == list(reversed(results))

    def test_empty_aggregate(self):
        agg = TargetHistory(target="x").aggregate()
        assert agg.availability == 0.0
        assert agg.avg_response_time == 0.0
        assert agg.samples == 0

    @pytest.mark.parametrize(
        "statuses, expected",
        [
            ([200], 100.0),
            ([503], 0.0),
            ([200, 503, 200], 200.0 / 3),
            ([200, 200, 0, 503], 50.0),
        ],
    )
    def test_availability(self, statuses, expected):
        history = TargetHistory(target="x")
        for s in statuses:
            history.record(make_result(s))
        assert history.aggregate().availability == pytest.approx(expected)

    def test_availability_only_counts_window(self):
        history = TargetHistory(target="x")
        for _ in range(10):
            history.record(make_result(503))
        for _ in range(10):
            history.record(make_result(200))
        assert history.aggregate().availability == 100.0

    def test_average_response_time(self):
        history = TargetHistory(target="x")
        for ms in (100.0, 200.0, 0.0, 300.0):
            history.record(make_result(200, ms=ms))
        assert history.aggregate().avg_response_time == pytest.approx(150.0)

    def test_average_after_eviction(self):
        history = TargetHistory(target="x")
        for ms in range(11):
            history.record(make_result(200, ms=float(ms * 10)))
        # 10..100 remain
        assert history.aggregate().avg_response_time == pytest.approx(55.0)


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------
class TestValueObjects:
    @pytest.mark.parametrize("value", ["https://example.com", "http://localhost:8080/health"])
    def test_valid_url(self, value):
        assert str(Url(value)) == value

    @pytest.mark.parametrize("value", ["", "example.com", "ftp://example.com", "https://", "not a url"])
    def test_invalid_url(self, value):
        with pytest.raises(ConfigurationError):
            Url(value)

    def test_url_hostname(self):
        assert Url("https://user:pw@example.com:8443/x").hostname == "example.com"

    def test_parse_seconds(self):
        assert parse_seconds("MONITOR_INTERVAL", "2.5") == 2.5

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "nan"])
    def test_parse_seconds_rejects(self, raw):
        with pytest.raises(ConfigurationError):
            parse_seconds("MONITOR_TIMEOUT", raw)
