"""Tests for window resolution from optional arguments."""

import logging
from datetime import datetime, timedelta, timezone

from trend_percentages.models import TrendWindow
from trend_percentages.window import resolve_window


class TestResolveWindow:
    """Test explicit and default windows."""

    def test_explicit_endpoints_are_used(self, t0):
        end = t0 + timedelta(hours=2)

        assert resolve_window(t0, end) == TrendWindow(t0, end)

    def test_reversed_endpoints_are_passed_through(self, t0):
        earlier = t0 - timedelta(hours=1)

        assert resolve_window(t0, earlier) == TrendWindow(t0, earlier)

    def test_missing_start_defaults_to_last_day(self, t0):
        window = resolve_window(None, t0 + timedelta(hours=5), now=t0)

        assert window == TrendWindow(t0 - timedelta(hours=24), t0)

    def test_missing_end_uses_custom_lookback(self, t0):
        window = resolve_window(t0 - timedelta(days=3), None, lookback_hours=6, now=t0)

        assert window == TrendWindow(t0 - timedelta(hours=6), t0)

    def test_default_now_is_naive_utc(self):
        window = resolve_window(None, None)

        assert window.end.tzinfo is None
        assert abs(window.end - datetime.now(timezone.utc).replace(tzinfo=None)) < timedelta(minutes=1)

    def test_single_endpoint_logs_warning(self, t0, caplog):
        with caplog.at_level(logging.WARNING, logger="trend_percentages.window"):
            resolve_window(t0, None, now=t0)

        assert "Only one of start/end given" in caplog.text

    def test_both_or_neither_endpoint_is_silent(self, t0, caplog):
        with caplog.at_level(logging.WARNING, logger="trend_percentages.window"):
            resolve_window(t0, t0 + timedelta(hours=1))
            resolve_window(None, None, now=t0)

        assert caplog.text == ""
