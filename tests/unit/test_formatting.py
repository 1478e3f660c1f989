# tests/unit/test_formatting.py
"""
Unit tests for display helpers: resource age, ready counts and ports.
"""

from datetime import datetime, timedelta, timezone

import pytest

from k8s_mcp_server.k8s.formatting import format_age, format_port, format_ready

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFormatAge:
    """Age is a single floor-truncated unit."""

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=30), "30s"),
            (timedelta(minutes=5), "5m"),
            (timedelta(hours=3), "3h"),
            (timedelta(hours=25), "1d"),
        ],
        ids=["seconds", "minutes", "hours", "days"],
    )
    def test_units(self, delta, expected):
        assert format_age(NOW - delta, now=NOW) == expected

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=59, milliseconds=999), "59s"),
            (timedelta(seconds=60), "1m"),
            (timedelta(minutes=59, seconds=59), "59m"),
            (timedelta(hours=1), "1h"),
            (timedelta(hours=23, minutes=59), "23h"),
            (timedelta(hours=24), "1d"),
            (timedelta(days=6, hours=23), "6d"),
        ],
    )
    def test_boundaries_floor(self, delta, expected):
        assert format_age(NOW - delta, now=NOW) == expected

    def test_never_composite(self):
        age = format_age(NOW - timedelta(days=1, hours=3), now=NOW)
        assert age == "1d"

    def test_future_timestamp_clamps_to_zero(self):
        assert format_age(NOW + timedelta(seconds=5), now=NOW) == "0s"

    def test_missing_timestamp(self):
        assert format_age(None, now=NOW) == "unknown"

    def test_naive_timestamp_treated_as_utc(self):
        naive = (NOW - timedelta(minutes=10)).replace(tzinfo=None)
        assert format_age(naive, now=NOW) == "10m"

    def test_defaults_to_current_time(self):
        created = datetime.now(timezone.utc) - timedelta(hours=2, minutes=1)
        assert format_age(created) == "2h"


def test_format_ready():
    assert format_ready(1, 1) == "1/1"
    assert format_ready(2, 3) == "2/3"
    assert format_ready(0, 0) == "0/0"


class TestFormatPort:
    def test_plain_port(self):
        assert format_port(80, "TCP", None) == "80/TCP"

    def test_node_port_suffix(self):
        assert format_port(80, "TCP", 30080) == "80/TCP:30080"

    def test_udp(self):
        assert format_port(53, "UDP", 0) == "53/UDP"

    def test_missing_protocol_defaults_to_tcp(self):
        assert format_port(443, None, None) == "443/TCP"
