"""Tests for data models."""

from mtrtrace.models import HopRecord, TraceResult


class TestHopRecord:
    def test_defaults(self):
        hop = HopRecord(number=3)
        assert hop.ip is None
        assert hop.hostname is None
        assert hop.rtts == []
        assert not hop.responded

    def test_rtts_not_shared(self):
        a, b = HopRecord(number=1), HopRecord(number=2)
        a.rtts.append(1.0)
        assert b.rtts == []

    def test_stats(self):
        hop = HopRecord(number=1, ip="10.0.0.1", rtts=[3.0, 1.0, 2.0])
        assert hop.rtt_min == 1.0
        assert hop.rtt_avg == 2.0
        assert hop.rtt_max == 3.0

    def test_stats_without_samples(self):
        hop = HopRecord(number=1)
        assert hop.rtt_min is None
        assert hop.rtt_avg is None
        assert hop.rtt_max is None

    def test_stats_skip_nan(self):
        hop = HopRecord(number=1, rtts=[float("nan"), 4.0])
        assert hop.rtt_min == 4.0
        assert hop.rtt_max == 4.0

    def test_to_dict(self):
        hop = HopRecord(number=2, ip="8.8.8.8", hostname="dns.google", rtts=[52.775])
        assert hop.to_dict() == {
            "number": 2, "ip": "8.8.8.8", "hostname": "dns.google", "rtts": [52.775],
        }


class TestTraceResult:
    def test_empty(self):
        result = TraceResult(target="8.8.8.8")
        assert not result.reached
        assert result.total_hops == 0

    def test_reached(self):
        result = TraceResult(target="8.8.8.8", hops=[
            HopRecord(number=1, ip="10.0.0.1"),
            HopRecord(number=2, ip="8.8.8.8"),
        ])
        assert result.reached
        assert result.total_hops == 2
