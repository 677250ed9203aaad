"""Tests for the optimization barrier."""

from perf_lite import do_not_optimize
from perf_lite.barrier import clobber, sink_value


class TestDoNotOptimize:
    """Test that values are retained by the barrier."""

    def teardown_method(self):
        clobber()

    def test_returns_none(self):
        assert do_not_optimize(41 + 1) is None

    def test_value_is_retained(self):
        payload = [1, 2, 3]
        do_not_optimize(payload)
        assert sink_value() is payload

    def test_accepts_none(self):
        do_not_optimize(object())
        do_not_optimize(None)
        assert sink_value() is None

    def test_clobber_releases_value(self):
        do_not_optimize("value")
        clobber()
        assert sink_value() is None
