"""Tests for named-parameter lookup."""

from smhicast.derive.parameters import lookup
from smhicast.models.forecast import NamedParameter


class TestLookup:
    def test_present(self):
        params = [NamedParameter("t", (21.5,))]
        assert lookup(params, "t") == 21.5

    def test_absent(self):
        params = [NamedParameter("t", (21.5,))]
        assert lookup(params, "ws") is None

    def test_empty_list(self):
        assert lookup([], "t") is None

    def test_only_first_value_used(self):
        params = [NamedParameter("t", (3.0, 7.0, 9.0))]
        assert lookup(params, "t") == 3.0

    def test_empty_values_is_absent(self):
        params = [NamedParameter("t", ())]
        assert lookup(params, "t") is None

    def test_empty_values_skipped_for_later_match(self):
        params = [NamedParameter("t", ()), NamedParameter("t", (4.0,))]
        assert lookup(params, "t") == 4.0

    def test_case_sensitive(self):
        params = [NamedParameter("Wsymb2", (8.0,))]
        assert lookup(params, "wsymb2") is None
        assert lookup(params, "Wsymb2") == 8.0

    def test_order_independent(self):
        params = [
            NamedParameter("msl", (1012.0,)),
            NamedParameter("r", (80.0,)),
            NamedParameter("t", (5.0,)),
        ]
        assert lookup(params, "t") == 5.0
        assert lookup(reversed(params), "t") == 5.0

    def test_zero_is_present(self):
        params = [NamedParameter("pmean", (0.0,))]
        assert lookup(params, "pmean") == 0.0
