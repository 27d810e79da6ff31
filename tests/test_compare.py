"""Tests for constant-time comparison."""

import pytest

from saltyhash.core.compare import constant_time_compare


class CountingStr(str):
    """A str that counts how many characters have been iterated."""

    def __new__(cls, value: str):
        obj = super().__new__(cls, value)
        obj.visited = 0
        return obj

    def __iter__(self):
        for ch in str.__iter__(self):
            self.visited += 1
            yield ch


class TestConstantTimeCompare:
    @pytest.mark.parametrize("s", ["", "a", "hello world", "ünïcødé ✓", "x" * 1000])
    def test_equal(self, s):
        assert constant_time_compare(s, s)

    @pytest.mark.parametrize("s", ["", "a", "hello"])
    def test_length_mismatch(self, s):
        assert not constant_time_compare(s, s + "x")
        assert not constant_time_compare(s + "x", s)

    def test_different_same_length(self):
        assert not constant_time_compare("abcd", "abce")
        assert not constant_time_compare("abcd", "Abcd")

    @pytest.mark.parametrize("other", ["xbcdefgh", "abcdefgx", "abcdefgh", "zzzzzzzz"])
    def test_scans_full_length(self, other):
        a = CountingStr("abcdefgh")
        b = CountingStr(other)
        constant_time_compare(a, b)
        assert a.visited == 8
        assert b.visited == 8

    def test_length_mismatch_skips_scan(self):
        a = CountingStr("abc")
        assert not constant_time_compare(a, "abcd")
        assert a.visited == 0
