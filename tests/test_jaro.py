"""Tests for Jaro and Jaro-Winkler similarity"""

import pytest

from namehint.jaro import jaro, jaro_winkler

PAIRS = [
    ("MARTHA", "MARHTA"),
    ("DIXON", "DICKSONX"),
    ("property", "proprty"),
    ("getCounter", "getCouner"),
    ("processData", "randomMethod"),
    ("abc", "xyz"),
    ("café", "cafe"),
    ("", "abc"),
    ("a", "b"),
]


class TestJaro:
    """Test jaro function."""

    @pytest.mark.parametrize("s", ["a", "push", "getCounter", "snake_case", "ü"])
    def test_reflexive(self, s):
        """Test a string compared with itself scores 1"""
        assert jaro(s, s) == 1.0

    def test_equal_empty_strings(self):
        """Test the identity shortcut applies before the empty check"""
        assert jaro("", "") == 1.0

    @pytest.mark.parametrize("s", ["a", "abc"])
    def test_empty_against_nonempty(self, s):
        """Test an empty string against a nonempty one scores 0"""
        assert jaro("", s) == 0.0
        assert jaro(s, "") == 0.0

    def test_no_matches(self):
        """Test strings without matching characters score 0"""
        assert jaro("abc", "xyz") == 0.0

    def test_classic_transposition(self):
        """Test MARTHA/MARHTA reference value"""
        assert jaro("MARTHA", "MARHTA") == pytest.approx(0.944444, abs=1e-6)

    def test_classic_unequal_lengths(self):
        """Test DIXON/DICKSONX reference value"""
        assert jaro("DIXON", "DICKSONX") == pytest.approx(0.766667, abs=1e-6)

    def test_single_deleted_character(self):
        """Test a single deleted character keeps similarity high"""
        assert jaro("property", "proprty") > 0.9

    def test_match_window(self):
        """Test characters outside the match window do not match"""
        # window for length 2 is 0: only same-position characters can match
        assert jaro("ab", "ba") == 0.0

    @pytest.mark.parametrize("s1,s2", PAIRS)
    def test_symmetric(self, s1, s2):
        """Test jaro(s1, s2) == jaro(s2, s1)"""
        assert jaro(s1, s2) == pytest.approx(jaro(s2, s1))

    @pytest.mark.parametrize("s1,s2", PAIRS)
    def test_bounded(self, s1, s2):
        """Test results stay in [0, 1]"""
        assert 0.0 <= jaro(s1, s2) <= 1.0


class TestJaroWinkler:
    """Test jaro_winkler function."""

    @pytest.mark.parametrize("s", ["a", "push", "getCounter", "ü"])
    def test_reflexive(self, s):
        """Test a string compared with itself scores 1"""
        assert jaro_winkler(s, s) == 1.0

    def test_classic_reference_values(self):
        """Test reference values with the 0.1 scaling factor"""
        assert jaro_winkler("MARTHA", "MARHTA") == pytest.approx(0.961111, abs=1e-6)
        assert jaro_winkler("DIXON", "DICKSONX") == pytest.approx(0.813333, abs=1e-6)

    def test_prefix_capped_at_four(self):
        """Test only the first four shared characters earn a bonus"""
        # jaro = 5/6 with six matching characters; bonus uses 4, not 6
        assert jaro_winkler("abcdefgh", "abcdefxx") == pytest.approx(0.9)
        assert jaro_winkler("abcdefgh", "abcdxxxx") == pytest.approx(0.8)

    def test_no_shared_prefix_equals_jaro(self):
        """Test strings differing at the first character get no bonus"""
        assert jaro_winkler("xproperty", "property") == jaro("xproperty", "property")

    def test_prefix_is_case_sensitive(self):
        """Test the prefix compares raw characters"""
        assert jaro_winkler("Abcd", "abcd") == jaro("Abcd", "abcd")

    @pytest.mark.parametrize("s1,s2", PAIRS)
    def test_at_least_jaro(self, s1, s2):
        """Test jaro_winkler(s1, s2) >= jaro(s1, s2)"""
        assert jaro_winkler(s1, s2) >= jaro(s1, s2)

    @pytest.mark.parametrize("s1,s2", PAIRS)
    def test_bounded(self, s1, s2):
        """Test results stay in [0, 1]"""
        assert 0.0 <= jaro_winkler(s1, s2) <= 1.0
