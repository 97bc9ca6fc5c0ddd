"""Tests for bounds module."""

import numpy as np
import pytest

from descriptives import InvalidInput
from descriptives.bounds import agresti_coull_interval, normal_bootstrap_interval, normal_quantile


class TestNormalQuantile:
    """Test normal_quantile function."""

    def test_95_percent(self):
        """Test the familiar 1.96 value."""
        assert normal_quantile(0.95) == pytest.approx(1.959964, abs=1e-6)

    def test_other_levels(self):
        """Test 90% and 99% quantiles."""
        assert normal_quantile(0.90) == pytest.approx(1.644854, abs=1e-6)
        assert normal_quantile(0.99) == pytest.approx(2.575829, abs=1e-6)

    def test_increases_with_confidence(self):
        """Test that wider confidence gives a larger quantile."""
        levels = [0.5, 0.8, 0.9, 0.95, 0.99]
        quantiles = [normal_quantile(level) for level in levels]
        assert quantiles == sorted(quantiles)

    @pytest.mark.parametrize("confidence", [0.0, 1.0, -0.5, 1.5, float("nan")])
    def test_out_of_range(self, confidence):
        """Test that levels outside (0, 1) are rejected."""
        with pytest.raises(InvalidInput):
            normal_quantile(confidence)


class TestNormalBootstrapInterval:
    """Test normal_bootstrap_interval function."""

    def test_unbiased_distribution(self):
        """Test interval centered on t0 when the distribution mean equals t0."""
        distribution = np.array([9.0, 10.0, 11.0])
        lower, upper, bias, std_error = normal_bootstrap_interval(10.0, distribution)

        assert bias == pytest.approx(0.0)
        # Population standard deviation, divisor R
        assert std_error == pytest.approx(np.sqrt(2.0 / 3.0))
        np.testing.assert_allclose([lower, upper], [10.0 - 1.959964 * std_error, 10.0 + 1.959964 * std_error], rtol=1e-6)

    def test_bias_shifts_center(self):
        """Test that the center moves opposite to the bias."""
        distribution = np.array([11.0, 12.0, 13.0])
        lower, upper, bias, _ = normal_bootstrap_interval(10.0, distribution)

        assert bias == pytest.approx(2.0)
        assert (lower + upper) / 2 == pytest.approx(8.0)
        # Interval need not contain the observed statistic
        assert upper < 10.0

    @pytest.mark.parametrize("value", [0.1, 2.2, 1e-300])
    def test_constant_distribution(self, value):
        """Test that a zero-spread distribution gives exactly zero width."""
        lower, upper, bias, std_error = normal_bootstrap_interval(value, np.full(1000, value))

        assert bias == 0.0
        assert std_error == 0.0
        assert lower == upper == value

    def test_empty_distribution(self):
        """Test that an empty distribution is rejected."""
        with pytest.raises(InvalidInput):
            normal_bootstrap_interval(1.0, np.array([]))


class TestAgrestiCoullInterval:
    """Test agresti_coull_interval function."""

    def test_fourteen_of_twenty(self):
        """Test 14 successes in 20 trials against the closed form."""
        ci = agresti_coull_interval(14, 20)

        z = 1.959963985
        n_adj = 20 + z**2
        p_adj = (14 + z**2 / 2) / n_adj
        half = z * np.sqrt(p_adj * (1 - p_adj) / n_adj)

        assert ci["successes"] == 14
        assert ci["trials"] == 20
        assert ci["proportion"] == pytest.approx(0.7)
        assert ci["mean"] == pytest.approx(p_adj, rel=1e-8)
        assert ci["lower"] == pytest.approx(p_adj - half, rel=1e-8)
        assert ci["upper"] == pytest.approx(p_adj + half, rel=1e-8)
        assert ci["mean"] == pytest.approx(0.6678, abs=5e-4)
        assert ci["lower"] == pytest.approx(0.4787, abs=5e-4)
        assert ci["upper"] == pytest.approx(0.8568, abs=5e-4)

    def test_zero_successes_clamped(self):
        """Test that the lower bound is clamped at 0."""
        ci = agresti_coull_interval(0, 5)
        assert ci["lower"] == 0.0
        assert 0.0 < ci["mean"] < ci["upper"] < 1.0

    def test_all_successes_clamped(self):
        """Test that the upper bound is clamped at 1."""
        ci = agresti_coull_interval(5, 5)
        assert ci["upper"] == 1.0
        assert 0.0 < ci["lower"] < ci["mean"] < 1.0

    def test_bounds_ordered_for_all_counts(self):
        """Test 0 <= lower <= mean <= upper <= 1 over every (x, n)."""
        for n in range(1, 41):
            for x in range(n + 1):
                ci = agresti_coull_interval(x, n)
                assert 0.0 <= ci["lower"] <= ci["mean"] <= ci["upper"] <= 1.0

    def test_symmetry(self):
        """Test that swapping successes and failures mirrors the interval."""
        ci = agresti_coull_interval(3, 17)
        mirrored = agresti_coull_interval(14, 17)
        assert ci["mean"] == pytest.approx(1 - mirrored["mean"])
        assert ci["lower"] == pytest.approx(1 - mirrored["upper"])
        assert ci["upper"] == pytest.approx(1 - mirrored["lower"])

    def test_numpy_integers(self):
        """Test that numpy integer counts are accepted."""
        ci = agresti_coull_interval(np.int64(3), np.int64(10))
        assert ci["successes"] == 3
        assert isinstance(ci["successes"], int)

    @pytest.mark.parametrize(
        ("successes", "trials"),
        [(0, 0), (-1, 5), (6, 5), (2.5, 5), (True, 5)],
    )
    def test_invalid_counts(self, successes, trials):
        """Test that impossible counts are rejected."""
        with pytest.raises(InvalidInput):
            agresti_coull_interval(successes, trials)
