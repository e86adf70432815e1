"""Tests for the normal and Student-t quantile approximations."""

import math
from statistics import NormalDist

import pytest

from sample_stats.core.statistics.distributions import (
    NORMAL_APPROX_DF,
    inverse_normal_cdf,
    inverse_t_distribution,
    critical_t_value,
    t_sf,
)


# One-tailed t-table values: df -> {alpha: t}
KNOWN_T_VALUES = {
    1: {0.10: 3.078, 0.05: 6.314, 0.025: 12.706, 0.01: 31.821, 0.005: 63.657},
    2: {0.10: 1.886, 0.05: 2.920, 0.025: 4.303, 0.01: 6.965, 0.005: 9.925},
    3: {0.10: 1.638, 0.05: 2.353, 0.025: 3.182, 0.01: 4.541, 0.005: 5.841},
    4: {0.10: 1.533, 0.05: 2.132, 0.025: 2.776, 0.01: 3.747, 0.005: 4.604},
    5: {0.10: 1.476, 0.05: 2.015, 0.025: 2.571, 0.01: 3.365, 0.005: 4.032},
    6: {0.10: 1.440, 0.05: 1.943, 0.025: 2.447, 0.01: 3.143, 0.005: 3.707},
    7: {0.10: 1.415, 0.05: 1.895, 0.025: 2.365, 0.01: 2.998, 0.005: 3.499},
    8: {0.10: 1.397, 0.05: 1.860, 0.025: 2.306, 0.01: 2.896, 0.005: 3.355},
    9: {0.10: 1.383, 0.05: 1.833, 0.025: 2.262, 0.01: 2.821, 0.005: 3.250},
    10: {0.10: 1.372, 0.05: 1.812, 0.025: 2.228, 0.01: 2.764, 0.005: 3.169},
    15: {0.10: 1.341, 0.05: 1.753, 0.025: 2.131, 0.01: 2.602, 0.005: 2.947},
    20: {0.10: 1.325, 0.05: 1.725, 0.025: 2.086, 0.01: 2.528, 0.005: 2.845},
    25: {0.10: 1.316, 0.05: 1.708, 0.025: 2.060, 0.01: 2.485, 0.005: 2.787},
    30: {0.10: 1.310, 0.05: 1.697, 0.025: 2.042, 0.01: 2.457, 0.005: 2.750},
    40: {0.10: 1.303, 0.05: 1.684, 0.025: 2.021, 0.01: 2.423, 0.005: 2.704},
    60: {0.10: 1.296, 0.05: 1.671, 0.025: 2.000, 0.01: 2.390, 0.005: 2.660},
    120: {0.10: 1.289, 0.05: 1.658, 0.025: 1.980, 0.01: 2.358, 0.005: 2.617},
}

KNOWN_Z_VALUES = {
    0.10: 1.282,
    0.05: 1.645,
    0.025: 1.960,
    0.01: 2.326,
    0.005: 2.576,
    0.001: 3.090,
}


def _tolerance(df, alpha):
    """Accepted relative error for the closed-form approximation."""
    if df == 1:
        base = 0.05
    elif df == 2:
        base = 0.70
    elif df <= 7:
        base = 0.30
    elif df <= 30:
        base = 0.05
    else:
        base = 0.02
    return base * (1.5 if alpha <= 0.01 else 1.0)


# -----------------------------------------------------------------------------
# Inverse normal CDF
# -----------------------------------------------------------------------------

class TestInverseNormalCdf:
    """Upper-tail standard normal quantile."""

    @pytest.mark.parametrize("alpha, expected", sorted(KNOWN_Z_VALUES.items()))
    def test_known_values(self, alpha, expected):
        assert inverse_normal_cdf(alpha) == pytest.approx(expected, abs=0.003)

    @pytest.mark.parametrize("alpha", sorted(KNOWN_Z_VALUES))
    def test_common_levels_are_pinned(self, alpha):
        exact = NormalDist().inv_cdf(1.0 - alpha)
        assert inverse_normal_cdf(alpha) == pytest.approx(exact, abs=1e-9)

    @pytest.mark.parametrize(
        "alpha, expected",
        [
            (1.0 / 10.0, 1.282),
            (1.0 / 20.0, 1.645),
            (1.0 / 40.0, 1.960),
            (1.0 / 100.0, 2.326),
            (1.0 / 200.0, 2.576),
            (1.0 / 1000.0, 3.090),
        ],
    )
    def test_computed_alphas_match_pinned_values(self, alpha, expected):
        assert inverse_normal_cdf(alpha) == pytest.approx(expected, abs=0.003)

    def test_pin_tolerates_rounding_noise(self):
        assert inverse_normal_cdf(0.05 + 1e-12) == inverse_normal_cdf(0.05)

    @pytest.mark.parametrize("alpha", [0.2, 0.3, 0.4, 0.07, 0.015, 1e-4, 1e-8, 0.6, 0.9, 0.975])
    def test_rational_approximation_accuracy(self, alpha):
        exact = NormalDist().inv_cdf(1.0 - alpha)
        assert inverse_normal_cdf(alpha) == pytest.approx(exact, abs=5e-4)

    def test_median_is_zero(self):
        assert inverse_normal_cdf(0.5) == pytest.approx(0.0, abs=5e-4)

    @pytest.mark.parametrize("alpha", [0.01, 0.05, 0.10, 0.25])
    def test_symmetry(self, alpha):
        assert inverse_normal_cdf(alpha) == pytest.approx(-inverse_normal_cdf(1 - alpha), abs=0.001)

    def test_tiny_probability_uses_asymptotic_form(self):
        p = 1e-25
        assert inverse_normal_cdf(p) == math.sqrt(-2.0 * math.log(p))

    @pytest.mark.parametrize("alpha", [0.0, -0.1])
    def test_non_positive_alpha(self, alpha):
        assert inverse_normal_cdf(alpha) == math.inf

    @pytest.mark.parametrize("alpha", [1.0, 1.5])
    def test_alpha_at_least_one(self, alpha):
        assert inverse_normal_cdf(alpha) == -math.inf


# -----------------------------------------------------------------------------
# Critical t values
# -----------------------------------------------------------------------------

class TestCriticalTValue:
    """One-tailed critical values of Student's t."""

    @pytest.mark.parametrize(
        "df, alpha, expected",
        [
            (df, alpha, expected)
            for df, row in KNOWN_T_VALUES.items()
            for alpha, expected in row.items()
        ],
    )
    def test_known_value_accuracy(self, df, alpha, expected):
        calculated = critical_t_value(df, alpha)
        relative_error = abs(calculated - expected) / expected
        assert relative_error < _tolerance(df, alpha), (
            f"df={df}, alpha={alpha}: calculated={calculated:.4f}, expected={expected}"
        )

    @pytest.mark.parametrize(
        "df, alpha, expected, tolerance",
        [
            (10, 0.05, 1.812461, 0.02),
            (5, 0.01, 3.365431, 0.25),
            (20, 0.025, 2.085963, 0.05),
            (50, 0.10, 1.298814, 0.02),
        ],
    )
    def test_matches_r_qt(self, df, alpha, expected, tolerance):
        """Reference values from R: qt(alpha, df, lower.tail = FALSE)."""
        calculated = critical_t_value(df, alpha)
        assert abs(calculated - expected) / expected < tolerance

    def test_cauchy_is_exact(self):
        for alpha in (0.10, 0.05, 0.025, 0.01):
            expected = math.tan(math.pi * (0.5 - alpha))
            assert critical_t_value(1, alpha) == pytest.approx(expected, rel=1e-12)
        assert critical_t_value(1, 0.05) == pytest.approx(6.3138, abs=1e-4)

    def test_two_degrees_of_freedom_closed_form(self):
        z = inverse_normal_cdf(0.05)
        assert critical_t_value(2, 0.05) == pytest.approx(z / math.sqrt(1.0 - z * z / (z * z + 2.0)))

    @pytest.mark.parametrize("df", [3, 5, 10, 30])
    def test_increases_as_alpha_decreases(self, df):
        values = [critical_t_value(df, alpha) for alpha in (0.10, 0.05, 0.025, 0.01, 0.005)]
        assert all(higher > lower for lower, higher in zip(values, values[1:])), values

    def test_decreases_as_df_increases(self):
        values = [critical_t_value(df, 0.05) for df in (8, 15, 30, 60, 120)]
        assert all(lower < higher for higher, lower in zip(values, values[1:])), values

    @pytest.mark.parametrize("df", [100, 200, 500, 1000])
    def test_converges_to_normal(self, df):
        normal = inverse_normal_cdf(0.05)
        assert abs(critical_t_value(df, 0.05) - normal) / normal < 0.01

    @pytest.mark.parametrize("df", [NORMAL_APPROX_DF, 10_000, 100_000])
    def test_large_df_uses_normal(self, df):
        assert critical_t_value(df, 0.05) == inverse_normal_cdf(0.05)

    @pytest.mark.parametrize("df", [1.5, 2.5, 10.7, 25.3])
    def test_fractional_df(self, df):
        result = critical_t_value(df, 0.05)
        assert math.isfinite(result)
        assert result > 0

    @pytest.mark.parametrize("alpha", [1e-6, 1e-8, 1e-10])
    def test_very_small_alpha(self, alpha):
        result = critical_t_value(10, alpha)
        assert math.isfinite(result)
        assert result > 0

    @pytest.mark.parametrize("alpha", [0.5, 0.4, 0.3])
    def test_large_alpha(self, alpha):
        result = critical_t_value(10, alpha)
        assert math.isfinite(result)
        assert abs(result) < 10

    def test_alpha_above_half_is_negative(self):
        assert critical_t_value(10, 0.95) == pytest.approx(-critical_t_value(10, 0.05), abs=0.01)

    @pytest.mark.parametrize("df, alpha", [(0, 0.05), (-1, 0.05), (10, 0), (10, -0.1)])
    def test_invalid_parameters_give_infinity(self, df, alpha):
        assert critical_t_value(df, alpha) == math.inf

    @pytest.mark.parametrize("alpha", [1.0, 1.5])
    def test_alpha_at_least_one_gives_negative_infinity(self, alpha):
        assert critical_t_value(10, alpha) == -math.inf

    def test_nan_df(self):
        assert math.isnan(critical_t_value(float("nan"), 0.05))

    def test_inverse_t_matches_critical_value_below_cutoff(self):
        for df in (1, 2, 3, 7.5, 12, 999):
            assert inverse_t_distribution(df, 0.025) == critical_t_value(df, 0.025)

    def test_deterministic(self):
        assert len({critical_t_value(9.3, 0.05) for _ in range(50)}) == 1


# -----------------------------------------------------------------------------
# Survival function
# -----------------------------------------------------------------------------

class TestTSurvival:
    """Exact upper-tail probability of Student's t."""

    @pytest.mark.parametrize("df", [1, 2, 5, 30, 500])
    def test_zero_is_half(self, df):
        assert t_sf(0.0, df) == pytest.approx(0.5, abs=1e-12)

    @pytest.mark.parametrize("t", [-3.0, -0.5, 0.25, 1.0, 4.0])
    def test_cauchy_closed_form(self, t):
        expected = 0.5 - math.atan(t) / math.pi
        assert t_sf(t, 1) == pytest.approx(expected, abs=1e-10)

    @pytest.mark.parametrize("t", [0.5, 2.0, 6.0])
    def test_two_df_closed_form(self, t):
        expected = 0.5 - t / (2.0 * math.sqrt(t * t + 2.0))
        assert t_sf(t, 2) == pytest.approx(expected, abs=1e-10)

    @pytest.mark.parametrize(
        "t, df, alpha",
        [
            (1.812461, 10, 0.05),
            (2.085963, 20, 0.025),
        ],
    )
    def test_r_quantiles_round_trip(self, t, df, alpha):
        assert t_sf(t, df) == pytest.approx(alpha, abs=1e-5)

    def test_symmetry(self):
        assert t_sf(-1.7, 12) == pytest.approx(1.0 - t_sf(1.7, 12), abs=1e-12)

    def test_large_df_approaches_normal(self):
        assert t_sf(1.6448536269514722, 100_000) == pytest.approx(0.05, abs=1e-4)

    def test_infinite_statistic(self):
        assert t_sf(math.inf, 5) == 0.0
        assert t_sf(-math.inf, 5) == 1.0

    @pytest.mark.parametrize("t, df", [(float("nan"), 5), (1.0, float("nan")), (1.0, 0), (1.0, -2)])
    def test_undefined_inputs(self, t, df):
        assert math.isnan(t_sf(t, df))
