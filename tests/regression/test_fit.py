"""
Tests for regression fit().

Tests the complete pipeline: design construction, strategy selection,
and model properties.
"""

import warnings

import pytest
import numpy as np

from polyplot.regression import fit, slope_and_intercept, PolynomialModel
from polyplot.core import Backend
from polyplot.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
)
from polyplot.regression.backends import CPUQRBackend, ClosedFormLinearBackend
from polyplot.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    InsufficientDataError,
    InvalidDegreeError,
    SingularMatrixError,
    ValidationError,
)


class TestFitBasic:
    """Basic fit() functionality tests."""

    def test_returns_model(self, quadratic_data):
        x, y, _ = quadratic_data
        model = fit(x, y, degree=2)
        assert isinstance(model, PolynomialModel)
        assert model.degree == 2
        assert model.coefficients.shape == (2,)

    def test_recovers_noise_free_quadratic(self, quadratic_data):
        x, y, (c0, c1, c2) = quadratic_data
        model = fit(x, y, degree=2)
        assert model.intercept == pytest.approx(c0, abs=1e-10)
        np.testing.assert_allclose(model.coefficients, [c1, c2], atol=1e-10)
        assert model.rss < 1e-20

    def test_recovers_noise_free_cubic(self):
        x = np.arange(0.0, 36.0)
        y = 100.0 + 2.0 * x - 0.5 * x ** 2 + 0.03 * x ** 3
        model = fit(x, y, degree=3)
        assert model.intercept == pytest.approx(100.0, rel=1e-8)
        np.testing.assert_allclose(model.coefficients, [2.0, -0.5, 0.03], rtol=1e-8)

    def test_exactly_determined_system(self):
        # degree + 1 points: the polynomial passes through every point
        model = fit([0.0, 1.0, 2.0], [1.0, 3.0, 7.0], degree=2)
        np.testing.assert_allclose(model.fitted_values, [1.0, 3.0, 7.0], atol=1e-12)
        assert model.intercept == pytest.approx(1.0)
        np.testing.assert_allclose(model.coefficients, [1.0, 1.0], atol=1e-12)

    def test_deterministic(self, rng):
        x = rng.uniform(0, 30, 40)
        y = rng.standard_normal(40)
        first = fit(x, y, degree=3)
        second = fit(x, y, degree=3)
        np.testing.assert_array_equal(first.coefficients, second.coefficients)
        assert first.intercept == second.intercept

    def test_accepts_lists_and_column_vectors(self):
        model = fit(np.array([[1.0], [2.0], [3.0]]), [2.0, 4.0, 6.0], degree=1, method='qr')
        assert model.coefficients[0] == pytest.approx(2.0)
        assert model.intercept == pytest.approx(0.0, abs=1e-12)

    def test_residuals_sum_to_near_zero(self, noisy_line_data):
        x, y = noisy_line_data
        model = fit(x, y, degree=2)
        assert abs(model.residuals.sum()) < 1e-10

    def test_fitted_plus_residuals_equals_y(self, noisy_line_data):
        x, y = noisy_line_data
        model = fit(x, y, degree=3)
        np.testing.assert_allclose(model.fitted_values + model.residuals, y, atol=1e-12)

    def test_r_squared_range(self, noisy_line_data):
        x, y = noisy_line_data
        assert 0.0 <= fit(x, y, degree=2).r_squared <= 1.0


class TestStrategySelection:
    """'auto' picks the closed form for straight lines and QR otherwise."""

    def test_auto_degree_one_is_closed_form(self, noisy_line_data):
        x, y = noisy_line_data
        model = fit(x, y, degree=1)
        assert model.method == 'closed_form'
        assert model.backend_name == 'cpu_closed_form'

    def test_auto_higher_degree_is_qr(self, noisy_line_data):
        x, y = noisy_line_data
        model = fit(x, y, degree=2)
        assert model.method == 'qr'
        assert model.backend_name == 'cpu_qr'

    def test_explicit_qr_for_degree_one(self, noisy_line_data):
        x, y = noisy_line_data
        assert fit(x, y, degree=1, method='qr').method == 'qr'

    def test_closed_form_rejects_higher_degree(self, quadratic_data):
        x, y, _ = quadratic_data
        with pytest.raises(ValidationError, match="degree 1 only"):
            fit(x, y, degree=2, method='closed_form')

    def test_unknown_method(self, quadratic_data):
        x, y, _ = quadratic_data
        with pytest.raises(ValidationError, match="Unknown method"):
            fit(x, y, degree=2, method='svd')

    @pytest.mark.parametrize("backend", [CPUQRBackend(), ClosedFormLinearBackend()])
    def test_backends_satisfy_protocol(self, backend):
        assert isinstance(backend, Backend)

    def test_timing_recorded(self, quadratic_data):
        x, y, _ = quadratic_data
        model = fit(x, y, degree=2)
        assert 'qr_decomposition' in model.timing
        assert 'total_seconds' in model.timing


class TestPathAgreement:
    """QR and closed-form fits of the same straight line agree."""

    def test_simple_points(self, simple_points):
        x = [p[0] for p in simple_points]
        y = [p[1] for p in simple_points]
        qr = fit(x, y, degree=1, method='qr')
        closed = fit(x, y, degree=1, method='closed_form')
        tol = qr.info["tolerance"]
        assert tol is CPU_FP64
        assert closed.info["tolerance"] is CPU_FP64
        np.testing.assert_allclose(qr.coefficients, closed.coefficients,
                                   rtol=tol.rtol, atol=tol.atol)
        assert qr.intercept == pytest.approx(closed.intercept, rel=tol.rtol, abs=tol.atol)

    def test_noisy_line(self, noisy_line_data):
        x, y = noisy_line_data
        qr = fit(x, y, degree=1, method='qr')
        slope, intercept = slope_and_intercept(list(zip(x, y)))
        assert qr.coefficients[0] == pytest.approx(slope, rel=1e-4)
        assert qr.intercept == pytest.approx(intercept, rel=1e-4)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_random_datasets(self, seed):
        rng = np.random.default_rng(seed)
        x = rng.uniform(0.0, 35.0, 30)
        y = rng.uniform(300.0, 1600.0, 30)
        qr = fit(x, y, degree=1, method='qr')
        closed = fit(x, y, degree=1, method='closed_form')
        assert qr.coefficients[0] == pytest.approx(closed.coefficients[0], rel=1e-4)
        assert qr.intercept == pytest.approx(closed.intercept, rel=1e-4)

    def test_ill_conditioned_tier_is_looser(self):
        assert CPU_FP64_ILL_CONDITIONED.rtol > CPU_FP64.rtol
        assert CPU_FP64_ILL_CONDITIONED.atol > CPU_FP64.atol


class TestFitFailures:
    """Every invalid input fails with a typed error; nothing is returned silently."""

    def test_degree_zero(self, quadratic_data):
        x, y, _ = quadratic_data
        with pytest.raises(InvalidDegreeError):
            fit(x, y, degree=0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            fit([1.0, 2.0, 3.0], [1.0, 2.0], degree=1)

    @pytest.mark.parametrize("degree", [1, 2, 3])
    def test_too_few_points(self, degree):
        x = np.arange(float(degree))
        with pytest.raises(InsufficientDataError) as exc_info:
            fit(x, x, degree=degree)
        err = exc_info.value
        assert err.n_samples == degree
        assert err.required == degree + 1
        assert err.degree == degree

    def test_empty(self):
        with pytest.raises(InsufficientDataError):
            fit([], [], degree=1)

    def test_too_few_distinct_points_qr(self):
        # 4 observations, only 2 distinct x: a quadratic is not identifiable
        with pytest.raises(SingularMatrixError) as exc_info:
            fit([1.0, 1.0, 2.0, 2.0], [1.0, 1.5, 2.0, 2.5], degree=2)
        assert exc_info.value.rank == 2
        assert exc_info.value.expected_rank == 3

    def test_identical_x_qr(self):
        with pytest.raises(SingularMatrixError):
            fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0], degree=1, method='qr')

    def test_identical_x_closed_form(self):
        with pytest.raises(DegenerateInputError):
            fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0], degree=1)

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            fit([1.0, np.nan, 3.0], [1.0, 2.0, 3.0], degree=1)

    def test_two_dimensional_x_rejected(self):
        with pytest.raises(DimensionError):
            fit(np.ones((4, 2)), np.ones(4), degree=1)


class TestConditioning:

    def test_well_conditioned_fit_has_no_warnings(self, quadratic_data):
        x, y, _ = quadratic_data
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            model = fit(x, y, degree=2)
        assert model.warnings == ()
        assert model.info['condition_number'] < 1e3
        assert model.info['tolerance'] is CPU_FP64

    def test_ill_conditioned_fit_warns(self):
        x = 1000.0 + np.linspace(0.0, 0.5, 12)
        y = np.sin(x)
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            model = fit(x, y, degree=3)
        assert any("ill-conditioned" in w for w in model.warnings)
        assert model.info["tolerance"] is CPU_FP64_ILL_CONDITIONED
