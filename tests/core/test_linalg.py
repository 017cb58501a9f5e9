"""
Tests for QR decomposition and the least-squares solve.
"""

import numpy as np
import pytest

from polyplot.core.compute.linalg import qr_cpu, qr_solve_cpu
from polyplot.core.exceptions import SingularMatrixError


class TestQRDecomposition:

    def test_reconstructs_matrix(self, rng):
        X = rng.standard_normal((20, 4))
        qr = qr_cpu(X)
        np.testing.assert_allclose(qr.Q @ qr.R, X, atol=1e-12)
        assert qr.rank == 4

    def test_reduced_shapes(self, rng):
        qr = qr_cpu(rng.standard_normal((10, 3)), mode='reduced')
        assert qr.Q.shape == (10, 3)
        assert qr.R.shape == (3, 3)

    def test_rank_of_duplicate_column(self, rng):
        x = rng.standard_normal(10)
        X = np.column_stack([np.ones(10), x, x])
        assert qr_cpu(X).rank == 2

    def test_zero_matrix_has_rank_zero(self):
        assert qr_cpu(np.zeros((4, 2))).rank == 0

    def test_condition_number_of_orthogonal_columns(self):
        X = np.eye(3)
        assert qr_cpu(X).condition_number() == pytest.approx(1.0)

    def test_condition_number_infinite_when_rank_deficient(self):
        X = np.column_stack([np.ones(5), np.ones(5)])
        assert qr_cpu(X).condition_number() == float('inf')


class TestQRSolve:

    def test_matches_lstsq(self, rng):
        X = rng.standard_normal((30, 3))
        y = rng.standard_normal(30)
        beta = qr_solve_cpu(X, y, check_rank=True)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(beta, expected, rtol=1e-10)

    def test_reuses_precomputed_factorization(self, rng):
        X = rng.standard_normal((12, 2))
        y = rng.standard_normal(12)
        qr = qr_cpu(X)
        np.testing.assert_array_equal(
            qr_solve_cpu(X, y, check_rank=True, qr_result=qr),
            qr_solve_cpu(X, y, check_rank=True),
        )

    def test_rank_deficient_raises(self):
        X = np.column_stack([np.ones(4), np.full(4, 2.0)])
        y = np.arange(4.0)
        with pytest.raises(SingularMatrixError) as exc_info:
            qr_solve_cpu(X, y, check_rank=True)
        assert exc_info.value.rank == 1
        assert exc_info.value.expected_rank == 2
