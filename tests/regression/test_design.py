"""
Tests for PolynomialDesign construction.
"""

import numpy as np
import pytest

from polyplot.regression.design import PolynomialDesign
from polyplot.core.exceptions import InsufficientDataError, InvalidDegreeError


class TestPolynomialDesign:

    def test_from_arrays(self):
        design = PolynomialDesign.from_arrays([1, 2, 3], [2, 4, 6], 2)
        assert design.n == 3
        assert design.p == 3
        assert design.degree == 2
        np.testing.assert_array_equal(design.X, [[1, 1], [2, 4], [3, 9]])

    def test_from_pairs(self, simple_points):
        design = PolynomialDesign.from_pairs(simple_points, 1)
        np.testing.assert_array_equal(design.x, [1.0, 3.0, 6.0, 8.0])
        np.testing.assert_array_equal(design.y, [3.0, 6.0, 5.0, 7.0])

    def test_augmented_has_intercept_column(self):
        design = PolynomialDesign.from_arrays([1.0, 2.0], [0.0, 1.0], 1)
        np.testing.assert_array_equal(design.augmented(), [[1.0, 1.0], [1.0, 2.0]])

    def test_inputs_are_copied_and_read_only(self):
        x = np.array([1.0, 2.0, 3.0])
        design = PolynomialDesign.from_arrays(x, [1.0, 2.0, 3.0], 1)
        x[0] = 100.0
        assert design.x[0] == 1.0
        with pytest.raises(ValueError):
            design.y[0] = 5.0

    def test_min_samples_override(self):
        design = PolynomialDesign.from_pairs([(1.0, 2.0)], 1, min_samples=1)
        assert design.n == 1

    def test_default_min_samples(self):
        with pytest.raises(InsufficientDataError):
            PolynomialDesign.from_pairs([(1.0, 2.0)], 1)

    def test_invalid_degree(self):
        with pytest.raises(InvalidDegreeError):
            PolynomialDesign.from_arrays([1.0, 2.0], [1.0, 2.0], 0)
