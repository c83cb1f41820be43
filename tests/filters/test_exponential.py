"""Tests for frpoly/filters/exponential.py"""
import sys
sys.path.insert(0, '.')

import numpy as np
import pytest

from frpoly.basis.modes import mode_indices, n_dofs
from frpoly.core.errors import InvalidModeError
from frpoly.filters.exponential import exponential_filter


def test_first_mode_untouched():
    """The mean (mode 0) is never damped."""
    for order in range(5):
        assert exponential_filter(0, order, 8, "quad") == 1.0
        assert exponential_filter(0, order, 8, "tri") == 1.0


def test_values_in_unit_interval():
    for shape in ("tri", "quad"):
        for mode in range(n_dofs(4, shape)):
            sigma = exponential_filter(mode, 4, 4, shape)
            assert 0.0 < sigma <= 1.0


def test_known_value_quad():
    """Last quad mode of order 2 is (2, 2): eta = 4/9."""
    assert np.isclose(exponential_filter(8, 2, 2.0), np.exp(-(4.0/9.0)**2))


def test_known_value_tri():
    """Mode 5 of an order-2 triangle is (0, 2): eta = 2/6."""
    assert np.isclose(exponential_filter(5, 2, 3.0, "tri"), np.exp(-(2.0/6.0)**3))


def test_damping_grows_with_degree():
    """Higher total degree is damped at least as much."""
    order = 3
    pairs = mode_indices(order, "quad")
    sigma = [exponential_filter(m, order, 6) for m in range(len(pairs))]
    degree = [i + j for i, j in pairs]
    for a in range(len(pairs)):
        for b in range(len(pairs)):
            if degree[a] < degree[b]:
                assert sigma[a] > sigma[b]
            elif degree[a] == degree[b]:
                assert sigma[a] == sigma[b]


def test_invalid_mode():
    with pytest.raises(InvalidModeError):
        exponential_filter(16, 3, 8)
    with pytest.raises(InvalidModeError):
        exponential_filter(10, 3, 8, "tri")
