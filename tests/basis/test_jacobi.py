"""Tests for frpoly/basis/jacobi.py

SciPy is used as an independent reference for the Gamma function, the
classical (unnormalized) Jacobi polynomials and Gauss-Jacobi quadrature.

Run with: pytest tests/basis/test_jacobi.py -v
"""

import sys
sys.path.insert(0, '.')

import numpy as np
import pytest
from scipy import special

from frpoly.basis.jacobi import eval_gamma, eval_jacobi, eval_grad_jacobi
from frpoly.basis.legendre import Legendre


POINTS = np.linspace(-0.9, 0.9, 9)
WEIGHTS = [(0, 0), (1, 0), (3, 0), (5, 0), (1, 1), (2, 3)]


def jacobi_norm(n, alpha, beta):
    """Squared L2 norm of the classical Jacobi polynomial."""
    return (2.0**(alpha+beta+1)/(2*n+alpha+beta+1)
            * special.gamma(n+alpha+1)*special.gamma(n+beta+1)
            / (special.gamma(n+alpha+beta+1)*special.factorial(n)))


# =============================================================================
# Tests: eval_gamma
# =============================================================================

class TestEvalGamma:
    """Tests for the integer Gamma function."""

    def test_base_case(self):
        assert eval_gamma(1) == 1.0

    def test_small_values(self):
        assert eval_gamma(2) == 1.0
        assert eval_gamma(3) == 2.0
        assert eval_gamma(5) == 24.0

    def test_matches_scipy(self):
        for n in range(1, 15):
            assert np.isclose(eval_gamma(n), special.gamma(n), rtol=1e-14)

    def test_non_positive_raises(self):
        with pytest.raises(ValueError):
            eval_gamma(0)


# =============================================================================
# Tests: eval_jacobi
# =============================================================================

class TestEvalJacobi:
    """Tests for normalized Jacobi polynomials."""

    def test_proportional_to_legendre(self):
        """With alpha = beta = 0 the polynomial is sqrt((2n+1)/2) P_n."""
        for n in range(6):
            for r in POINTS:
                expected = np.sqrt((2*n+1)/2.0)*Legendre(r, n)
                assert np.isclose(eval_jacobi(r, 0, 0, n), expected, atol=1e-13)

    def test_matches_scipy_up_to_normalization(self):
        for alpha, beta in WEIGHTS:
            for n in range(8):
                ref = special.eval_jacobi(n, alpha, beta, POINTS)/np.sqrt(jacobi_norm(n, alpha, beta))
                assert np.allclose(eval_jacobi(POINTS, alpha, beta, n), ref, atol=1e-11), \
                    f"alpha={alpha}, beta={beta}, n={n}"

    def test_orthonormal(self):
        """Gauss-Jacobi quadrature of products gives the identity."""
        nmax = 7
        for alpha, beta in WEIGHTS:
            x, w = special.roots_jacobi(nmax+2, alpha, beta)
            V = np.array([eval_jacobi(x, alpha, beta, n) for n in range(nmax+1)])
            M = (V*w) @ V.T
            assert np.allclose(M, np.eye(nmax+1), atol=1e-11)

    def test_negative_degree_is_zero(self):
        assert eval_jacobi(0.4, 1, 0, -1) == 0.0


# =============================================================================
# Tests: eval_grad_jacobi
# =============================================================================

class TestEvalGradJacobi:
    """Tests for Jacobi polynomial derivatives."""

    def test_degree_zero(self):
        assert eval_grad_jacobi(0.3, 2, 0, 0) == 0.0

    def test_matches_finite_difference(self):
        h = 1e-6
        for alpha, beta in WEIGHTS:
            for n in range(1, 7):
                for r in POINTS:
                    fd = (eval_jacobi(r+h, alpha, beta, n) - eval_jacobi(r-h, alpha, beta, n))/(2*h)
                    assert np.isclose(eval_grad_jacobi(r, alpha, beta, n), fd, atol=1e-5), \
                        f"alpha={alpha}, beta={beta}, n={n}, r={r}"

    def test_legendre_derivative(self):
        """Gradient with alpha = beta = 0 is sqrt((2n+1)/2) dP_n/dr."""
        from frpoly.basis.legendre import dLegendre
        for n in range(1, 6):
            for r in POINTS:
                expected = np.sqrt((2*n+1)/2.0)*dLegendre(r, n)
                assert np.isclose(eval_grad_jacobi(r, 0, 0, n), expected, atol=1e-12)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
