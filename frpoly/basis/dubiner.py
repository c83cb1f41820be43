"""Orthonormal Dubiner basis on the reference triangle.

The reference triangle is {(r, s): r, s >= -1, r + s <= 0}. Each mode is a
product of two normalized Jacobi polynomials in the collapsed coordinates
(a, b) = rs_to_ab(r, s):

    ψ_ij(r, s) = sqrt(2) P_i^(0,0)(a) P_j^(2i+1,0)(b) (1 - b)^i

Modes are ordered by frpoly.basis.modes.mode_indices(order, "tri").

Key Functions:
    eval_dubiner_basis_2d: ψ at a point.
    eval_dr_dubiner_basis_2d: ∂ψ/∂r.
    eval_ds_dubiner_basis_2d: ∂ψ/∂s.

Note:
    Derivatives follow from the chain rule through the collapsed map,
    ∂a/∂r = 2/(1-b) and ∂a/∂s = (1+a)/(1-b). The (1-b)^(i-1) factor this
    introduces is only formed for i >= 1; the i = 0 modes do not depend on a
    and get their own branch.

References:
    Dubiner, M. (1991). Spectral methods on triangles and other domains.
    J. Sci. Comput. 6(4).
    Hesthaven, J.S. and Warburton, T. (2008). Nodal Discontinuous Galerkin
    Methods. Springer. (Simplex2DP, GradSimplex2DP)
"""
import numpy as np

from .jacobi import eval_jacobi, eval_grad_jacobi
from .modes import mode_to_ij, rs_to_ab

SQRT2 = np.sqrt(2.0)


def eval_dubiner_basis_2d(rs, mode: int, order: int) -> float:
    """Evaluate Dubiner mode ``mode`` of an order-``order`` basis at rs.

    Raises:
        InvalidModeError: If mode >= (order+1)(order+2)/2 or mode < 0.
    """
    i, j = mode_to_ij(mode, order, "tri")
    a, b = rs_to_ab(rs)

    fa = eval_jacobi(a, 0, 0, i)
    gb = eval_jacobi(b, 2*i+1, 0, j)

    return SQRT2*fa*gb*(1.0 - b)**i


def eval_dr_dubiner_basis_2d(rs, mode: int, order: int) -> float:
    """Evaluate ∂/∂r of Dubiner mode ``mode`` at rs."""
    i, j = mode_to_ij(mode, order, "tri")
    if i == 0:
        return 0.0

    a, b = rs_to_ab(rs)
    dfa = eval_grad_jacobi(a, 0, 0, i)
    gb = eval_jacobi(b, 2*i+1, 0, j)

    return 2.0*SQRT2*dfa*gb*(1.0 - b)**(i-1)


def eval_ds_dubiner_basis_2d(rs, mode: int, order: int) -> float:
    """Evaluate ∂/∂s of Dubiner mode ``mode`` at rs."""
    i, j = mode_to_ij(mode, order, "tri")
    a, b = rs_to_ab(rs)

    fa = eval_jacobi(a, 0, 0, i)
    gb = eval_jacobi(b, 2*i+1, 0, j)
    dgb = eval_grad_jacobi(b, 2*i+1, 0, j)

    if i == 0:
        return SQRT2*fa*dgb

    dfa = eval_grad_jacobi(a, 0, 0, i)
    tmp = dgb*(1.0 - b)**i - i*gb*(1.0 - b)**(i-1)

    return SQRT2*(dfa*gb*(1.0 - b)**(i-1)*(1.0 + a) + fa*tmp)
