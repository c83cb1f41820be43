"""Legendre polynomials on the reference interval [-1, 1].

Key Functions:
    Legendre: Evaluate P_n(r) by the three-term recurrence.
    dLegendre: Evaluate dP_n/dr, with exact closed forms at r = ±1.
    Legendre2D_hierarchical: Tensor-product Legendre modes on [-1, 1]^2,
        ordered like the simplex modes (see frpoly.basis.modes).

Note:
    Polynomials are not normalized: P_n(1) = 1.
"""
from .modes import mode_to_ij


def Legendre(r, n: int):
    """Evaluate the Legendre polynomial P_n at r.

    Uses the recurrence P_n = ((2n-1) r P_{n-1} - (n-1) P_{n-2}) / n,
    carrying the two previous values instead of recursing.

    Args:
        r: Evaluation point (float or ndarray).
        n: Degree. Negative degrees give 0.

    Returns:
        P_n(r).
    """
    if n < 0:
        return 0.0 * r

    L1 = 0.0 * r
    L0 = 1.0 + 0.0 * r

    for i in range(1, n+1):
        L2 = L1
        L1 = L0
        L0 = ((2*i-1)*r*L1 - (i-1)*L2)/i

    return L0


def dLegendre(r: float, n: int) -> float:
    """Evaluate dP_n/dr at a single point r.

    Away from the endpoints, dP_n/dr = n (r P_n - P_{n-1}) / (r² - 1).
    At r = 1 the derivative is n(n+1)/2 and at r = -1 it is
    (-1)^(n-1) n(n+1)/2; these are returned directly since the general
    formula is 0/0 there.
    """
    if n <= 0:
        return 0.0

    if r == 1.0:
        return 0.5*n*(n+1.0)
    if r == -1.0:
        return (-1.0)**(n-1)*0.5*n*(n+1.0)

    return n*(r*Legendre(r, n) - Legendre(r, n-1))/(r*r - 1.0)


def Legendre2D_hierarchical(mode: int, loc, order: int) -> float:
    """Evaluate a hierarchical tensor-product Legendre mode on [-1, 1]^2.

    Args:
        mode: Mode index, 0 <= mode < (order+1)^2.
        loc: Point (x, y).
        order: Maximum degree in each direction.

    Returns:
        P_i(x) P_j(y), where (i, j) is the pair at position ``mode`` in
        the tensor mode ordering.

    Raises:
        InvalidModeError: If mode is out of range.
    """
    i, j = mode_to_ij(mode, order, "quad")
    return Legendre(loc[0], i)*Legendre(loc[1], j)
