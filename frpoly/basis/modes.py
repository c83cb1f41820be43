"""Mode ordering for 2D modal bases and the collapsed-coordinate map.

The Dubiner basis, its derivatives, the hierarchical Legendre basis and the
exponential filter all index modes the same way: by total degree layer
k = i + j, and inside a layer by j = 0..k (so i = k - j). Mass and stiffness
assembly downstream depends on this order.

Key Functions:
    n_dofs: Number of modes for a given order and element shape.
    mode_indices: Ordered (i, j) pairs.
    mode_to_ij: The (i, j) pair of one mode, with range checking.
    rs_to_ab: Collapsed (Duffy) coordinates of a reference-triangle point.

References:
    Hesthaven, J.S. and Warburton, T. (2008). Nodal Discontinuous Galerkin
    Methods: Algorithms, Analysis, and Applications. Springer. (RStoAB)
"""
from ..core.errors import InvalidModeError, check_order

SHAPES = ("tri", "quad")


def _check_shape(shape):
    if shape not in SHAPES:
        raise ValueError(f"Unknown element shape '{shape}', expected one of {SHAPES}")


def n_dofs(order: int, shape: str = "tri") -> int:
    """Number of modes of degree <= order.

    (order+1)(order+2)/2 on a triangle (total degree), (order+1)^2 on a
    quadrilateral (degree per direction).
    """
    _check_shape(shape)
    p = check_order(order)
    if shape == "tri":
        return (p+1)*(p+2)//2
    return (p+1)*(p+1)


def mode_indices(order: int, shape: str = "tri"):
    """Return the (i, j) degree pairs of every mode, in mode order.

    Args:
        order: Maximum polynomial order.
        shape: "tri" keeps layers k <= order; "quad" runs layers up to
            2*order so that every pair with i, j <= order appears.

    Returns:
        Tuple of (i, j) tuples of length n_dofs(order, shape).
    """
    _check_shape(shape)
    p = check_order(order)
    max_layer = p if shape == "tri" else 2*p

    pairs = []
    for k in range(max_layer+1):
        for j in range(k+1):
            i = k-j
            if i <= p and j <= p:
                pairs.append((i, j))

    return tuple(pairs)


def mode_to_ij(mode: int, order: int, shape: str = "tri"):
    """Return the (i, j) pair of ``mode``.

    Raises:
        InvalidModeError: If mode is negative or >= n_dofs(order, shape).
    """
    ndof = n_dofs(order, shape)
    if not 0 <= mode < ndof:
        raise InvalidModeError(
            f"Invalid mode {mode} for order {order} {shape} basis ({ndof} modes)")

    return mode_indices(order, shape)[mode]


def rs_to_ab(rs):
    """Map a reference-triangle point (r, s) to collapsed coordinates (a, b).

    b = s and a = 2(1 + r)/(1 - s) - 1. The top vertex s = 1 collapses the
    whole edge a ∈ [-1, 1] to a point; a = -1 is used there.
    """
    r, s = rs[0], rs[1]

    if s == 1.0:
        a = -1.0
    else:
        a = 2.0*(1.0 + r)/(1.0 - s) - 1.0

    return a, s
