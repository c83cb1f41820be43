"""Nodal Lagrange interpolation basis on an arbitrary 1D node set.

Key Functions:
    Lagrange: Value of the Lagrange polynomial attached to one node.
    dLagrange: Its first derivative.
    ddLagrange: Its second derivative.

Note:
    Derivatives are written out from the product form rather than obtained
    by differentiating a fitted polynomial. Nodes must be distinct; this is
    not checked (repeated nodes divide by zero).
"""
from ..core.errors import InvalidModeError


def _check_mode(nodes, mode):
    if not 0 <= mode < len(nodes):
        raise InvalidModeError(
            f"Invalid mode {mode} for Lagrange basis on {len(nodes)} nodes")


def Lagrange(nodes, y, mode: int):
    """Evaluate the Lagrange basis polynomial of node ``mode`` at ``y``.

    Args:
        nodes: Distinct interpolation nodes, shape (P,).
        y: Evaluation point (float or ndarray).
        mode: Index of the node the polynomial belongs to.

    Returns:
        L_mode(y) = ∏_{i≠mode} (y - xᵢ)/(x_mode - xᵢ). Satisfies
        L_mode(x_k) = δ_{mode,k}.
    """
    _check_mode(nodes, mode)
    xm = nodes[mode]
    lag = 1.0

    for i in range(len(nodes)):
        if i != mode:
            lag = lag*((y - nodes[i])/(xm - nodes[i]))

    return lag


def dLagrange(nodes, y, mode: int):
    """Evaluate dL_mode/dy at ``y``.

    Sum over i≠mode of ∏_{j≠mode,i}(y - xⱼ) divided by the common
    denominator ∏_{j≠mode}(x_mode - xⱼ).
    """
    _check_mode(nodes, mode)
    P = len(nodes)
    xm = nodes[mode]

    den = 1.0
    for j in range(P):
        if j != mode:
            den = den*(xm - nodes[j])

    dlag = 0.0
    for i in range(P):
        if i != mode:
            num = 1.0
            for j in range(P):
                if j != mode and j != i:
                    num = num*(y - nodes[j])
            dlag = dlag + num/den

    return dlag


def ddLagrange(nodes, y, mode: int):
    """Evaluate d²L_mode/dy² at ``y``.

    Double sum over ordered pairs (i, j), both ≠ mode and i ≠ j, of the
    product of (y - x_k) over the remaining k, divided by the same
    denominator as dLagrange.
    """
    _check_mode(nodes, mode)
    P = len(nodes)
    xm = nodes[mode]

    den = 1.0
    for k in range(P):
        if k != mode:
            den = den*(xm - nodes[k])

    ddlag = 0.0
    for i in range(P):
        if i == mode:
            continue
        for j in range(P):
            if j == mode or j == i:
                continue
            num = 1.0
            for k in range(P):
                if k != mode and k != i and k != j:
                    num = num*(y - nodes[k])
            ddlag = ddlag + num/den

    return ddlag
