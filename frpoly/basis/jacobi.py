"""Normalized Jacobi polynomials.

The polynomials returned here are orthonormal on [-1, 1] with respect to the
weight (1 - r)^alpha (1 + r)^beta, which is the normalization the Dubiner
basis is built from. With alpha = beta = 0 they reduce to
sqrt((2n+1)/2) P_n(r).

Key Functions:
    eval_gamma: Gamma function at a positive integer.
    eval_jacobi: Normalized Jacobi polynomial P_n^(alpha, beta)(r).
    eval_grad_jacobi: Its derivative with respect to r.

References:
    Hesthaven, J.S. and Warburton, T. (2008). Nodal Discontinuous Galerkin
    Methods. Springer. (JacobiP, GradJacobiP)
"""
import numpy as np


def eval_gamma(n: int) -> float:
    """Gamma(n) = (n-1)! for a positive integer n."""
    n = int(n)
    if n < 1:
        raise ValueError(f"eval_gamma requires a positive integer, got {n}")

    gamma_val = 1.0
    for k in range(2, n):
        gamma_val = gamma_val*k

    return gamma_val


def eval_jacobi(r, alpha: int, beta: int, n: int):
    """Evaluate the normalized Jacobi polynomial of degree n at r.

    Degrees 0 and 1 come from their closed forms; higher degrees use the
    normalized three-term recurrence

        a_{i+1} P_{i+1} = (r - b_i) P_i - a_i P_{i-1},

    with a_i = 2/(2i+α+β) sqrt(i(i+α+β)(i+α)(i+β) / ((2i+α+β-1)(2i+α+β+1)))
    and b_i = -(α² - β²) / ((2i+α+β)(2i+α+β+2)).

    Args:
        r: Evaluation point (float or ndarray).
        alpha, beta: Non-negative integer weight exponents.
        n: Degree. Negative degrees give 0.

    Returns:
        Normalized P_n^(alpha, beta)(r).
    """
    if n < 0:
        return 0.0 * r

    ab = alpha + beta
    norm0 = 2.0**(-ab-1)*eval_gamma(ab+2)/(eval_gamma(alpha+1)*eval_gamma(beta+1))
    P0 = np.sqrt(norm0) + 0.0*r
    if n == 0:
        return P0

    P1 = 0.5*P0*np.sqrt((ab+3.0)/((alpha+1.0)*(beta+1.0)))*((ab+2.0)*r + (alpha-beta))
    if n == 1:
        return P1

    a_old = 2.0/(ab+2.0)*np.sqrt((alpha+1.0)*(beta+1.0)/(ab+3.0))
    P_prev, P_curr = P0, P1

    for i in range(1, n):
        h1 = 2*i + ab
        a_new = 2.0/(h1+2.0)*np.sqrt((i+1.0)*(i+1.0+ab)*(i+1.0+alpha)*(i+1.0+beta)
                                     / ((h1+1.0)*(h1+3.0)))
        b_new = -(alpha*alpha - beta*beta)/(h1*(h1+2.0))
        P_next = ((r - b_new)*P_curr - a_old*P_prev)/a_new
        P_prev, P_curr = P_curr, P_next
        a_old = a_new

    return P_curr


def eval_grad_jacobi(r, alpha: int, beta: int, n: int):
    """Derivative of the normalized Jacobi polynomial of degree n.

    d/dr P_n^(α,β) = sqrt(n(n+α+β+1)) P_{n-1}^(α+1,β+1).
    """
    if n <= 0:
        return 0.0 * r

    return np.sqrt(1.0*n*(n+alpha+beta+1))*eval_jacobi(r, alpha+1, beta+1, n-1)
