"""Vincent-Castonguay-Jameson-Huynh (VCJH) correction functions.

In Flux Reconstruction the discontinuous flux inside an element is corrected
towards the common interface flux with a pair of 1D correction functions
g_L, g_R of degree p+1. The VCJH family writes them as

    g_L(ξ) = (-1)^p / 2 [P_p - (η P_{p-1} + P_{p+1}) / (1 + η)]
    g_R(ξ) =          1/2 [P_p + (η P_{p-1} + P_{p+1}) / (1 + η)]

with a single parameter η. Particular values of η recover known schemes:

    DG     η = 0
    SD     η = p / (p+1)
    HU     η = (p+1) / p
    CPLUS  η from the tabulated optimal c+ of Vincent et al.

g_L is 1 at ξ = -1 and 0 at ξ = 1; g_R is its mirror image.

Key Functions:
    compute_eta: η for a scheme and order.
    VCJH_1d: Correction function value.
    dVCJH_1d: Correction function derivative.

References:
    Vincent, P.E., Castonguay, P. and Jameson, A. (2011). A new class of
    high-order energy stable flux reconstruction schemes. J. Sci. Comput. 47.
    Huynh, H.T. (2007). A flux reconstruction approach to high-order schemes
    including Discontinuous Galerkin methods. AIAA 2007-4079.
    Vincent, P.E., Farrington, A.M., Witherden, F.D. and Jameson, A. (2015).
    An extended range of stable-symmetric-conservative Flux Reconstruction
    correction functions. CMAME 296.
"""
from enum import IntEnum
from math import factorial
from numbers import Integral

from ..basis.legendre import Legendre, dLegendre
from ..core.errors import UnsupportedSchemeError, check_order


class Scheme(IntEnum):
    """Correction scheme selector."""
    DG = 0
    SD = 1
    HU = 2
    CPLUS = 3

    @classmethod
    def parse(cls, value):
        """Coerce a member, integer code or name ("hu", "C+", ...) to a Scheme."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper().replace("+", "PLUS")
            if name in cls.__members__:
                return cls[name]
        elif isinstance(value, Integral) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedSchemeError(f"Invalid VCJH scheme: {value!r}")


class Side(IntEnum):
    """Element side a correction function belongs to."""
    LEFT = 0
    RIGHT = 1


# Optimal c+ values in 1D, Vincent et al. (2011), Table 1.
CPLUS_1D = {
    2: 0.206,
    3: 3.80e-3,
    4: 4.67e-5,
    5: 4.28e-7,
}


def compute_eta(scheme, order: int) -> float:
    """Return the VCJH parameter η for a scheme and polynomial order.

    Args:
        scheme: Scheme member, integer code or name.
        order: Polynomial order p of the solution.

    Returns:
        η as a float.

    Raises:
        UnsupportedSchemeError: For an unknown scheme, any scheme other than
            DG at p = 0, or CPLUS outside p = 2..5.
        InvalidOrderError: If order is negative.
    """
    scheme = Scheme.parse(scheme)
    p = check_order(order)

    if p == 0 and scheme != Scheme.DG:
        raise UnsupportedSchemeError(
            f"P=0 only compatible with DG, got {scheme.name}")

    if scheme == Scheme.DG:
        return 0.0
    if scheme == Scheme.SD:
        return p/(p+1.0)
    if scheme == Scheme.HU:
        return (p+1.0)/p

    if p not in CPLUS_1D:
        raise UnsupportedSchemeError(
            f"C+ scheme not implemented for order {p} (supported: {sorted(CPLUS_1D)})")

    # a_p: leading coefficient of P_p
    ap = factorial(2*p)/(2.0**p*factorial(p)*factorial(p))
    return CPLUS_1D[p]*(2*p+1)/2.0*(factorial(p)*ap)**2


def _side(side):
    try:
        return Side(side)
    except ValueError:
        raise ValueError(f"Invalid correction function side: {side!r}") from None


def VCJH_1d(xi, side, order: int, eta: float):
    """Evaluate the left (side 0) or right (side 1) correction function.

    Args:
        xi: Point in [-1, 1] (float or ndarray).
        side: Side.LEFT / Side.RIGHT or 0 / 1.
        order: Polynomial order p; the correction function has degree p+1.
        eta: VCJH parameter, see compute_eta.
    """
    side = _side(side)
    blend = (eta*Legendre(xi, order-1) + Legendre(xi, order+1))/(1.0 + eta)

    if side == Side.LEFT:
        return (-1.0)**order/2.0*(Legendre(xi, order) - blend)
    return 0.5*(Legendre(xi, order) + blend)


def dVCJH_1d(xi: float, side, order: int, eta: float) -> float:
    """Evaluate the derivative of the left or right correction function."""
    side = _side(side)

    if order == 0:
        blend = dLegendre(xi, order+1)/(1.0 + eta)
    else:
        blend = (eta*dLegendre(xi, order-1) + dLegendre(xi, order+1))/(1.0 + eta)

    if side == Side.LEFT:
        return 0.5*(-1.0)**order*(dLegendre(xi, order) - blend)
    return 0.5*(dLegendre(xi, order) + blend)
