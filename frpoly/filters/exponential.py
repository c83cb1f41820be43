"""Exponential modal filter.

The filter damps each mode by sigma = exp(-eta^s), eta = (i + j) / N, where
(i, j) are the mode's degrees, N the number of modes and s the filter
exponent. Applying it means scaling modal coefficients by sigma; that is left
to the caller, this module only supplies the weights.
"""
import numpy as np

from ..basis.modes import mode_to_ij, n_dofs


def exponential_filter(mode: int, order: int, exponent: float, shape: str = "quad") -> float:
    """Return the exponential filter weight of one mode.

    Args:
        mode: Mode index in the ordering of frpoly.basis.modes.
        order: Polynomial order of the basis.
        exponent: Filter exponent s; larger values leave more of the low
            modes untouched.
        shape: "quad" for the tensor (hierarchical Legendre) basis, "tri"
            for the Dubiner basis.

    Returns:
        sigma in (0, 1]; mode 0 always gives 1.

    Raises:
        InvalidModeError: If mode is out of range.
    """
    i, j = mode_to_ij(mode, order, shape)
    eta = (i + j)/n_dofs(order, shape)

    return np.exp(-1.0*eta**exponent)
