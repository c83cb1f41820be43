"""Exceptions raised by the basis and correction-function evaluators.

All errors derive from ValueError so callers that already guard setup code
with ``except ValueError`` keep working. Every error signals a configuration
or programming defect (bad mode index, unsupported scheme/order); none of
them is meant to be recovered from during a run.
"""


class FRPolyError(ValueError):
    """Base class for all frpoly errors."""


class InvalidModeError(FRPolyError):
    """Mode index outside the enumeration implied by the polynomial order."""


class UnsupportedSchemeError(FRPolyError):
    """Scheme identifier unknown, or scheme/order pair with no closed form."""


class InvalidOrderError(FRPolyError):
    """Negative polynomial order."""


def check_order(order):
    """Return ``order`` as an int, raising InvalidOrderError if negative."""
    order = int(order)
    if order < 0:
        raise InvalidOrderError(f"Polynomial order must be non-negative, got {order}")
    return order
