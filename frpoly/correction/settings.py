"""Resolve correction-scheme settings from a configuration dict.

Keys read (dot notation, see frpoly.core.config.get_parameter):
    fr.scheme        DG | SD | HU | CPLUS (default DG)
    fr.order         polynomial order (required)
    filter.exponent  exponential filter exponent (optional)
"""
import os
from dataclasses import dataclass
from typing import Optional

from ..core.config import get_parameter, load_config
from ..core.errors import InvalidOrderError
from .vcjh import Scheme, compute_eta


@dataclass(frozen=True)
class CorrectionSettings:
    """Scheme, order and the derived VCJH parameter for one element type."""
    scheme: Scheme
    order: int
    eta: float
    filter_exponent: Optional[float] = None


def correction_settings(config, verbose=False):
    """Build CorrectionSettings from a config dict or a YAML file path.

    Args:
        config: Parsed configuration dict, or path to a YAML file.
        verbose: If True, print the resolved settings.

    Raises:
        InvalidOrderError: If fr.order is missing or negative.
        UnsupportedSchemeError: If the scheme/order pair has no eta.
    """
    if isinstance(config, (str, os.PathLike)):
        config = load_config(config)

    order = get_parameter(config, "fr.order")
    if order is None:
        raise InvalidOrderError("Configuration is missing 'fr.order'")

    scheme = Scheme.parse(get_parameter(config, "fr.scheme", Scheme.DG))
    order = int(order)
    eta = compute_eta(scheme, order)

    exponent = get_parameter(config, "filter.exponent")
    if exponent is not None:
        exponent = float(exponent)

    if verbose:
        print(f"VCJH scheme: {scheme.name}, order: {order}, eta: {eta:.6e}")
        if exponent is not None:
            print(f"Exponential filter exponent: {exponent}")

    return CorrectionSettings(scheme=scheme, order=order, eta=eta, filter_exponent=exponent)
