"""
interaction.py - Spatial interaction functions (SIFs)

Each function maps inter-point distance to a tie probability:

    f(distance, base_prob, scale, power) -> probability

All five share this signature so they can be swapped freely, even
though only the two power laws use ``power``. They work elementwise on
scalars and numpy arrays, and none of them clamps its output to [0, 1].

References
----------
Butts, C. T. Spatial models of large-scale interpersonal networks.
Dissertation (2002).
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

import numpy as np

from spatnet.data.config import ConfigurationError


def standard(distance, base_prob: float, scale: float, power: float):
    """Standard power law: b / (1 + s*d)^|p|."""
    distance = np.asarray(distance, dtype=np.float64)
    # (1 + s*d)^|p| overflows to inf for far-apart points; b / inf == 0
    with np.errstate(over='ignore'):
        return base_prob / np.power(1 + scale * distance, abs(power))


def attenuated(distance, base_prob: float, scale: float, power: float):
    """Attenuated power law: b / (1 + (s*d)^|p|)."""
    distance = np.asarray(distance, dtype=np.float64)
    with np.errstate(over='ignore'):
        return base_prob / (1 + np.power(scale * distance, abs(power)))


def arctan(distance, base_prob: float, scale: float, power: float):
    """Arctangent law: b * (1 - (2/pi) * atan(s*d)). ``power`` is unused."""
    return base_prob * (1 - (2 / np.pi) * np.arctan(scale * distance))


def decay(distance, base_prob: float, scale: float, power: float):
    """Exponential decay: b / e^(s*d). ``power`` is unused."""
    # e^(s*d) overflows to inf for far-apart points; b / inf == 0
    with np.errstate(over='ignore'):
        return base_prob / np.exp(scale * distance)


def logistic(distance, base_prob: float, scale: float, power: float):
    """Logistic law: 2b / (1 + e^(s*d)). ``power`` is unused."""
    with np.errstate(over='ignore'):
        return (2 * base_prob) / (1 + np.exp(scale * distance))


class SpatialInteraction(str, Enum):
    """Closed set of available spatial interaction functions."""

    STANDARD = "standard"
    ATTENUATED = "attenuated"
    ARCTAN = "arctan"
    DECAY = "decay"
    LOGISTIC = "logistic"

    @property
    def function(self) -> Callable:
        return INTERACTION_FUNCTIONS[self]


INTERACTION_FUNCTIONS: dict[SpatialInteraction, Callable] = {
    SpatialInteraction.STANDARD: standard,
    SpatialInteraction.ATTENUATED: attenuated,
    SpatialInteraction.ARCTAN: arctan,
    SpatialInteraction.DECAY: decay,
    SpatialInteraction.LOGISTIC: logistic,
}


def resolve_interaction(sif: str | SpatialInteraction) -> SpatialInteraction:
    """
    Normalize a SIF selector to its enum member.

    Parameters
    ----------
    sif : str or SpatialInteraction
        Enum member or its name (case-insensitive).

    Returns
    -------
    SpatialInteraction

    Raises
    ------
    ConfigurationError
        If the selector does not name one of the five functions.
    """
    if isinstance(sif, SpatialInteraction):
        return sif
    if isinstance(sif, str):
        try:
            return SpatialInteraction(sif.strip().lower())
        except ValueError:
            pass
    valid = ", ".join(repr(m.value) for m in SpatialInteraction)
    raise ConfigurationError(
        f"Unknown spatial interaction function: {sif!r}. Choose from {valid}"
    )


def get_interaction_function(sif: str | SpatialInteraction) -> Callable:
    """Look up the interaction function for a selector."""
    return INTERACTION_FUNCTIONS[resolve_interaction(sif)]
