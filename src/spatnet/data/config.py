"""
config.py - Configuration and exceptions for spatnet

Contains:
- NetworkConfig: Default parameters for spatial Bernoulli networks
- SpatnetError and subclasses: Error kinds raised across the package
"""

from dataclasses import asdict, dataclass
from numbers import Real


class SpatnetError(Exception):
    """Base exception for spatnet errors."""

    pass


class InvalidInputError(SpatnetError):
    """Raised when an argument has the wrong type or shape."""

    pass


class DegenerateGeometryError(SpatnetError):
    """Raised when a boundary cannot hold any sampled point."""

    pass


class ConfigurationError(SpatnetError):
    """Raised for an unrecognized interaction function or point pattern."""

    pass


@dataclass(frozen=True)
class NetworkConfig:
    """
    Parameters for building a spatial Bernoulli network.

    Attributes
    ----------
    sif : str
        Spatial interaction function name: 'standard', 'attenuated',
        'arctan', 'decay' or 'logistic'.
    base_prob : float
        Tie probability of two points at distance 0.
    scale : float
        Coefficient the distance is multiplied by.
    threshold : float
        A tie exists when the probability strictly exceeds this value.
    power : float
        Decay exponent. Only the power-law functions use it, through its
        absolute value.
    """

    sif: str = "standard"
    base_prob: float = 0.9
    scale: float = 1.0
    threshold: float = 0.5
    power: float = -2.8

    def validate(self) -> "NetworkConfig":
        """
        Check the parameters.

        Raises
        ------
        ConfigurationError
            If ``sif`` is not one of the five known functions.
        InvalidInputError
            If a numeric parameter is not a real number.
        """
        # Imported here: interaction.py depends on this module
        from spatnet.spatial.network.interaction import get_interaction_function

        get_interaction_function(self.sif)

        for name in ("base_prob", "scale", "threshold", "power"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError(
                    f"{name} must be a real number, got {type(value).__name__}"
                )
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary (usable as build_network keyword arguments)."""
        return asdict(self)


DEFAULT_NETWORK_CONFIG = NetworkConfig()
