"""
data - Core data structures and configuration

This module contains the Boundary region, network configuration
and the package exceptions.
"""

from .config import (
    NetworkConfig,
    DEFAULT_NETWORK_CONFIG,
    SpatnetError,
    InvalidInputError,
    DegenerateGeometryError,
    ConfigurationError,
)

from .boundary import Boundary

__all__ = [
    # Core class
    'Boundary',

    # Configuration
    'NetworkConfig',
    'DEFAULT_NETWORK_CONFIG',

    # Exceptions
    'SpatnetError',
    'InvalidInputError',
    'DegenerateGeometryError',
    'ConfigurationError',
]
