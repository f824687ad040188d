# src/spatnet/__init__.py

"""
spatnet - Simulation of spatial Bernoulli networks
"""

# Core data structures
from .data.boundary import Boundary
from .data.config import (
    NetworkConfig,
    SpatnetError,
    InvalidInputError,
    DegenerateGeometryError,
    ConfigurationError,
)

# Import submodules
from . import data
from . import spatial

# Main entry points
from .spatial.point import (
    PointPattern,
    PointSet,
    SpatialNetwork,
    simulate_poisson,
    simulate_halton,
    simulate_points,
    build_network,
)
from .spatial.network import SpatialInteraction, compare_networks
from .spatial.simulate import simulate_network

__version__ = '0.1.0'

__all__ = [
    # Core classes
    'Boundary',
    'NetworkConfig',
    'PointPattern',
    'PointSet',
    'SpatialNetwork',
    'SpatialInteraction',

    # Functions
    'simulate_poisson',
    'simulate_halton',
    'simulate_points',
    'build_network',
    'compare_networks',
    'simulate_network',

    # Exceptions
    'SpatnetError',
    'InvalidInputError',
    'DegenerateGeometryError',
    'ConfigurationError',

    # Submodules
    'data',
    'spatial',
]
