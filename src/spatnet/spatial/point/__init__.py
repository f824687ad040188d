# src/spatnet/spatial/point/__init__.py

"""
Point-based simulation: point patterns and the networks built on them.

Modules
-------
- sampling: Poisson process and Halton sequence inside a Boundary
- graph: Spatial Bernoulli network construction

Quick Start
-----------
>>> import spatnet as sn
>>>
>>> square = sn.Boundary.from_bounds(0, 0, 10, 10)
>>> pts = sn.spatial.point.simulate_poisson(square, 200, seed=42)
>>> net = sn.spatial.point.build_network(pts, sif='standard')
>>> print(net.summary())
"""

from .sampling import (
    PointPattern,
    PointSet,
    simulate_poisson,
    simulate_halton,
    simulate_points,
)

from .graph import (
    SpatialNetwork,
    compute_distance_matrix,
    compute_tie_probabilities,
    build_network,
    build_network_from_config,
)

__all__ = [
    # Classes
    'PointPattern',
    'PointSet',
    'SpatialNetwork',

    # Sampling
    'simulate_poisson',
    'simulate_halton',
    'simulate_points',

    # Network construction
    'compute_distance_matrix',
    'compute_tie_probabilities',
    'build_network',
    'build_network_from_config',
]
