"""
simulate.py - One-call simulation of a spatial Bernoulli network

Chains the point sampler and the network builder:

    Boundary -> PointSet -> SpatialNetwork
"""
from __future__ import annotations

import logging

from spatnet.data.boundary import Boundary
from spatnet.data.config import NetworkConfig

from .point.graph import SpatialNetwork, build_network_from_config
from .point.sampling import PointPattern, simulate_points

logger = logging.getLogger(__name__)


def simulate_network(boundary: Boundary,
                     n_points: int,
                     pattern: str | PointPattern = 'poisson',
                     seed: int | None = None,
                     config: NetworkConfig | None = None) -> SpatialNetwork:
    """
    Sample points in a boundary and build a network on them.

    Parameters
    ----------
    boundary : Boundary
        Region to sample in.
    n_points : int
        Number of points requested.
    pattern : str or PointPattern
        'poisson' or 'halton'.
    seed : int, optional
        Seed for the point sampler.
    config : NetworkConfig, optional
        Network parameters. Defaults to NetworkConfig().

    Returns
    -------
    SpatialNetwork

    Examples
    --------
    >>> ri = Boundary.from_geodataframe(gdf)
    >>> net = simulate_network(ri, 500, pattern='halton',
    ...                        config=NetworkConfig(sif='decay', scale=0.001))
    """
    points = simulate_points(boundary, n_points, pattern=pattern, seed=seed)
    logger.debug(f"Simulated {points!r}")
    return build_network_from_config(points, config)
