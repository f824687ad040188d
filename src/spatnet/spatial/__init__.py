"""
spatial - Simulation and analysis of spatial Bernoulli networks

point : Point patterns and network construction
    Poisson processes and Halton sequences inside a Boundary, and the
    distance-based networks built on them.

network : Network-level analysis
    Spatial interaction functions and network comparison.

shared : Utilities shared across both

Usage
-----
>>> import spatnet as sn
>>>
>>> pts = sn.spatial.point.simulate_halton(boundary, 500)
>>> pl = sn.spatial.point.build_network(pts, sif='standard')
>>> apl = sn.spatial.point.build_network(pts, sif='attenuated')
>>> sn.spatial.network.compare_networks(pl, apl, 'PL', 'APL')
"""

from . import point
from . import network
from . import shared
from .simulate import simulate_network

__all__ = [
    'point',
    'network',
    'shared',
    'simulate_network',
]
