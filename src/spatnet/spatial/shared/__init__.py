# src/spatnet/spatial/shared/__init__.py

"""
Shared utilities for network analysis.
"""

from .utils import (
    get_networkx_graph,
    compute_graph_metrics,
    safe_mean,
)

__all__ = [
    'get_networkx_graph',
    'compute_graph_metrics',
    'safe_mean',
]
