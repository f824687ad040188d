# src/spatnet/spatial/shared/utils.py

"""
utils.py - Shared utilities for network analysis

Common helpers used by the network comparator and by callers who want
per-node statistics.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spatnet.spatial.point.graph import SpatialNetwork

import logging

import networkx as nx
import numpy as np
import pandas as pd

from spatnet.data.config import InvalidInputError

logger = logging.getLogger(__name__)


def get_networkx_graph(network: 'SpatialNetwork | nx.Graph') -> nx.Graph:
    """
    Extract the NetworkX graph behind a network.

    Parameters
    ----------
    network : SpatialNetwork or nx.Graph
        A simulated network, or any undirected simple NetworkX graph.

    Returns
    -------
    nx.Graph

    Raises
    ------
    InvalidInputError
        If ``network`` is neither, or is directed or a multigraph.

    Examples
    --------
    >>> G = get_networkx_graph(net)
    >>> nx.average_clustering(G)
    """
    from spatnet.spatial.point.graph import SpatialNetwork

    graph = network.graph if isinstance(network, SpatialNetwork) else network

    if not isinstance(graph, nx.Graph):
        raise InvalidInputError(
            f"Expected a SpatialNetwork or networkx.Graph, got {type(network).__name__}"
        )
    if graph.is_directed() or graph.is_multigraph() or nx.number_of_selfloops(graph) > 0:
        raise InvalidInputError("Network must be an undirected simple graph")

    return graph


def compute_graph_metrics(network: 'SpatialNetwork | nx.Graph') -> pd.DataFrame:
    """
    Compute centrality metrics for each node.

    Calculates:
    - Degree (number of ties)
    - Closeness centrality: inverse of the summed shortest-path distance
      to every node reachable from it (isolated nodes score 0)
    - Betweenness centrality (unnormalized shortest-path counts)
    - Size of the connected component the node belongs to

    Parameters
    ----------
    network : SpatialNetwork or nx.Graph

    Returns
    -------
    pd.DataFrame
        One row per node, indexed by node label.

    Examples
    --------
    >>> metrics = compute_graph_metrics(net)
    >>> metrics['betweenness'].idxmax()
    """
    G = get_networkx_graph(network)
    nodes = list(G.nodes)

    degree = dict(G.degree())
    betweenness = nx.betweenness_centrality(G, normalized=False)

    component_size = {}
    for component in nx.connected_components(G):
        for node in component:
            component_size[node] = len(component)

    # Without WF scaling networkx returns (r - 1) / sum(d) over the r nodes
    # of the component; dividing by (r - 1) leaves 1 / sum(d)
    scaled = nx.closeness_centrality(G, wf_improved=False)
    closeness = {
        n: scaled[n] / (component_size[n] - 1) if component_size[n] > 1 else 0.0
        for n in nodes
    }

    metrics = pd.DataFrame({
        'degree': [degree[n] for n in nodes],
        'closeness': [closeness[n] for n in nodes],
        'betweenness': [betweenness[n] for n in nodes],
        'component_size': [component_size[n] for n in nodes],
    }, index=pd.Index(nodes, name='node'))

    logger.debug(f"Computed node metrics for {len(nodes)} nodes")

    return metrics


def safe_mean(values: pd.Series | np.ndarray, fill_value: float = 0.0) -> float:
    """Mean of the values, or ``fill_value`` when there are none."""
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return fill_value
    return float(values.mean())
