"""
Network-level analysis of spatial Bernoulli networks.

Modules
-------
- interaction: Spatial interaction functions (distance -> tie probability)
- compare: Summary statistics and side-by-side comparison of two networks

Spatial Interaction Functions
-----------------------------
standard
    Standard power law
attenuated
    Attenuated power law
arctan
    Arctangent probability law
decay
    Exponential decay law
logistic
    Logistic probability law

Comparison
----------
network_statistics
    Density, mean degree, closeness, betweenness and largest component
compare_networks
    Two-row comparison table
"""

from .interaction import (
    SpatialInteraction,
    INTERACTION_FUNCTIONS,
    standard,
    attenuated,
    arctan,
    decay,
    logistic,
    resolve_interaction,
    get_interaction_function,
)

from .compare import (
    COMPARISON_COLUMNS,
    network_statistics,
    compare_networks,
)

__all__ = [
    # Interaction functions
    'SpatialInteraction',
    'INTERACTION_FUNCTIONS',
    'standard',
    'attenuated',
    'arctan',
    'decay',
    'logistic',
    'resolve_interaction',
    'get_interaction_function',

    # Comparison
    'COMPARISON_COLUMNS',
    'network_statistics',
    'compare_networks',
]
