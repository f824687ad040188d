"""
sampling.py - Point pattern simulation inside a Boundary

Two strategies produce the node locations of a spatial network:

- Poisson: homogeneous Poisson process conditioned on the point count
  (binomial process). Exactly n points, uniform over the region.
- Halton: deterministic low-discrepancy sequence laid over the bounding
  box, keeping only points inside the region. May yield fewer than n
  points for irregular regions.

Key design decisions:
- All randomness comes from a local numpy Generator seeded per call; no
  global random state is touched.
- Poisson sampling on a zero-area region raises DegenerateGeometryError.
  Halton on the same region returns an empty PointSet with a warning.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import geopandas as gpd

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
import logging

import numpy as np
from scipy.stats import qmc

from spatnet.data.boundary import Boundary
from spatnet.data.config import (
    ConfigurationError,
    DegenerateGeometryError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)

_MAX_BATCH_SIZE = 1_000_000


class PointPattern(str, Enum):
    """Strategy a PointSet was generated with."""

    POISSON = "poisson"
    HALTON = "halton"


@dataclass(frozen=True, eq=False)
class PointSet:
    """
    Container for a simulated point pattern.

    Attributes
    ----------
    coords : np.ndarray
        Point coordinates (n_points x 2), read-only.
    boundary : Boundary
        Region the points were sampled in.
    pattern : PointPattern
        Generation strategy.
    n_requested : int
        Number of points asked for. Halton may realize fewer.
    seed : int or None
        Seed used, if any.
    """
    coords: np.ndarray
    boundary: Boundary
    pattern: PointPattern
    n_requested: int
    seed: int | None = None

    def __post_init__(self):
        coords = np.array(self.coords, dtype=np.float64).reshape(-1, 2)
        coords.setflags(write=False)
        object.__setattr__(self, 'coords', coords)
        try:
            pattern = PointPattern(self.pattern)
        except ValueError as e:
            raise InvalidInputError(f"Unknown point pattern: {self.pattern!r}") from e
        object.__setattr__(self, 'pattern', pattern)

    @property
    def n_points(self) -> int:
        return self.coords.shape[0]

    @property
    def x(self) -> np.ndarray:
        return self.coords[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.coords[:, 1]

    @property
    def intensity(self) -> float:
        """Points per unit area."""
        area = self.boundary.area
        return self.n_points / area if area > 0 else np.nan

    def __len__(self) -> int:
        return self.n_points

    def to_geopandas(self) -> gpd.GeoDataFrame:
        """
        Convert points to a GeoDataFrame in the boundary's CRS.

        Returns
        -------
        gpd.GeoDataFrame
            One row per point, indexed 0..n-1 like the network nodes.
        """
        import geopandas as gpd

        return gpd.GeoDataFrame(
            {'x': self.x, 'y': self.y},
            geometry=gpd.points_from_xy(self.x, self.y),
            crs=self.boundary.crs,
        )

    def summary(self) -> dict:
        xmin, ymin, xmax, ymax = self.boundary.bounds
        return {
            'pattern': self.pattern.value,
            'n_points': self.n_points,
            'n_requested': self.n_requested,
            'seed': self.seed,
            'area': self.boundary.area,
            'intensity': self.intensity,
            'crs': self.boundary.crs,
            'xmin': xmin,
            'ymin': ymin,
            'xmax': xmax,
            'ymax': ymax,
        }

    def __repr__(self) -> str:
        return (
            f"PointSet (pattern={self.pattern.value}, "
            f"{self.n_points} points, intensity={self.intensity:.4g})"
        )


# ========== Helpers ==========

def _validate_inputs(boundary: Boundary, n_points: int) -> None:
    if not isinstance(boundary, Boundary):
        raise InvalidInputError(
            f"Expected a Boundary, got {type(boundary).__name__}"
        )
    if isinstance(n_points, bool) or not isinstance(n_points, Integral):
        raise InvalidInputError(
            f"n_points must be an integer, got {type(n_points).__name__}"
        )
    if n_points <= 0:
        raise InvalidInputError(f"n_points must be positive, got {n_points}")


# ========== Samplers ==========

def simulate_poisson(boundary: Boundary,
                     n_points: int,
                     seed: int | None = None,
                     max_batches: int = 1000) -> PointSet:
    """
    Simulate a homogeneous Poisson point process with a fixed point count.

    Candidates are drawn uniformly in the bounding box and rejected when
    they fall outside the region. Batch sizes grow with the observed
    rejection rate, so irregular regions still finish in a few rounds.

    Parameters
    ----------
    boundary : Boundary
        Region to sample in.
    n_points : int
        Number of points. Always realized exactly.
    seed : int, optional
        Seed for reproducible sampling.
    max_batches : int
        Give up after this many rejection rounds.

    Returns
    -------
    PointSet

    Raises
    ------
    InvalidInputError
        If ``boundary`` is not a Boundary or ``n_points`` is not positive.
    DegenerateGeometryError
        If the region has zero area or points cannot be placed.

    Examples
    --------
    >>> square = Boundary.from_bounds(0, 0, 10, 10)
    >>> pts = simulate_poisson(square, 100, seed=42)
    >>> pts.n_points
    100
    """
    _validate_inputs(boundary, n_points)

    if boundary.is_degenerate:
        raise DegenerateGeometryError(
            "Cannot simulate a Poisson process in a zero-area boundary"
        )

    rng = np.random.default_rng(seed)
    xmin, ymin, xmax, ymax = boundary.bounds

    accepted = []
    n_accepted = 0
    # Expected acceptance is region area / bounding box area
    acceptance = boundary.area / ((xmax - xmin) * (ymax - ymin))

    for _ in range(max_batches):
        remaining = n_points - n_accepted
        batch_size = min(
            int(np.ceil(1.2 * remaining / max(acceptance, 1e-6))) + 8,
            _MAX_BATCH_SIZE,
        )

        cand_x = rng.uniform(xmin, xmax, batch_size)
        cand_y = rng.uniform(ymin, ymax, batch_size)
        inside = boundary.contains(cand_x, cand_y)

        batch = np.column_stack([cand_x[inside], cand_y[inside]])[:remaining]
        accepted.append(batch)
        n_accepted += len(batch)

        if n_accepted == n_points:
            break

        if inside.any():
            acceptance = inside.mean()
    else:
        raise DegenerateGeometryError(
            f"Placed only {n_accepted} of {n_points} points after "
            f"{max_batches} batches"
        )

    coords = np.vstack(accepted)
    logger.info(f"Poisson process: {n_points} points, seed={seed}")

    return PointSet(
        coords=coords,
        boundary=boundary,
        pattern=PointPattern.POISSON,
        n_requested=n_points,
        seed=seed,
    )


def simulate_halton(boundary: Boundary,
                    n_points: int,
                    seed: int | None = None,
                    scramble: bool = False) -> PointSet:
    """
    Simulate a 2D Halton sequence inside a boundary.

    The sequence (bases 2 and 3, starting at index 1) is generated over
    the bounding box and points outside the region are discarded. For a
    rectangular region all ``n_points`` are kept; otherwise fewer.

    Parameters
    ----------
    boundary : Boundary
        Region to sample in.
    n_points : int
        Number of sequence points generated in the bounding box.
    seed : int, optional
        Only affects the output when ``scramble=True``.
    scramble : bool
        Apply randomized (Owen-type) scrambling to the sequence.

    Returns
    -------
    PointSet
        Empty if the region has zero area.

    Raises
    ------
    InvalidInputError
        If ``boundary`` is not a Boundary or ``n_points`` is not positive.
    """
    _validate_inputs(boundary, n_points)

    if boundary.is_degenerate:
        logger.warning("Zero-area boundary: Halton sequence has no points inside")
        return PointSet(
            coords=np.empty((0, 2)),
            boundary=boundary,
            pattern=PointPattern.HALTON,
            n_requested=n_points,
            seed=seed,
        )

    sampler = qmc.Halton(d=2, scramble=scramble, seed=seed)
    if not scramble:
        # Index 0 of the unscrambled sequence is the origin
        sampler.fast_forward(1)
    unit = sampler.random(n_points)

    xmin, ymin, xmax, ymax = boundary.bounds
    candidates = qmc.scale(unit, [xmin, ymin], [xmax, ymax])
    inside = boundary.contains(candidates[:, 0], candidates[:, 1])
    coords = candidates[inside]

    if len(coords) < n_points:
        logger.warning(
            f"Halton sequence: kept {len(coords)} of {n_points} points "
            f"inside the boundary"
        )
    else:
        logger.info(f"Halton sequence: {n_points} points")

    return PointSet(
        coords=coords,
        boundary=boundary,
        pattern=PointPattern.HALTON,
        n_requested=n_points,
        seed=seed,
    )


_SAMPLERS = {
    PointPattern.POISSON: simulate_poisson,
    PointPattern.HALTON: simulate_halton,
}


def simulate_points(boundary: Boundary,
                    n_points: int,
                    pattern: str | PointPattern = 'poisson',
                    seed: int | None = None) -> PointSet:
    """
    Simulate points with the chosen strategy.

    Parameters
    ----------
    boundary : Boundary
    n_points : int
    pattern : str or PointPattern
        'poisson' or 'halton'.
    seed : int, optional

    Returns
    -------
    PointSet
    """
    try:
        pattern = PointPattern(pattern)
    except (ValueError, TypeError):
        raise ConfigurationError(
            f"Unknown point pattern: {pattern!r}. Choose 'poisson' or 'halton'"
        ) from None

    return _SAMPLERS[pattern](boundary, n_points, seed=seed)
