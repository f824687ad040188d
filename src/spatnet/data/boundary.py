"""
boundary.py - Planar study region for point simulation

A Boundary is the spatial window every point pattern is sampled in:
a shapely Polygon or MultiPolygon (holes allowed) plus the EPSG code
of its projected coordinate reference system.

Key design decisions:
- Boundaries are immutable. Reprojection returns a new object.
- Containment is boundary-inclusive (points on an edge count as inside).
- Zero-area geometries are accepted here and flagged by ``is_degenerate``;
  each sampler decides how to treat them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import geopandas as gpd

from dataclasses import dataclass
import logging

import numpy as np
import shapely
from shapely.geometry import MultiPolygon, Polygon, box

from .config import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boundary:
    """
    Container for a planar region and its coordinate reference system.

    Attributes
    ----------
    geometry : Polygon or MultiPolygon
        Region points are sampled in.
    crs : int or None
        EPSG code of the coordinate reference system, None if unset.
    """
    geometry: Polygon | MultiPolygon
    crs: int | None = None

    def __post_init__(self):
        if not isinstance(self.geometry, (Polygon, MultiPolygon)):
            raise InvalidInputError(
                f"Boundary geometry must be a Polygon or MultiPolygon, "
                f"got {type(self.geometry).__name__}"
            )
        if self.crs is not None and (
            isinstance(self.crs, bool) or not isinstance(self.crs, (int, np.integer))
        ):
            raise InvalidInputError(f"crs must be an EPSG integer code or None, got {self.crs!r}")

    # ========== Constructors ==========

    @classmethod
    def from_bounds(cls,
                    xmin: float,
                    ymin: float,
                    xmax: float,
                    ymax: float,
                    crs: int | None = None) -> Boundary:
        """Rectangular boundary from its corner coordinates."""
        return cls(geometry=box(xmin, ymin, xmax, ymax), crs=crs)

    @classmethod
    def from_geodataframe(cls,
                          gdf: gpd.GeoDataFrame,
                          crs: int | None = None) -> Boundary:
        """
        Dissolve a GeoDataFrame into a single projected boundary.

        Parameters
        ----------
        gdf : gpd.GeoDataFrame
            One or more polygon features (e.g. administrative units).
        crs : int, optional
            Target EPSG code. If None and the frame uses a geographic CRS,
            the best-fitting UTM zone is estimated and used instead. A frame
            without any CRS is taken as already planar.

        Returns
        -------
        Boundary

        Examples
        --------
        >>> gdf = gpd.read_file('ri.shp')
        >>> ri = Boundary.from_geodataframe(gdf)
        >>> ri.crs
        32619
        """
        import geopandas as gpd

        if not isinstance(gdf, gpd.GeoDataFrame):
            raise InvalidInputError(
                f"Expected a GeoDataFrame, got {type(gdf).__name__}"
            )
        if gdf.empty:
            raise InvalidInputError("GeoDataFrame has no features")

        if crs is not None:
            if gdf.crs is None:
                raise InvalidInputError(
                    "Cannot reproject a GeoDataFrame without a CRS"
                )
            gdf = gdf.to_crs(epsg=crs)
        elif gdf.crs is not None and gdf.crs.is_geographic:
            suggested = gdf.estimate_utm_crs()
            logger.info(f"Reprojecting boundary to suggested CRS {suggested.to_string()}")
            gdf = gdf.to_crs(suggested)

        geometry = gdf.geometry.union_all()
        epsg = gdf.crs.to_epsg() if gdf.crs is not None else None

        return cls(geometry=geometry, crs=epsg)

    # ========== Queries ==========

    @property
    def area(self) -> float:
        return float(self.geometry.area)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as (xmin, ymin, xmax, ymax)."""
        xmin, ymin, xmax, ymax = self.geometry.bounds
        return float(xmin), float(ymin), float(xmax), float(ymax)

    @property
    def is_degenerate(self) -> bool:
        """True when the region is empty or has zero area."""
        return self.geometry.is_empty or self.area <= 0

    def contains(self, x, y) -> np.ndarray | bool:
        """
        Boundary-inclusive containment test.

        Parameters
        ----------
        x, y : float or array-like
            Point coordinates.

        Returns
        -------
        bool or np.ndarray of bool
            True for points inside or on the edge of the region.
        """
        return shapely.intersects_xy(self.geometry, x, y)

    def summary(self) -> dict:
        xmin, ymin, xmax, ymax = self.bounds if not self.geometry.is_empty else (np.nan,) * 4
        return {
            'geometry_type': self.geometry.geom_type,
            'crs': self.crs,
            'area': self.area,
            'xmin': xmin,
            'ymin': ymin,
            'xmax': xmax,
            'ymax': ymax,
            'is_degenerate': self.is_degenerate,
        }

    def __repr__(self) -> str:
        crs = f"EPSG:{self.crs}" if self.crs is not None else "unset"
        return (
            f"Boundary ({self.geometry.geom_type}, crs={crs}, "
            f"area={self.area:.4g})"
        )
