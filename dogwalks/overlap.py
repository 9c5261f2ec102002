#
# count, for each cell of a regular grid, how many walk buffers cover it.
#
# The grid starts at the buffers' top-left bound and covers their full extent. A buffer covers a cell when the cell
# centre lies inside it (rasterio's default, all_touched=False). Cells covered by no buffer are masked: they are no
# data, not zero, and are left out of every area summary.
#
# takes: per-walk (undissolved) buffers, cell size in the unit of the CRS
# returns: OverlapRaster
#

from dataclasses import dataclass

import geopandas as gpd
import numpy as np
import pandas as pd
from rasterio.enums import MergeAlg
from rasterio.features import rasterize
from rasterio.transform import Affine, from_origin

from dogwalks.errors import ConfigurationError, DataIntegrityError


@dataclass(frozen=True, eq=False)
class OverlapRaster:
    counts: np.ma.MaskedArray
    transform: Affine
    cell_size: float
    crs: object = None

    @property
    def cell_area(self) -> float:
        return self.cell_size ** 2

    # area (m2) disturbed by exactly n walks, indexed by n
    def area_by_count(self) -> pd.Series:
        n, ncells = np.unique(self.counts.compressed(), return_counts=True)
        return pd.Series(ncells * self.cell_area, index=pd.Index(n.astype(int), name='nwalks'), name='area_m2')

    def covered_area(self) -> float:
        return self.counts.count() * self.cell_area

    def extent_area(self) -> float:
        return self.counts.size * self.cell_area


def overlap_raster(buffers:gpd.GeoDataFrame, cell_size:float=1.) -> OverlapRaster:
    if not cell_size > 0:
        raise ConfigurationError(f"cell size must be positive ({cell_size})")
    geoms = [g for g in buffers.geometry if g is not None and not g.is_empty]
    if not geoms:
        raise DataIntegrityError('no buffer to rasterize')

    minx, miny, maxx, maxy = buffers.total_bounds
    width = max(int(np.ceil((maxx - minx) / cell_size)), 1)
    height = max(int(np.ceil((maxy - miny) / cell_size)), 1)
    transform = from_origin(minx, maxy, cell_size, cell_size)
    counts = rasterize(
        ((g, 1) for g in geoms),
        out_shape=(height, width),
        transform=transform,
        fill=0,
        all_touched=False,
        merge_alg=MergeAlg.add,
        dtype='uint16')
    return OverlapRaster(np.ma.masked_equal(counts, 0), transform, cell_size, buffers.crs)
