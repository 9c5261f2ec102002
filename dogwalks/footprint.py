#
# disturbance footprint: buffer each walk's track by the flight initiation distance, then dissolve the buffers into the
# area disturbed by at least one walk.
#
# Each subject's fixes (in file order) become one LineString; a walk's geometry combines the lines of its subjects
# without joining them, so no segment links the human's last fix to the dog's first. species restricts the footprint
# to one subject (e.g. 'human' only).
#
# A subject with a zero-length path (one fix, or all fixes on the same spot) is kept as a Point - it still disturbs a
# disc of radius R - and its walk is flagged as degenerate.
#
# parameters:
#   radius      flight initiation distance, in the unit of the CRS (metres)
#   lead        added to the radius, e.g. lead length for dogs on leads
#   dissolve    union all buffers (total disturbed area) or keep one buffer per walk (overlap counting)
#

import logging

import geopandas as gpd
import pandas as pd
from shapely import GeometryCollection, LineString, MultiLineString, Point

from dogwalks.errors import ConfigurationError
from dogwalks.load import SPECIES

logger = logging.getLogger(__name__)


def _path(sdf:pd.DataFrame):
    coords = list(zip(sdf.x, sdf.y))
    if len(set(coords)) < 2:
        return Point(coords[0])
    return LineString(coords)

def _combine(parts:list):
    if len(parts) == 1:
        return parts[0]
    if all(isinstance(p, LineString) for p in parts):
        return MultiLineString(parts)
    return GeometryCollection(parts)

def walk_lines(gdf:pd.DataFrame, species:str=None) -> gpd.GeoDataFrame:
    if species is not None:
        if species not in SPECIES:
            raise ConfigurationError(f"unknown species: {species!r}")
        gdf = gdf.loc[gdf.index.get_level_values('species') == species]

    index, nfixes, degenerate, geom = [], [], [], []
    for walk, wdf in gdf.groupby(level='walk'):
        parts = [_path(sdf) for _, sdf in wdf.groupby(level='species', sort=False)]
        index.append(walk)
        nfixes.append(wdf.shape[0])
        degenerate.append(any(isinstance(p, Point) for p in parts))
        geom.append(_combine(parts))

    lines = gpd.GeoDataFrame(
        index=pd.Index(index, name='walk'),
        data={'nfixes': nfixes, 'degenerate': degenerate},
        geometry=geom,
        crs=getattr(gdf, 'crs', None))
    if lines.degenerate.any():
        logger.warning(f"zero-length track(s) in walk(s) {lines.index[lines.degenerate.to_numpy()].tolist()}")
    return lines

def buffer_walks(lines:gpd.GeoDataFrame, radius:float, lead:float=0.) -> gpd.GeoDataFrame:
    dist = radius + lead
    if not dist > 0:
        raise ConfigurationError(f"buffer distance must be positive (radius {radius}, lead {lead})")
    if lines.crs is not None and not lines.crs.is_projected:
        raise ConfigurationError(f"cannot buffer by {dist} metres in {lines.crs.name}")
    buffers = lines.copy()
    buffers.geometry = buffers.geometry.buffer(dist)
    buffers['area_m2'] = buffers.area
    return buffers

def disturbed_area_km2(buffers:gpd.GeoDataFrame) -> float:
    return buffers.union_all().area / 1e6

def dissolve_buffers(buffers:gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    geom = buffers.union_all()
    return gpd.GeoDataFrame(
        data={'nwalks': [buffers.shape[0]], 'area_km2': [geom.area / 1e6]},
        geometry=[geom],
        crs=buffers.crs)

def footprint(gdf:pd.DataFrame, radius:float, dissolve:bool=True, species:str=None, lead:float=0.) -> gpd.GeoDataFrame:
    buffers = buffer_walks(walk_lines(gdf, species), radius, lead)
    if not dissolve:
        return buffers
    out = dissolve_buffers(buffers)
    logger.info(f"{out.nwalks.iloc[0]} walks disturb {out.area_km2.iloc[0]:.4f} km2 (buffer {radius + lead} m)")
    return out
