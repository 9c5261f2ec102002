#
# filter out non-physiological fixes based on excessive speed.
#
# A fix is dropped when the speed *to* and *from* that fix are both >= kmh, i.e. an isolated GPS jump. Speeds are
# computed per (walk, species) track in file order, so the first fix of a track never has an incoming speed and is
# never dropped. Consecutive fixes sharing a timestamp have an infinite speed unless they share a position too.
#
# This is crude and only removes the most obvious inconsistencies - sustained errors (e.g. a drifting unit) survive.
#

import logging

import geopandas as gpd
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def step_speeds(gdf:gpd.GeoDataFrame) -> pd.Series:
    grouped = gdf.groupby(level=['walk', 'species'], sort=False)
    dist = np.hypot(grouped.x.diff(), grouped.y.diff())
    ts = pd.Series(gdf.index.get_level_values('ts'), index=gdf.index)
    hours = ts.groupby(level=['walk', 'species'], sort=False).diff() / pd.Timedelta('1h')
    with np.errstate(divide='ignore', invalid='ignore'):
        speeds = dist / hours
    # zero distance over zero time is a duplicate fix, not a jump
    speeds.loc[(dist == 0).to_numpy()] = 0.
    return (speeds * 1e-3).rename('speed')

def filter_speed(gdf:gpd.GeoDataFrame, kmh:float=40.) -> gpd.GeoDataFrame:
    speeds = step_speeds(gdf)
    outgoing = speeds.groupby(level=['walk', 'species'], sort=False).shift(-1)
    rm = ((speeds >= kmh) & (outgoing >= kmh)).to_numpy()
    logger.info(f"filtered {rm.sum()} fixes - speed >= {kmh} km/h")
    return gdf.loc[~rm]
