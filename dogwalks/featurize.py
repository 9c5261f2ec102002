#
# project geodetic fixes to a planar, metric CRS and geometrize them.
#
# Every downstream step (distances, buffers, areas) works in the unit of the target CRS, so the target must be a
# projected CRS in metres - e.g. EPSG:27700 (British National Grid) or the local UTM zone. Reprojection itself is
# delegated to geopandas / pyproj.
#

import geopandas as gpd
import pandas as pd
from pyproj import CRS
from pyproj.exceptions import CRSError

from dogwalks.errors import ConfigurationError

SRC_CRS = 'EPSG:4326'


def as_crs(crs) -> CRS:
    try:
        return CRS.from_user_input(crs)
    except CRSError as e:
        raise ConfigurationError(f"unsupported reference system: {crs!r}") from e

def target_crs(epsg) -> CRS:
    crs = as_crs(epsg)
    if not crs.is_projected:
        raise ConfigurationError(f"{crs.name} is not a projected reference system")
    if crs.axis_info[0].unit_name not in ('metre', 'meter'):
        raise ConfigurationError(f"{crs.name} is not in metres ({crs.axis_info[0].unit_name})")
    return crs

# parallel lat / long sequences -> frame of planar x / y, same length and order.
def project(lat, long, epsg, src_crs=SRC_CRS) -> pd.DataFrame:
    src, dst = as_crs(src_crs), target_crs(epsg)
    pts = gpd.GeoSeries(gpd.points_from_xy(long, lat), crs=src)
    return pts.to_crs(dst).get_coordinates().reset_index(drop=True)

def geometrize(df:pd.DataFrame, epsg, src_crs=SRC_CRS) -> gpd.GeoDataFrame:
    src, dst = as_crs(src_crs), target_crs(epsg)
    gdf = gpd.GeoDataFrame(df, geometry=gpd.points_from_xy(df.long, df.lat, crs=src)).to_crs(dst)
    gdf.insert(len(gdf.columns)-1, 'x', gdf.geometry.x)
    gdf.insert(len(gdf.columns)-1, 'y', gdf.geometry.y)
    return gdf
