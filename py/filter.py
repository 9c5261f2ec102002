#
# drop isolated GPS jumps (speed filter). Passes the data through untouched when filtering.max_kmh is null.
#

import logging

import geopandas as gpd

from dogwalks.filter import filter_speed

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

gdf = gpd.read_parquet(snakemake.input[0])
max_kmh = snakemake.config['filtering'].get('max_kmh')
if max_kmh is not None:
    gdf = filter_speed(gdf, max_kmh)
gdf.to_parquet(snakemake.output[0])
