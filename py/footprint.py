#
# buffer every walk by the flight initiation distance (+ lead), dissolved into a single footprint or kept per walk.
#

import logging

import geopandas as gpd

from dogwalks.footprint import footprint

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

footprint(
    gpd.read_parquet(snakemake.input[0]),
    radius=snakemake.params['radius'],
    dissolve=snakemake.params['dissolve'],
    species=snakemake.params.get('species'),
    lead=snakemake.params.get('lead') or 0.
).to_parquet(snakemake.output[0])
