#
# project fixes to the configured planar CRS - adds point geometry and x / y in metres.
#

import logging

import pandas as pd

from dogwalks.featurize import geometrize, SRC_CRS

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

df = pd.read_parquet(snakemake.input[0])
geometrize(df, snakemake.config['epsg'], snakemake.config.get('src_crs') or SRC_CRS) \
        .to_parquet(snakemake.output[0])
