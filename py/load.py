#
# load the raw walk GPS csv into a (walk, species, ts) indexed dataframe.
#

import logging

from dogwalks.load import load_walks, COLMAP, DATEFMT

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

load_walks(snakemake.input[0], snakemake.config.get('colmap') or COLMAP, snakemake.config.get('datefmt') or DATEFMT) \
        .to_parquet(snakemake.output[0])
