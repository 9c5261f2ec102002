#
# one row per walk: excursion, path length and duration for human and dog, and their median separation.
#
# walks that fail (missing subject, misordered fixes, no aligned timepoint) are skipped - see the log.
#

import logging

import geopandas as gpd

from dogwalks.aggregate import summarize_walks

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

summarize_walks(gpd.read_parquet(snakemake.input[0]), snakemake.params['walks'], snakemake.params['tolerance']) \
        .to_csv(snakemake.output[0], index=False)
