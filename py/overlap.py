#
# rasterize per-walk buffers into a walk-overlap count GeoTIFF (0 = no data), and tabulate the area disturbed by
# exactly n walks.
#

import logging

import geopandas as gpd
import rasterio

from dogwalks.overlap import overlap_raster

logging.basicConfig(filename=snakemake.log[0], level=logging.INFO)

raster = overlap_raster(gpd.read_parquet(snakemake.input[0]), snakemake.params['cell_size'])
height, width = raster.counts.shape
with rasterio.open(snakemake.output[0], 'w', driver='GTiff', height=height, width=width, count=1, dtype='uint16',
                   crs=raster.crs.to_wkt() if raster.crs is not None else None, transform=raster.transform,
                   nodata=0) as dst:
    dst.write(raster.counts.filled(0), 1)

raster.area_by_count().to_frame().to_csv(snakemake.output[1])
