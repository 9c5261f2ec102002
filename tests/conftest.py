"""
Shared pytest fixtures: synthetic human / dog walks in a planar (metric) CRS, and a raw csv export.
"""

import io

import geopandas as gpd
import numpy as np
import pandas as pd
import pytest


T0 = pd.Timestamp('2021-05-14 08:00:00')


def make_walks(tracks: dict, step: str = '10s', crs='EPSG:27700') -> gpd.GeoDataFrame:
    """Build a (walk, species, ts) indexed GeoDataFrame from {(walk, species): [(x, y), ...]}."""
    rows = []
    for (walk, species), coords in tracks.items():
        start = T0 + pd.Timedelta(days=walk)
        for i, (x, y) in enumerate(coords):
            ts = start + i * pd.Timedelta(step)
            rows.append({
                'walk': walk, 'species': species, 'ts': ts,
                'date': ts.strftime('%d/%m/%Y'), 'time': ts.strftime('%H:%M:%S'),
                'x': float(x), 'y': float(y)
            })
    df = pd.DataFrame(rows).set_index(['walk', 'species', 'ts'])
    return gpd.GeoDataFrame(df, geometry=gpd.points_from_xy(df.x, df.y), crs=crs)


def track_frame(coords, step: str = '10s', start=T0) -> pd.DataFrame:
    """A single subject's fixes, indexed by ts."""
    ts = pd.DatetimeIndex([start + i * pd.Timedelta(step) for i in range(len(coords))], name='ts')
    return pd.DataFrame(np.asarray(coords, dtype=float).reshape(-1, 2), columns=['x', 'y'], index=ts)


@pytest.fixture
def pair_walk():
    """Walk 1: human walks 40 m east, dog zigzags alongside up to 10 m away."""
    return make_walks({
        (1, 'human'): [(0, 0), (10, 0), (20, 0), (30, 0), (40, 0)],
        (1, 'dog'): [(0, 0), (10, 5), (20, 10), (30, 5), (40, 0)],
    })


@pytest.fixture
def four_walks():
    """Four walks crossing the same field, partly overlapping."""
    return make_walks({
        (1, 'human'): [(0, 0), (50, 0), (100, 0), (150, 0), (200, 0), (250, 0)],
        (1, 'dog'): [(0, 5), (60, 20), (120, 30), (180, 40), (300, 40), (400, 20)],
        (2, 'human'): [(0, 2), (50, 2), (100, 2), (150, 2)],
        (2, 'dog'): [(0, -3), (50, -10), (100, -3), (150, -10)],
        (3, 'human'): [(100, -100), (100, -50), (100, 0), (100, 50)],
        (3, 'dog'): [(105, -100), (110, -50), (105, 0), (110, 50)],
        (4, 'human'): [(300, 300), (350, 300), (400, 300)],
        (4, 'dog'): [(300, 310), (350, 320), (400, 310)],
    })


@pytest.fixture
def raw_csv():
    """A raw export as written by the GPS download software (two walks, UK coordinates)."""
    return io.StringIO(
        "Walk,Species,Date,Time,Latitude,Longitude\n"
        "1,Human,14/05/2021,08:00:00,52.5200,1.6000\n"
        "1,Human,14/05/2021,08:00:10,52.5201,1.6001\n"
        "1,Human,14/05/2021,08:00:20,52.5202,1.6002\n"
        "1,Dog,14/05/2021,08:00:00,52.5200,1.6000\n"
        "1,Dog,14/05/2021,08:00:10,52.5203,1.6001\n"
        "1,Dog,14/05/2021,08:00:20,52.5205,1.6003\n"
        "2,human,02/06/2021,17:30:00,52.5300,1.6100\n"
        "2,human,02/06/2021,17:30:10,52.5301,1.6100\n"
        "2,dog,02/06/2021,17:30:00,52.5300,1.6101\n"
        "2,dog,02/06/2021,17:30:10,52.5302,1.6102\n"
    )
