#
# load the raw walk GPS table into a pandas dataframe indexed by (walk, species, ts).
#
# One row per GPS fix. Rows are expected to be chronological within each (walk, species) group: they are kept in file
# order and never re-sorted, so a misordered export is reported downstream (per walk) instead of silently fixed.
#
# colmap maps the file's headers to the internal names. Dates are day/month/year, times are 24h with seconds.
#

import logging

import pandas as pd
import numpy as np

from dogwalks.errors import ConfigurationError, DataIntegrityError

logger = logging.getLogger(__name__)

SPECIES = ('human', 'dog')

COLMAP = {
    'Walk': 'walk',
    'Species': 'species',
    'Date': 'date',
    'Time': 'time',
    'Latitude': 'lat',
    'Longitude': 'long'
}
DATEFMT = '%d/%m/%Y %H:%M:%S'


def load_walks(path, colmap:dict=COLMAP, datefmt:str=DATEFMT, sep:str=',') -> pd.DataFrame:
    df = pd.read_csv(path, sep=sep, dtype=str, skipinitialspace=True)
    missing = [c for c in colmap if c not in df.columns]
    if missing:
        raise ConfigurationError(f"missing required column(s): {', '.join(missing)}")
    df = df[list(colmap.keys())].rename(colmap, axis=1)

    try:
        df['walk'] = pd.to_numeric(df.walk).astype(np.int64)
        df['lat'] = pd.to_numeric(df.lat).astype(np.float64)
        df['long'] = pd.to_numeric(df.long).astype(np.float64)
    except ValueError as e:
        raise DataIntegrityError(f"unreadable walk identifier or coordinates ({e})") from e
    if df[['lat', 'long']].isna().to_numpy().any():
        raise DataIntegrityError(f"{df[['lat', 'long']].isna().any(axis=1).sum()} fixes without coordinates")

    df['species'] = df.species.str.strip().str.lower()
    unknown = df.loc[~df.species.isin(SPECIES), 'species'].unique()
    if len(unknown):
        raise DataIntegrityError(f"unknown species: {', '.join(map(str, unknown))}")

    df['date'] = df.date.str.strip()
    df['time'] = df.time.str.strip()
    try:
        df['ts'] = pd.to_datetime(df.date + ' ' + df.time, format=datefmt)
    except ValueError as e:
        raise DataIntegrityError(f"unparseable date/time ({e})") from e
    if df.ts.isna().any():
        raise DataIntegrityError(f"{df.ts.isna().sum()} fixes without a date or time")

    df = df.set_index(['walk', 'species', 'ts'])
    misordered = check_chronological(df)
    if misordered:
        logger.warning(f"{len(misordered)} track(s) not in chronological order: {misordered}")
    logger.info(f"loaded {df.shape[0]} fixes over {df.index.get_level_values('walk').nunique()} walks")
    return df


# (walk, species) groups whose timestamps decrease at some point. Equal consecutive timestamps are allowed.
def check_chronological(df:pd.DataFrame) -> list:
    return [key for key, g in df.groupby(level=['walk', 'species'])
            if not g.index.get_level_values('ts').is_monotonic_increasing]
