#
# summarize human / dog walks: one row per walk with the excursion, path length and duration of each subject and the
# median separation between them.
#
# summarize_walk works on a single walk - for manual inspection of one pair at a time. summarize_walks runs the same
# logic over a list of walks (default: every walk, ascending) and returns a new table, rows in processing order.
#
# A walk with a data problem (missing subject, misordered fixes, no aligned timepoint) raises DataIntegrityError. In
# batch mode, such walks are skipped with a warning unless skip_errors=False.
#
# takes: (geo)dataframe indexed by (walk, species, ts) with planar x, y - and the raw date / time columns, if present.
#

import logging
from contextlib import contextmanager

import pandas as pd

from dogwalks.errors import DataIntegrityError
from dogwalks.load import SPECIES
from dogwalks.pairs import separation
from dogwalks.tracks import build_track, track_stats

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    'walk', 'date', 'time',
    'human_max_dist', 'dog_max_dist',
    'human_total_dist', 'dog_total_dist',
    'human_duration', 'dog_duration',
    'median_sep', 'n_aligned', 'degenerate'
]


# tag data errors raised while processing a walk with that walk's identifier.
@contextmanager
def _walk_context(walk):
    try:
        yield
    except DataIntegrityError as e:
        if e.walk is not None:
            raise
        raise type(e)(str(e), walk) from e

def walk_ids(gdf:pd.DataFrame) -> list:
    return sorted(gdf.index.get_level_values('walk').unique().tolist())

def walk_subjects(gdf:pd.DataFrame, walk) -> dict:
    wdf = gdf.loc[gdf.index.get_level_values('walk') == walk]
    if wdf.shape[0] == 0:
        raise DataIntegrityError('no fixes', walk)
    subjects = {}
    for species in SPECIES:
        sdf = wdf.loc[wdf.index.get_level_values('species') == species]
        if sdf.shape[0] == 0:
            raise DataIntegrityError(f"no {species} fixes", walk)
        subjects[species] = sdf.droplevel(['walk', 'species'])
    return subjects

def summarize_walk(gdf:pd.DataFrame, walk, tolerance=None) -> pd.Series:
    subjects = walk_subjects(gdf, walk)
    with _walk_context(walk):
        tracks = {species: build_track(sdf) for species, sdf in subjects.items()}
        sep = separation(tracks['human'], tracks['dog'], tolerance)
    h, d = track_stats(tracks['human']), track_stats(tracks['dog'])

    first = subjects['human'].iloc[0]
    ts = subjects['human'].index[0]
    degenerate = bool(h.degenerate or d.degenerate)
    if degenerate:
        logger.warning(f"walk {walk}: single-fix track (human: {h.n}, dog: {d.n} fixes) - zero distance and duration")
    return pd.Series({
        'walk': walk,
        'date': first['date'] if 'date' in first.index else ts.strftime('%d/%m/%Y'),
        'time': first['time'] if 'time' in first.index else ts.strftime('%H:%M:%S'),
        'human_max_dist': h.max_dist_start,
        'dog_max_dist': d.max_dist_start,
        'human_total_dist': h.total_dist,
        'dog_total_dist': d.total_dist,
        'human_duration': h.duration,
        'dog_duration': d.duration,
        'median_sep': sep.median(),
        'n_aligned': sep.shape[0],
        'degenerate': degenerate
    }, name=walk)

def summarize_walks(gdf:pd.DataFrame, walks:list=None, tolerance=None, skip_errors:bool=True) -> pd.DataFrame:
    rows = []
    for walk in walk_ids(gdf) if walks is None else walks:
        try:
            rows.append(summarize_walk(gdf, walk, tolerance).to_dict())
        except DataIntegrityError as e:
            if not skip_errors:
                raise
            logger.warning(f"skipped {e}")
    logger.info(f"summarized {len(rows)} walks")
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
