#
# compare the tracks of a human / dog pair: separation distance at each aligned timepoint.
#
# Alignment policy:
#  - tolerance=None (default): a timepoint is aligned when both tracks have a fix with exactly that timestamp. The GPS
#    units are expected to log on a shared schedule; timepoints without an exact counterpart are dropped.
#  - tolerance=<timedelta>: each fix of the first track is paired with the nearest fix of the second track within the
#    tolerance; fixes without a counterpart are dropped. Unlike exact matching, this is not symmetric in track order.
#
# Duplicate timestamps within a track keep their first fix.
#
# Zero aligned timepoints is a data error (NoAlignedTimepointsError), not an empty / NaN result.
#

import numpy as np
import pandas as pd

from dogwalks.errors import ConfigurationError, NoAlignedTimepointsError


def _positions(track:pd.DataFrame) -> pd.DataFrame:
    return track.loc[~track.index.duplicated(keep='first'), ['x', 'y']]

def as_tolerance(tolerance) -> pd.Timedelta:
    try:
        td = pd.Timedelta(tolerance)
    except ValueError as e:
        raise ConfigurationError(f"invalid pairing tolerance: {tolerance!r}") from e
    if pd.isna(td) or td < pd.Timedelta(0):
        raise ConfigurationError(f"invalid pairing tolerance: {tolerance!r}")
    return td

def align(a:pd.DataFrame, b:pd.DataFrame, tolerance=None) -> pd.DataFrame:
    if tolerance is not None:
        tolerance = as_tolerance(tolerance)
    a, b = _positions(a), _positions(b)
    if tolerance is None:
        return a.join(b, how='inner', lsuffix='_a', rsuffix='_b')
    return pd.merge_asof(a.add_suffix('_a'), b.add_suffix('_b'), left_index=True, right_index=True,
                         direction='nearest', tolerance=tolerance) \
            .dropna()

def separation(a:pd.DataFrame, b:pd.DataFrame, tolerance=None) -> pd.Series:
    aligned = align(a, b, tolerance)
    if aligned.shape[0] == 0:
        raise NoAlignedTimepointsError('paired tracks share no aligned timepoint')
    return pd.Series(np.hypot(aligned.x_a - aligned.x_b, aligned.y_a - aligned.y_b), index=aligned.index, name='sep')

def separation_stats(sep:pd.Series) -> pd.Series:
    return pd.Series({'median': sep.median(), 'mean': sep.mean(), 'max': sep.max(), 'n': sep.shape[0]})
