#
# build the track (trajectory) of one subject on one walk.
#
# dist_start is the straight-line excursion from the first fix, step_dist the length of each step. These are different
# quantities and are summarized separately: max(dist_start) is the farthest excursion, sum(step_dist) the path length.
#
# takes: frame indexed by ts (chronological) with planar x, y in metres
# returns: frame indexed by ts with x, y, dist_start (m), step_dist (m, to the next fix), step_duration (s, to the next
# fix). The last fix has no next step, so its step values are NaN.
#
# A single fix is a valid but degenerate track: zero distance and zero duration, flagged by track_stats.
#

import numpy as np
import pandas as pd

from dogwalks.errors import DataIntegrityError


def build_track(points:pd.DataFrame) -> pd.DataFrame:
    if points.shape[0] == 0:
        raise DataIntegrityError('empty track')
    ts = pd.DatetimeIndex(points.index.get_level_values('ts'), name='ts')
    if not ts.is_monotonic_increasing:
        raise DataIntegrityError('fixes are not in chronological order')

    x, y = points.x.to_numpy(dtype=np.float64), points.y.to_numpy(dtype=np.float64)
    track = pd.DataFrame({'x': x, 'y': y}, index=ts)
    track['dist_start'] = np.hypot(x - x[0], y - y[0])
    track['step_dist'] = np.append(np.hypot(np.diff(x), np.diff(y)), np.nan)
    track['step_duration'] = np.append(np.diff(ts.to_numpy()) / np.timedelta64(1, 's'), np.nan)
    return track

def track_stats(track:pd.DataFrame) -> pd.Series:
    return pd.Series({
        'n': track.shape[0],
        'max_dist_start': track.dist_start.max(),
        'total_dist': track.step_dist.sum(),
        'duration': track.step_duration.sum(),
        'degenerate': track.shape[0] < 2
    })
