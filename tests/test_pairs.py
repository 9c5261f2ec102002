"""
Tests for comparing human / dog tracks.
"""
import numpy as np
import pandas as pd
import pytest

from dogwalks.errors import ConfigurationError, DataIntegrityError, NoAlignedTimepointsError
from dogwalks.aggregate import walk_subjects
from dogwalks.pairs import align, separation, separation_stats
from dogwalks.tracks import build_track
from tests.conftest import T0, track_frame


class TestAlign:

    def test_exact_match_drops_unmatched(self):
        """Only timestamps present in both tracks are compared."""
        a = track_frame([(0, 0), (10, 0), (20, 0), (30, 0)], step='10s')
        b = track_frame([(0, 1), (20, 1), (40, 1)], step='20s')
        aligned = align(a, b)
        assert aligned.index.tolist() == [T0, T0 + pd.Timedelta('20s')]
        assert list(aligned.columns) == ['x_a', 'y_a', 'x_b', 'y_b']

    def test_nearest_within_tolerance(self):
        """With a tolerance, fixes pair with the nearest fix close enough in time."""
        a = track_frame([(0, 0), (10, 0), (20, 0)], step='10s')
        b = track_frame([(0, 3), (10, 3), (20, 3)], step='10s', start=T0 + pd.Timedelta('2s'))
        assert align(a, b).shape[0] == 0
        aligned = align(a, b, tolerance='3s')
        assert aligned.shape[0] == 3
        assert aligned.x_b.tolist() == [0., 10., 20.]

    def test_tolerance_drops_far_fixes(self):
        a = track_frame([(0, 0), (10, 0)], step='1min')
        b = track_frame([(0, 3)], start=T0 + pd.Timedelta('50s'))
        assert align(a, b, tolerance='15s').x_a.tolist() == [10.]

    @pytest.mark.parametrize('tolerance', ['five seconds', '-5s'])
    def test_bad_tolerance(self, tolerance):
        """A malformed tolerance is a configuration error, not a per-walk data error."""
        a = track_frame([(0, 0), (10, 0)])
        with pytest.raises(ConfigurationError):
            align(a, a, tolerance=tolerance)

    def test_duplicate_timestamps_keep_first(self):
        a = track_frame([(0, 0), (5, 0)], step='0s')
        b = track_frame([(0, 4)])
        aligned = align(a, b)
        assert aligned.shape[0] == 1
        assert aligned.x_a.iloc[0] == 0.


class TestSeparation:

    def test_distances(self, pair_walk):
        human = build_track(walk_subjects(pair_walk, 1)['human'])
        dog = build_track(walk_subjects(pair_walk, 1)['dog'])
        sep = separation(human, dog)
        assert sep.tolist() == [0., 5., 10., 5., 0.]
        assert sep.median() == 5.

    @pytest.mark.parametrize('seed', range(10))
    def test_symmetric_and_non_negative(self, seed):
        rng = np.random.default_rng(seed)
        n = rng.integers(1, 40)
        a = track_frame(rng.normal(0, 100, size=(n, 2)))
        b = track_frame(rng.normal(0, 100, size=(n, 2)))
        ab, ba = separation(a, b), separation(b, a)
        assert (ab >= 0).all()
        assert ab.tolist() == ba.tolist()

    def test_no_aligned_timepoint(self):
        """Disjoint tracks are a data error, not an empty result."""
        a = track_frame([(0, 0), (1, 0)])
        b = track_frame([(0, 0), (1, 0)], start=T0 + pd.Timedelta('1h'))
        with pytest.raises(NoAlignedTimepointsError):
            separation(a, b)
        with pytest.raises(DataIntegrityError):
            separation(a, b)

    def test_stats(self):
        stats = separation_stats(pd.Series([1., 2., 6.]))
        assert stats['median'] == 2.
        assert stats['mean'] == 3.
        assert stats['max'] == 6.
        assert stats['n'] == 3
