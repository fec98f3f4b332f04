# -*- coding: utf-8 -*-
# @File   : base.py
# @Desc   : Shared machinery of the feature scalers.

from dataclasses import dataclass, fields

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from featscale.utils.data import as_matrix, check_n_features, wrap_like, readonly


@dataclass(frozen=True, eq=False)
class ScalingStatistics:
    """Immutable snapshot of one fit.

    Every vector holds one entry per feature (row of the training matrix).
    ``degenerate`` flags features whose scale was forced to 1: a zero range,
    or a min-max scale that underflowed to zero.
    """
    item_min: np.ndarray
    item_max: np.ndarray
    scale: np.ndarray
    degenerate: np.ndarray

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, np.ndarray):
                object.__setattr__(self, f.name, readonly(value))

    @property
    def n_features(self):
        return len(self.scale)

    def vectors(self):
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if isinstance(getattr(self, f.name), np.ndarray)
        }

    def to_frame(self):
        return pd.DataFrame(self.vectors())

    def to_dict(self):
        d = dict()
        for f in fields(self):
            value = getattr(self, f.name)
            d[f.name] = value.tolist() if isinstance(value, np.ndarray) else value
        return d

    @classmethod
    def from_dict(cls, d):
        kwargs = dict()
        for f in fields(cls):
            value = d[f.name]
            if isinstance(value, list):
                value = np.asarray(value,
                                   dtype=bool if f.name == 'degenerate' else np.float64)
            kwargs[f.name] = value
        return cls(**kwargs)


def safe_scale(scale, degenerate):
    """Force the scale of degenerate features to 1."""
    degenerate = np.asarray(degenerate, dtype=bool)
    scale = np.where(degenerate, 1.0, scale)
    return scale, degenerate


class BaseScaler(BaseEstimator):
    """Base class of the scalers.

    Rows of the input are features, columns are observations.

    A scaler keeps the statistics of its most recent fit. An instance is not
    concurrency-safe: callers must serialize access to one instance. The
    statistics snapshot itself is immutable; pass it explicitly through
    ``statistics=`` to share a fit between threads or instances.
    """
    statistics_class = ScalingStatistics

    def __init__(self, logger=None):
        self.logger = logger

    # subclasses implement these three
    def _compute_statistics(self, matrix):
        raise NotImplementedError()

    def _forward(self, matrix, statistics):
        raise NotImplementedError()

    def _inverse(self, matrix, statistics):
        raise NotImplementedError()

    def fit(self, data):
        """Compute per-feature statistics of ``data`` and keep them.

        Previous statistics are replaced, never merged.
        """
        matrix = as_matrix(data)
        if not np.isfinite(matrix).all():
            raise ValueError('Cannot fit on a matrix with NaN or inf entries.')

        statistics = self._compute_statistics(matrix)
        self.statistics_ = statistics

        if self.logger is not None:
            self.logger.log_statistics(self.__class__.__name__, statistics)
        return statistics

    def transform(self, data, out=None, statistics=None):
        """Scale ``data``.

        Without ``statistics`` the scaler is refitted on ``data`` first.
        """
        matrix = as_matrix(data)
        if statistics is None:
            statistics = self.fit(matrix)
        else:
            statistics = self._check_statistics(statistics)
            check_n_features(matrix, statistics.n_features)
        return wrap_like(data, self._forward(matrix, statistics), out)

    def fit_transform(self, data, out=None):
        return self.transform(data, out=out)

    def inverse_transform(self, data, out=None, statistics=None):
        """Map scaled ``data`` back to original units."""
        if statistics is None:
            statistics = self.statistics
        statistics = self._check_statistics(statistics)

        matrix = as_matrix(data)
        check_n_features(matrix, statistics.n_features)
        return wrap_like(data, self._inverse(matrix, statistics), out)

    def _check_statistics(self, statistics):
        if not isinstance(statistics, self.statistics_class):
            raise TypeError(
                f'{self.__class__.__name__} expects {self.statistics_class.__name__}, '
                f'got {type(statistics).__name__}')
        return statistics

    @property
    def statistics(self):
        check_is_fitted(self, 'statistics_')
        return self.statistics_

    @property
    def item_min(self):
        return self.statistics.item_min

    @property
    def item_max(self):
        return self.statistics.item_max

    @property
    def scale(self):
        return self.statistics.scale

    @property
    def degenerate(self):
        return self.statistics.degenerate

    def summarize(self):
        if not hasattr(self, 'statistics_'):
            return pd.DataFrame()
        return self.statistics_.to_frame()
