# -*- coding: utf-8 -*-
# @File   : mean_normalization.py

from dataclasses import dataclass

import numpy as np

from featscale.transform.base import BaseScaler, ScalingStatistics, safe_scale


@dataclass(frozen=True, eq=False)
class MeanNormalizationStatistics(ScalingStatistics):
    mean: np.ndarray = None

    def __post_init__(self):
        if self.mean is None or len(self.mean) != self.n_features:
            raise ValueError(
                f'mean needs {self.n_features} entries, got '
                f'{None if self.mean is None else len(self.mean)}')
        super().__post_init__()


class MeanNormalization(BaseScaler):
    """Center each feature by its mean and divide by its range.

        x' = (x - mean) / (max - min)

    A feature with max == min keeps a scale of 1, so its output is all zeros.

    >>> scaler = MeanNormalization()
    >>> scaler.transform([[2., 4., 6.]])
    array([[-0.5,  0. ,  0.5]])
    """
    statistics_class = MeanNormalizationStatistics

    def __init__(self, logger=None):
        super().__init__(logger=logger)

    def _compute_statistics(self, matrix):
        item_min = matrix.min(axis=1)
        item_max = matrix.max(axis=1)
        natural_range = item_max - item_min
        scale, degenerate = safe_scale(natural_range, natural_range == 0)

        return MeanNormalizationStatistics(item_min=item_min,
                                           item_max=item_max,
                                           scale=scale,
                                           degenerate=degenerate,
                                           mean=matrix.mean(axis=1))

    def _forward(self, matrix, statistics):
        return (matrix - statistics.mean[:, None]) / statistics.scale[:, None]

    def _inverse(self, matrix, statistics):
        return matrix * statistics.scale[:, None] + statistics.mean[:, None]

    @property
    def mean(self):
        return self.statistics.mean


def mean_normalize(data):
    """Functional form: returns the normalized data and its statistics."""
    scaler = MeanNormalization()
    output = scaler.transform(data)
    return output, scaler.statistics
