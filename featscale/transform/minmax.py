# -*- coding: utf-8 -*-
# @File   : minmax.py

from dataclasses import dataclass

import numpy as np

from featscale.transform.base import BaseScaler, ScalingStatistics, safe_scale


@dataclass(frozen=True, eq=False)
class MinMaxStatistics(ScalingStatistics):
    # target range the snapshot was fitted for
    scale_min: float = 0.0
    scale_max: float = 1.0


class MinMaxScaler(BaseScaler):
    """Map each feature linearly from [min, max] onto [scalemin, scalemax].

        scale = (scalemax - scalemin) / (max - min)
        x'    = scale * x + scalemin - min * scale

    Zero-range features get scale 1 and are mapped onto ``scalemin``.

    Args:
        scalemin: lower bound of the target range.
        scalemax: upper bound of the target range.
        logger: optional featscale logger receiving every fit.
    """
    statistics_class = MinMaxStatistics

    def __init__(self, scalemin=0.0, scalemax=1.0, logger=None):
        super().__init__(logger=logger)
        if not scalemin < scalemax:
            raise ValueError(
                f'scalemin must be smaller than scalemax. Got ({scalemin}, {scalemax})')
        self.scalemin = scalemin
        self.scalemax = scalemax

    def _compute_statistics(self, matrix):
        item_min = matrix.min(axis=1)
        item_max = matrix.max(axis=1)
        natural_range = item_max - item_min

        with np.errstate(divide='ignore'):
            scale = (self.scalemax - self.scalemin) / natural_range
        # a very wide range can underflow the scale to zero
        scale, degenerate = safe_scale(scale,
                                       (natural_range == 0) | (scale == 0))

        return MinMaxStatistics(item_min=item_min,
                                item_max=item_max,
                                scale=scale,
                                degenerate=degenerate,
                                scale_min=float(self.scalemin),
                                scale_max=float(self.scalemax))

    def _forward(self, matrix, statistics):
        scale = statistics.scale[:, None]
        item_min = statistics.item_min[:, None]
        return scale * matrix + statistics.scale_min - item_min * scale

    def _inverse(self, matrix, statistics):
        scale = statistics.scale[:, None]
        item_min = statistics.item_min[:, None]
        return (matrix - statistics.scale_min + item_min * scale) / scale

    @property
    def scale_min(self):
        return self.scalemin

    @property
    def scale_max(self):
        return self.scalemax

    @property
    def feature_range(self):
        return self.scalemin, self.scalemax


def minmax_scale(data, scalemin=0.0, scalemax=1.0):
    """Functional form: returns the scaled data and its statistics."""
    scaler = MinMaxScaler(scalemin=scalemin, scalemax=scalemax)
    output = scaler.transform(data)
    return output, scaler.statistics
