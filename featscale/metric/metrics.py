# -*- coding: utf-8 -*-
# @File   : metrics.py

import numpy as np
import torch

from torchmetrics import Metric

from featscale.utils.data import as_matrix


class ReconstructionMSE(Metric):
    """Mean squared error between reconstructed and original matrices."""
    full_state_update = False
    higher_is_better = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.add_state("sum_squared_error", default=torch.tensor(0.0, dtype=torch.float64), dist_reduce_fx="sum")
        self.add_state("nobs", default=torch.tensor(0), dist_reduce_fx="sum")

    def update(self, reconstruction, original):
        reconstruction = torch.as_tensor(as_matrix(reconstruction))
        original = torch.as_tensor(as_matrix(original))
        assert reconstruction.shape == original.shape

        sum_squared_error = ((reconstruction - original) ** 2).sum()
        nobs = original.numel()  # number of entries

        self.sum_squared_error += sum_squared_error
        self.nobs += nobs

    def compute(self):
        return self.sum_squared_error / self.nobs


def max_abs_error(a, b):
    a, b = as_matrix(a), as_matrix(b)
    if a.shape != b.shape:
        raise ValueError(f'Shape mismatch: {a.shape} vs {b.shape}')
    return float(np.abs(a - b).max())


def round_trip_error(scaler, data):
    """Largest deviation of inverse_transform(transform(data)) from data."""
    scaled = scaler.transform(data)
    return max_abs_error(scaler.inverse_transform(scaled), data)
