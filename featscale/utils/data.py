# -*- coding: utf-8 -*-
# @File   : data.py

import numpy as np
import pandas as pd
import torch


def as_matrix(data, dtype=np.float64):
    """Coerce ``data`` into a 2D float numpy array.

    data: numpy array, torch tensor, pandas DataFrame or nested lists.
          Rows are features, columns are observations.
    """
    if isinstance(data, torch.Tensor):
        matrix = data.detach().cpu().numpy()
    elif isinstance(data, pd.DataFrame):
        matrix = data.to_numpy()
    else:
        matrix = np.asarray(data)

    if matrix.ndim != 2:
        raise ValueError(
            f'Expected a 2D matrix (features x observations). Got ndim={matrix.ndim}'
        )
    if matrix.shape[0] == 0 or matrix.shape[1] == 0:
        raise ValueError(
            f'Matrix needs at least one feature and one observation. Got shape {matrix.shape}'
        )

    return matrix.astype(dtype, copy=False)


def check_n_features(matrix, n_features):
    if matrix.shape[0] != n_features:
        raise ValueError(
            f'Expected {n_features} features (rows), got {matrix.shape[0]}')


def wrap_like(template, values, out=None):
    """Put ``values`` back into the container type of ``template``.

    If ``out`` is given it is written in place and returned instead.
    """
    if out is not None:
        if tuple(out.shape) != values.shape:
            raise ValueError(
                f'out has shape {tuple(out.shape)}, expected {values.shape}')
        floating = out.is_floating_point() if isinstance(
            out, torch.Tensor) else np.issubdtype(out.dtype, np.floating)
        if not floating:
            raise ValueError(f'out must have a floating dtype, got {out.dtype}')
        if isinstance(out, torch.Tensor):
            out.copy_(torch.as_tensor(values, dtype=out.dtype))
        else:
            out[...] = values
        return out

    if isinstance(template, torch.Tensor):
        dtype = template.dtype if template.is_floating_point() else torch.float64
        return torch.as_tensor(values, dtype=dtype, device=template.device)
    if isinstance(template, pd.DataFrame):
        return pd.DataFrame(values,
                            index=template.index,
                            columns=template.columns)
    return values


def readonly(vector):
    vector = np.array(vector)
    vector.setflags(write=False)
    return vector


if __name__ == "__main__":
    arr = np.arange(0, 12, 1).reshape((3, 4))
    df = pd.DataFrame(arr)

    print(as_matrix(df))
    print(wrap_like(torch.zeros(3, 4), as_matrix(arr)))
