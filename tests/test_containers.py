import numpy as np
import pandas as pd
import pytest
import torch
from numpy.testing import assert_allclose

from featscale import MeanNormalization, MinMaxScaler
from featscale.utils.data import as_matrix, wrap_like


def test_torch_tensor_in_tensor_out():
    data = torch.tensor([[2., 4., 6.], [1., 3., 5.]], dtype=torch.float32)
    scaler = MinMaxScaler()
    out = scaler.transform(data)

    assert isinstance(out, torch.Tensor)
    assert out.dtype == torch.float32
    assert torch.allclose(out, torch.tensor([[0., .5, 1.], [0., .5, 1.]]))

    restored = scaler.inverse_transform(out)
    assert torch.allclose(restored, data)


def test_integer_tensor_comes_back_as_float():
    out = MeanNormalization().transform(torch.tensor([[2, 4, 6]]))
    assert out.dtype == torch.float64


def test_tensor_out_parameter():
    data = torch.tensor([[2., 4., 6.]])
    out = torch.empty(1, 3)
    returned = MeanNormalization().transform(data, out=out)
    assert returned is out
    assert torch.allclose(out, torch.tensor([[-.5, 0., .5]]))


def test_dataframe_keeps_labels():
    df = pd.DataFrame([[2., 4., 6.], [10., 20., 30.]],
                      index=['height', 'weight'],
                      columns=['a', 'b', 'c'])
    out = MeanNormalization().transform(df)

    assert isinstance(out, pd.DataFrame)
    assert list(out.index) == ['height', 'weight']
    assert list(out.columns) == ['a', 'b', 'c']
    assert_allclose(out.loc['weight'].values, [-.5, 0., .5])


def test_nested_lists_give_numpy():
    out = MinMaxScaler().transform([[1, 2], [3, 5]])
    assert isinstance(out, np.ndarray)


def test_as_matrix_rejects_3d():
    with pytest.raises(ValueError):
        as_matrix(np.zeros((2, 2, 2)))


def test_wrap_like_out_shape_mismatch():
    with pytest.raises(ValueError):
        wrap_like(np.zeros((2, 2)), np.zeros((2, 2)), out=np.zeros((2, 3)))


@pytest.mark.parametrize('out', [np.zeros((1, 3), dtype=int),
                                 torch.zeros(1, 3, dtype=torch.int64)])
def test_integer_out_is_rejected(out):
    with pytest.raises(ValueError):
        MeanNormalization().transform(np.array([[2., 4., 6.]]), out=out)
