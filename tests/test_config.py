import pytest
import yaml
from numpy.testing import assert_allclose

from featscale import (MeanNormalization, MinMaxScaler, MinMaxStatistics,
                       MeanNormalizationStatistics, build_scaler, load_scaler,
                       dump_scaler, save_statistics, load_statistics)


def test_build_scaler():
    scaler = build_scaler({'method': 'minmax', 'scalemin': -1, 'scalemax': 1})
    assert isinstance(scaler, MinMaxScaler)
    assert scaler.feature_range == (-1, 1)

    assert isinstance(build_scaler({'method': 'mean_normalization'}),
                      MeanNormalization)


def test_build_scaler_unknown_method():
    with pytest.raises(ValueError):
        build_scaler({'method': 'zscore'})


def test_dump_and_load_scaler(tmp_path):
    path = dump_scaler(MinMaxScaler(scalemin=2, scalemax=4), tmp_path / 'scaler.yaml')

    with open(path) as file:
        assert yaml.safe_load(file)['method'] == 'minmax'

    scaler = load_scaler(path)
    assert scaler.feature_range == (2, 4)


def test_statistics_round_trip(tmp_path, matrix):
    scaler = MinMaxScaler(-1., 1.)
    scaled = scaler.transform(matrix)

    path = save_statistics(scaler.statistics, tmp_path / 'stats.yaml')
    statistics = load_statistics(path)

    assert isinstance(statistics, MinMaxStatistics)
    assert statistics.scale_min == -1.
    assert statistics.degenerate.dtype == bool
    assert_allclose(MinMaxScaler().inverse_transform(scaled, statistics=statistics), matrix)


def test_mean_normalization_statistics_round_trip(tmp_path, degenerate_matrix):
    fitted = MeanNormalization().fit(degenerate_matrix)
    statistics = load_statistics(save_statistics(fitted, tmp_path / 'stats.yaml'))

    assert isinstance(statistics, MeanNormalizationStatistics)
    assert_allclose(statistics.mean, fitted.mean)
    assert statistics.degenerate.tolist() == [False, True]


def test_build_scaler_rejects_logger_key():
    with pytest.raises(ValueError):
        build_scaler({'method': 'minmax', 'logger': 'local'})


def test_load_scaler_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    with pytest.raises(ValueError):
        load_scaler(path)
