# -*- coding: utf-8 -*-
# @File   : config.py
# @Desc   : yaml configuration of scalers and persistence of fitted statistics.

from pathlib import Path

import yaml

from featscale.transform import (MeanNormalization, MeanNormalizationStatistics,
                                 MinMaxScaler, MinMaxStatistics)

SCALERS = {
    'mean_normalization': (MeanNormalization, MeanNormalizationStatistics),
    'minmax': (MinMaxScaler, MinMaxStatistics),
}


def _method_of(obj):
    for method, classes in SCALERS.items():
        if isinstance(obj, classes):
            return method
    raise TypeError(f'Unknown scaler object: {type(obj).__name__}')


def build_scaler(params, logger=None):
    """Build a scaler from a params dict such as ``{'method': 'minmax', 'scalemax': 2}``."""
    if not params:
        raise ValueError('Empty scaler configuration.')
    params = dict(params)
    if 'logger' in params:
        raise ValueError('A logger cannot be configured from params; pass logger= instead.')
    method = params.pop('method', None)
    if method not in SCALERS:
        raise ValueError(
            f'Unknown scaling method {method!r}. Choose from {list(SCALERS)}')

    scaler_class, _ = SCALERS[method]
    return scaler_class(**params, logger=logger)


def load_scaler(path, logger=None):
    with open(path, 'r') as file:
        params = yaml.safe_load(file)
    return build_scaler(params, logger=logger)


def dump_scaler(scaler, path):
    params = {k: v for k, v in scaler.get_params().items() if k != 'logger'}
    with open(path, 'w') as file:
        yaml.dump({
            'method': _method_of(scaler),
            **params
        },
                  file,
                  default_flow_style=False,
                  sort_keys=False)
    return Path(path)


def save_statistics(statistics, path):
    with open(path, 'w') as file:
        yaml.dump({
            'method': _method_of(statistics),
            **statistics.to_dict()
        },
                  file,
                  default_flow_style=False,
                  sort_keys=False)
    return Path(path)


def load_statistics(path):
    with open(path, 'r') as file:
        d = yaml.safe_load(file)

    method = d.pop('method', None)
    if method not in SCALERS:
        raise ValueError(f'Unknown scaling method {method!r} in {path}')
    _, statistics_class = SCALERS[method]
    return statistics_class.from_dict(d)
