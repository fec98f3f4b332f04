__version__ = "0.1.0"

from featscale.transform import (BaseScaler, ScalingStatistics,
                                 MeanNormalization, MeanNormalizationStatistics,
                                 MinMaxScaler, MinMaxStatistics,
                                 mean_normalize, minmax_scale)
from featscale.logger import GenericLogger, LocalLogger, MultiLogger
from featscale.config import build_scaler, load_scaler, dump_scaler, save_statistics, load_statistics
