from .base import BaseScaler, ScalingStatistics
from .mean_normalization import MeanNormalization, MeanNormalizationStatistics, mean_normalize
from .minmax import MinMaxScaler, MinMaxStatistics, minmax_scale
