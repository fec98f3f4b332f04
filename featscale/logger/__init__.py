from .logger import GenericLogger, LocalLogger, MultiLogger
