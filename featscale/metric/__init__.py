from .metrics import ReconstructionMSE, max_abs_error, round_trip_error
