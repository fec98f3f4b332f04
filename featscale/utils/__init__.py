from .data import as_matrix, check_n_features, wrap_like, readonly
