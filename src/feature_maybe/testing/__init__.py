"""Testing helpers – property-based strategies for feature sets."""
from feature_maybe.testing.strategies import feature_sets, flag_names, flag_values

__all__ = ["feature_sets", "flag_names", "flag_values"]
