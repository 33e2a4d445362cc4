"""
feature_maybe – optional-valued feature flag lookups.

Import path convention::

    from feature_maybe import feature_maybe, Some, Nothing
    from feature_maybe.config import FeatureMaybeSettings
    from feature_maybe.observability import JsonLoggerFactory
"""

from feature_maybe.kernel.types import Nothing, Option, Some
from feature_maybe.lookup import FeatureLookup, FeatureSet, feature_maybe, make_lookup

__version__ = "0.1.0"
__all__ = [
    "FeatureLookup",
    "FeatureSet",
    "Nothing",
    "Option",
    "Some",
    "__version__",
    "feature_maybe",
    "make_lookup",
]
