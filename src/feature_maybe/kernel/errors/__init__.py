"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── UnwrapError              (base.py, also a ValueError)
    └── ConfigError              (feature_maybe.config.errors)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from feature_maybe.kernel.errors.base import BaseError, UnwrapError

__all__ = [
    "BaseError",
    "UnwrapError",
]
