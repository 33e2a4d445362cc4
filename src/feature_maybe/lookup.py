"""Feature lookup – wrap a flag mapping in an Option-returning lookup."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable

from feature_maybe.config import ConfigError, FeatureMaybeSettings, get_settings
from feature_maybe.kernel.types import Nothing, Option, Some
from feature_maybe.observability import get_logger

type FeatureSet = Mapping[Hashable, Any]
type FeatureLookup = Callable[[Hashable], Option[Any]]

_MISSING = object()

_log = get_logger(__name__)


def feature_maybe(
    features: FeatureSet,
    *,
    settings: FeatureMaybeSettings | None = None,
) -> FeatureLookup:
    """Return a function that looks flags up in *features*.

    The lookup yields ``Nothing()`` when the name is not a key of *features*
    or when its value is exactly ``False``, and ``Some(value)`` otherwise.
    *features* is held by reference and re-read on every call, so later
    changes to the mapping are visible. Unhashable names give ``Nothing()``.

    Usage::

        feature = feature_maybe({"wizard": True, "mode": "beast"})
        feature("mode").map(str.upper).unwrap_or("default")   # "BEAST"
        feature("foo").or_else(lambda: print("no foo"))
    """
    if settings is None:
        try:
            settings = get_settings()
        except ConfigError as exc:
            _log.warning("feature_maybe_settings_invalid", error=exc.to_dict())
            settings = FeatureMaybeSettings()

    log_lookups = settings.log_lookups
    if log_lookups:
        _log.debug("feature_lookup_created", flag_count=len(features))

    def lookup(name: Hashable) -> Option[Any]:
        try:
            value = features.get(name, _MISSING)
        except TypeError:
            value = _MISSING

        result: Option[Any] = Nothing() if value is _MISSING or value is False else Some(value)
        if log_lookups:
            _log.debug("feature_lookup", feature=repr(name), present=result.is_some())
        return result

    return lookup


make_lookup = feature_maybe

__all__ = ["FeatureLookup", "FeatureSet", "feature_maybe", "make_lookup"]
