"""Testing – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "feature-maybe[testing]"
"""
from __future__ import annotations

from typing import Any

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy


def flag_names() -> SearchStrategy[str]:
    """Flag names, including the empty string and dunder-like names."""
    return st.one_of(
        st.text(max_size=20),
        st.sampled_from(["", "__class__", "__dict__", "keys", "get", "toString"]),
    )


def flag_values() -> SearchStrategy[Any]:
    """Values that count as *present*: anything except the ``False`` singleton.

    Falsy values other than ``False`` (``0``, ``""``, ``None``, ``[]``) are
    deliberately included.
    """
    return st.one_of(
        st.just(True),
        st.none(),
        st.integers(),
        st.floats(allow_nan=False),
        st.text(max_size=20),
        st.lists(st.integers(), max_size=3),
        st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
    )


def feature_sets(*, min_size: int = 0, max_size: int = 10) -> SearchStrategy[dict[str, Any]]:
    """Feature mappings whose values are either present values or ``False``.

    Example::

        @given(feature_sets(min_size=1))
        def test_disabled_flags_are_absent(features):
            ...
    """
    return st.dictionaries(
        flag_names(),
        st.one_of(flag_values(), st.just(False)),
        min_size=min_size,
        max_size=max_size,
    )


__all__ = ["feature_sets", "flag_names", "flag_values"]
