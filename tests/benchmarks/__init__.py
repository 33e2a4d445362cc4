"""Lookup benchmarks (pytest-benchmark); ``--benchmark-disable`` runs them as plain tests."""
