"""Kernel – value types and the error hierarchy."""
