"""Adapters for STRUCTUM.

Concrete implementations of the contracts in `structum.interfaces`.
"""
