"""Integration tests for adapters."""
