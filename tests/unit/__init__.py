"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Pass explicit timestamps where exact values are asserted; bound the clock otherwise.
- Prefer behavior-centric assertions over implementation details.
"""
