"""Integration tests.

Purpose
- Exercise the real third-party libraries behind the adapters and wiring
  (ulid-py for identifiers, rich for console logging).
"""
