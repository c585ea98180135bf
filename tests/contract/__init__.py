"""Contract tests.

Purpose
- Define behavior once and run it against every implementation of a port
  (e.g. each IdGenerator) to keep them interchangeable.
"""
