"""STRUCTUM

Domain-Driven Design building blocks: identity-based entities, aggregate-root
marking, creation/update audit metadata and soft-deletion metadata.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
