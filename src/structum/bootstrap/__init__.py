"""Bootstrap (composition root) for STRUCTUM.

Assembles the library at runtime: reads configuration, builds the configured
adapters and installs them as the domain defaults (e.g. the identifier
generator used by `Entity`). Optionally turns on console logging.

Import rules:
- Applications import *this* package to wire Structum once at startup.
- This package may import: `structum.adapters`, `structum.interfaces`,
  `structum.domain`, `structum.config` and `structum.logging`.
- Inner layers must not import `structum.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_id_generator, reset_defaults

__all__ = ["AppContainer", "bootstrap", "build_id_generator", "reset_defaults"]
