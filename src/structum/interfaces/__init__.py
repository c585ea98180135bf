"""Interfaces (application boundary) for STRUCTUM.

Defines framework-free contracts implemented by `structum.adapters`, such as
identifier generators. Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`structum.*` modules. It may be imported by `structum.adapters` and
`structum.bootstrap`.
"""
