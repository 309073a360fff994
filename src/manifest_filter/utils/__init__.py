"""Shared utilities — cross-cutting concerns such as logging setup.

Rules
-----
* No business logic.
* No playlist I/O.
* Importable by any layer.
"""
