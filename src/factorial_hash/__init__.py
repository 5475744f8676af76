"""
Factorial Hash — caller layer.

Bound validation, settings, logging setup and the command line around the
arbitrary-precision core in ``src.core.math``.
"""

__version__ = "0.1.0"
