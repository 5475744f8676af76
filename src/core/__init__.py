"""
Core arithmetic primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of the command line and of any I/O.
"""
