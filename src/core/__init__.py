"""
Core grid containers, numerical checks, and snapshot contracts.

This module contains the foundational building blocks that are independent
of any presentation or entry point.
"""
