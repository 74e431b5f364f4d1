"""
Core arithmetic primitives and value types.

This module contains the arbitrary-precision integer engine, independent
of any I/O or serialization layer.
"""
