"""
Core decimal float engine: value type, codecs, arithmetic and bridges.

This module contains pure building blocks with no I/O and no shared
mutable state; every operation is safe to call from any thread.
"""
