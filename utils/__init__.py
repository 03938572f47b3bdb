"""
Helpers: rendering, loading and pure algorithms.
"""
