"""
Terminal user interfaces.
"""
