"""
Pure algorithms with no domain-specific dependencies.

Modules:
    backtracking  - Array-based backtracking over integer levels
"""
