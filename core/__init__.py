"""
Core package - shared utilities with no web or persistence dependencies.
"""
