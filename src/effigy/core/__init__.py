"""
Core package.

Shared types, errors and the advisory wire codec.
"""
