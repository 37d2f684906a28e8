"""
Core package - shared helpers used across the service layers.
"""
