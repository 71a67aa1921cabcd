"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (WGS 84 bounds, unit conversions, limits)
- exceptions: Custom exception hierarchy
"""
