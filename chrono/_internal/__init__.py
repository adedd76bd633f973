"""Internal utilities for Chrono.

This module contains private implementation details:
    - Unit conversion table
    - Fixed format patterns
    - Configuration keys

Note: This module is not part of the public API.
"""
