"""Diagnostics package.

- diagnostics.validate_reference: optional (requires ephemeris + diagnostics extras)
"""

__all__ = ["validate_reference"]
