"""Diagnostics package.

Optional tools that need the diagnostics extras:
  pip install "sunmoon[diagnostics]"
"""

__all__ = ["day_curve"]
