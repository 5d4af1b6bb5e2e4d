"""
Utility helpers.
"""

from gamevault.shared.utils.security import SecurityUtils

__all__ = ["SecurityUtils"]
