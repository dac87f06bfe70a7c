"""
Games module for Starfall.
"""

from . import shooter

__all__ = [
    'shooter',
]
