"""
Utilities Package
"""

from .rw_lock import ReadWriteLock

__all__ = ['ReadWriteLock']
