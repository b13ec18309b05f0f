"""
Session store module.
"""

from .store import SessionStore

__all__ = ["SessionStore"]
