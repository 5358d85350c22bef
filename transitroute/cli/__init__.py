"""
CLI interface for transitroute
"""

from .app import app

__all__ = ["app"]
