"""Utility modules for memalloc."""

from . import formatter

__all__ = ['formatter']
