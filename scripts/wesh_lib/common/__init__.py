"""
wesh_lib.common - Shared utilities for WeSh

This module provides:
- colors: ANSI color codes and logging functions
"""

from .colors import Colors, use_color, paint, log, warn, error, info

__all__ = [
    'Colors', 'use_color', 'paint', 'log', 'warn', 'error', 'info',
]
