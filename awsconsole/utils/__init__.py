"""
Utility functions for opening the console.
"""

from .browser import browser_command, open_browser

__all__ = [
    'browser_command',
    'open_browser',
]
