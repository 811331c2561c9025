# coding=utf-8
"""
GiftRadar - Gifting Article Analytics

Usage:
  python -m giftradar categories     # Module execution
  giftradar rank --sort date         # Execution after installation
"""

from giftradar.context import AppContext

__version__ = "1.0.0"
__all__ = ["AppContext", "__version__"]
