"""
CardFilter command-line interface.
"""

from cardfilter import __version__

__all__ = ["__version__"]
