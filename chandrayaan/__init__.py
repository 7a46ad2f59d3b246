"""
Chandrayaan craft navigator.
Moves a single craft around an integer 3-D grid from f/b/l/r/u/d commands.
"""

from chandrayaan.core import Command, Coordinate, Craft, Facing

__version__ = "0.1.0"

__all__ = ['Command', 'Coordinate', 'Craft', 'Facing']
