"""ALFA demo paper-trading backend"""

__version__ = "0.1.0"
