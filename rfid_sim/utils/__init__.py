# rfid_sim/utils/__init__.py
"""Utility modules for the simulation."""

from .math_utils import *
from .errors import *

__all__ = ['math_utils', 'errors']
