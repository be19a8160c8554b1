"""CLI commands for tweakui."""

from .convert import convert
from .hsv import hsv
from .inspect import inspect

__all__ = ["convert", "hsv", "inspect"]
