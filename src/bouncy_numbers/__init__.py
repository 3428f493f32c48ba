"""
bouncy_numbers: least integer where bouncy numbers reach a target proportion

A number is bouncy when its digits, read left to right, are neither
non-decreasing nor non-increasing. Below 1000 there are 525 of them; the
first integer at which the bouncy proportion reaches 99% is 1587000.

Reference: Project Euler, Problem 112
"""

from . import config

__version__ = "0.1.0"
__all__ = ["config"]
