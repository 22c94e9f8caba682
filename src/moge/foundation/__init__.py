"""
Foundation layer: solution model, problem contract and exceptions.
"""

from .solution import Population, Solution

__all__ = ["Population", "Solution"]
