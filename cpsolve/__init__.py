"""Solvers for five competitive-programming problems and the helpers they use."""

__version__ = "0.1.0"