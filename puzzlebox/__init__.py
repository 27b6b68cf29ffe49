"""Solvers for a collection of small puzzles, with a small command line front end."""

__version__ = "0.1.0"