"""Maze Generator - randomized spanning-tree mazes and their longest paths.

This package builds rectangular grid mazes with one of five randomized
algorithms and finds each maze's solution as the diameter of its tree.
"""

__version__ = "1.0.0"
__author__ = "Maze Generator"
