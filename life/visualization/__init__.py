"""
Visualization module for the sparse Game of Life.

Provides fixed-window text rendering of a World.
"""

from .text_viz import render_world, render_with

__all__ = [
    'render_world',
    'render_with',
]
