"""
Rendering Module

Maps engine state to grid cells and draws them onto a pygame surface.
"""

from .renderer import Renderer

__all__ = ['Renderer']
