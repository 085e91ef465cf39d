"""
Display System Package

Renderer interface, board geometry and a recording renderer. The pygame
renderer lives in display_system.pygame_renderer and is imported directly.
"""

from .interfaces import IRenderer, check_fraction
from .grid_layout import GridLayout
from .recording_renderer import RecordingRenderer

__all__ = [
    "IRenderer",
    "check_fraction",
    "GridLayout",
    "RecordingRenderer",
]
