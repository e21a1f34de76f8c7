"""Frontend interfaces for the terminal Game of Life."""

from .render import Palette, TerminalRenderer
from .cli import SimulationConfig, main

__all__ = ["Palette", "TerminalRenderer", "SimulationConfig", "main"]
