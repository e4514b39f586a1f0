"""Cave maps from cellular automata, marching-squares outlines, and an animated viewer."""

__version__ = "0.1.0"