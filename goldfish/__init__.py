"""Core data types of a small game engine: properties, vector math, colours, GUI, input and asset records."""

__version__ = "0.1.0"
__all__ = ["assets", "compat", "graphic", "gui", "input", "prop", "vecmath", "version"]