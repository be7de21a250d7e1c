"""A CHIP-8 interpreter with a pygame window, renderer and input handling."""

__version__ = "0.1.0"
__all__ = ["app", "chip", "input", "render"]