"""Software graphics for low-resolution games: colours, images, blitting, drawing, decorators and sprites."""

__version__ = "0.1.0"
__all__ = ["colour", "palette", "image", "blend", "filler", "draw", "decorators", "composite", "sprite"]