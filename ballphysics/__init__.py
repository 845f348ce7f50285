"""A small 2D physics sandbox of balls and rectangles, with a pygame demo."""

__version__ = "0.1.0"