"""Huffman archiver: compress and restore files and folder trees as .GOOOOOOL archives."""

__version__ = "0.1.0"
__all__ = ["__version__"]