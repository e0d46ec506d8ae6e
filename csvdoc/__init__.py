"""Labelled CSV documents with typed access to columns, rows and cells."""

__version__ = "0.1.0"
__all__ = ["converter", "document", "params", "parser"]