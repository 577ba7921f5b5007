"""Deep copies of object graphs with cycle handling and custom copy hooks."""

__version__ = "0.1.0"
__all__ = ["copier"]