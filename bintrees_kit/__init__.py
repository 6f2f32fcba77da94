"""Build, measure, traverse and draw binary trees of integers."""

__version__ = "0.1.0"
__all__ = ["demo", "metrics", "node", "printing", "traversal"]