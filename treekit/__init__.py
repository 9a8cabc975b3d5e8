"""Binary trees with parent links: building, walking, measuring, rotating, drawing and searching."""

__version__ = "0.1.0"
__all__ = ["bst", "metrics", "printing", "rotation", "traversal", "tree"]