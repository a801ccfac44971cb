"""Print modified parse trees: traversal, node ids, editors and rendering."""

__version__ = "0.3.0"
__all__ = ["traversal", "node_id", "editor", "editors", "render"]