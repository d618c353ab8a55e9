"""Integer-key containers (hash table, weight-balanced tree, red-black tree) and a timing benchmark."""

__version__ = "0.1.0"
__all__ = ["hashtable", "wbtree", "rbtree", "benchmark"]