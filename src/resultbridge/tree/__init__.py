"""Loading result trees from YAML/JSON documents."""

from .loader import Tree, load_tree, load_tree_document
from .schema import TREE_SCHEMA

__all__ = [
    "TREE_SCHEMA",
    "Tree",
    "load_tree",
    "load_tree_document",
]
