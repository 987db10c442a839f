"""Linked binary trees: nodes, rendering, rotations, BSTs, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "heap", "node", "printing", "structure"]