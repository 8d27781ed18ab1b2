"""
Tree node and in-order navigation helpers.
"""

from dataclasses import dataclass

from realty.models.listing import Listing


@dataclass(eq=False)
class Node:
    """
    Node in the binary search tree.

    A node owns its children; ``parent`` is only a back-reference used to
    walk upwards and always agrees with the parent's child link.
    """

    entry: Listing
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = None

    def detach(self) -> None:
        """Clear all links of a node that has left the tree."""
        self.left = None
        self.right = None
        self.parent = None


def leftmost(node: Node) -> Node:
    """Return the node with the smallest price in the subtree."""
    while node.left is not None:
        node = node.left
    return node


def successor(node: Node) -> Node | None:
    """
    Return the next node in in-order traversal, or None after the last.

    Uses parent links, so no descent from the root is needed.
    """
    if node.right is not None:
        return leftmost(node.right)

    parent = node.parent
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.parent
    return parent
