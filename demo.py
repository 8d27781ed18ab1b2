import sys

from realty import Listing, Realty
from realty.logging_config import setup_logging
from realty.models.sortedcontainers import BinarySearchTree
from realty.models.sortedcontainers.node import leftmost, successor

logger = setup_logging()


def log_tree(tree: BinarySearchTree) -> None:
    """Log each listing in order with its parent, or "None" at the root."""
    node = leftmost(tree.root) if tree.root else None
    while node is not None:
        parent = node.parent.entry if node.parent else None
        logger.info("%s parent=%s", node.entry, parent)
        node = successor(node)


def main(argv: list[str]) -> int:
    tree = BinarySearchTree(check_invariants=True)
    realty = Realty(tree)

    listings = [
        Listing(50, "a"),
        Listing(12, "b"),
        Listing(25, "c"),
        Listing(75, "d"),
        Listing(37, "e"),
        Listing(43, "f"),
    ]
    for line in argv:
        listings.append(Listing.from_string(line))

    for listing in listings:
        realty.add(listing)
    logger.info("size: %d root: %s", len(realty), tree.root.entry)
    log_tree(tree)

    realty.remove(listings[4])
    logger.info("after remove %s", listings[4])
    log_tree(tree)

    it = realty.iterator()
    for listing in it:
        if listing == listings[5]:
            it.remove()
    logger.info("after iterator remove %s", listings[5])
    log_tree(tree)

    logger.info("size: %d version: %d", len(realty), tree.version)
    logger.debug("records: %s", realty.to_strings())
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main(sys.argv[1:]))
    except ValueError as e:
        logger.error("Bad listing: %s", e)
        sys.exit(2)
