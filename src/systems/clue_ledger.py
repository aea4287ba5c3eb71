"""
Clue Ledger
Ordered, duplicate-free record of every distinct clue the player has found.
Backed by an unbalanced binary search tree keyed on the clue text.
"""

from typing import Iterator, Optional


class ClueNode:
    __slots__ = ("text", "left", "right")

    def __init__(self, text: str):
        self.text = text
        self.left: Optional["ClueNode"] = None
        self.right: Optional["ClueNode"] = None


class ClueLedger:
    """
    Binary search tree of clue texts.

    Inserting a text that is already present changes nothing, so the first
    discovery is the copy that is kept. Iterating the ledger always yields
    the clues in ascending lexicographic order.
    """

    def __init__(self):
        self.root: Optional[ClueNode] = None
        self._size = 0

    def insert(self, text: Optional[str]) -> bool:
        """
        Add a clue. Returns True if a new node was created, False for
        empty text or a duplicate.
        """
        if not text:
            return False

        if self.root is None:
            self.root = ClueNode(text)
            self._size += 1
            return True

        # Iterative descent: clue order is not controlled, depth is unbounded
        node = self.root
        while True:
            if text == node.text:
                return False
            if text < node.text:
                if node.left is None:
                    node.left = ClueNode(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueNode(text)
                    break
                node = node.right

        self._size += 1
        return True

    def in_order(self) -> Iterator[str]:
        """Yield the clue texts in ascending order."""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __contains__(self, text) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None
