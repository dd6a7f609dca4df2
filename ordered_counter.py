import logging
from typing import Any, Callable, Iterator, List, Optional

logger = logging.getLogger(__name__)


def default_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the keys' own < and > operators."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class Entry:
    """
    A stored (key, count) pair: one distinct word and how often it was seen.

    Entries order by key only; two entries whose keys are neither less nor
    greater than each other are considered the same slot in the tree.

    Attributes:
        key (str): The case-normalized word. Not reassigned after creation.
        count (int): The number of times the word was inserted.
    """
    __slots__ = ('_key', 'count')

    def __init__(self, key: Any, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be a non-negative integer.")
        self._key = key
        self.count: int = count

    @property
    def key(self) -> Any:
        return self._key

    def increment(self, step: int = 1) -> None:
        """Adds `step` to the count."""
        self.count += step

    def __lt__(self, other: 'Entry') -> bool:
        return self._key < other._key

    def __gt__(self, other: 'Entry') -> bool:
        return self._key > other._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __iter__(self) -> Iterator[Any]:
        # allows `word, count = entry`
        yield self._key
        yield self.count

    def __repr__(self) -> str:
        return f"Entry({self._key!r}, {self.count})"


class _Node:
    """A tree node. Each node is owned by exactly one parent slot (or the root)."""
    __slots__ = ('entry', 'left', 'right')

    def __init__(self, entry: Entry) -> None:
        self.entry: Entry = entry
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class OrderedCounter:
    """
    An ordered word -> count map backed by an unbalanced binary search tree.

    Keys are placed with a user-supplied three-way comparator; repeated
    insertions of an existing key apply the increment operation to its entry
    instead of adding a node. No rebalancing is done, so sorted input builds
    a linear chain. All walks are iterative, so such a chain never runs into
    the interpreter's recursion limit.
    """

    def __init__(self,
                 compare: Callable[[Any, Any], int] = default_compare,
                 increment: Optional[Callable[[Entry], None]] = None) -> None:
        """
        Initializes an empty counter.

        Args:
            compare (Callable[[Any, Any], int]): Returns a negative number,
                zero, or a positive number when the first key is less than,
                equal to, or greater than the second. Must be a strict total
                order on the keys that will be inserted.
            increment (Optional[Callable[[Entry], None]]): Applied to an entry
                when its key is inserted again. Defaults to `Entry.increment`.
        """
        self._compare = compare
        self._increment = increment if increment is not None else Entry.increment
        self._root: Optional[_Node] = None
        self._size: int = 0

    def insert_or_increment(self, key: Any) -> Entry:
        """
        Inserts `key` with a count of 1, or increments its count if present.

        Args:
            key: The key to insert. Callers normalize case beforehand.

        Returns:
            Entry: The stored entry for `key`.
        """
        if self._root is None:
            self._root = _Node(Entry(key))
            self._size += 1
            return self._root.entry

        node = self._root
        while True:
            order = self._compare(key, node.entry.key)
            if order > 0:
                if node.right is None:
                    node.right = _Node(Entry(key))
                    self._size += 1
                    return node.right.entry
                node = node.right
            elif order < 0:
                if node.left is None:
                    node.left = _Node(Entry(key))
                    self._size += 1
                    return node.left.entry
                node = node.left
            else:
                self._increment(node.entry)
                return node.entry

    def remove(self, key: Any) -> bool:
        """
        Removes `key` from the tree. Removing a missing key does nothing.

        A node with two children is replaced by its in-order successor (the
        leftmost node of its right subtree); both of the removed node's
        subtrees are reattached under the successor.

        Returns:
            bool: True if a node was removed, False if `key` was absent.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            order = self._compare(key, node.entry.key)
            if order == 0:
                break
            parent = node
            node = node.left if order < 0 else node.right

        if node is None:
            return False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                # lift the successor out, keeping its right subtree in place
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        node.left = node.right = None
        self._size -= 1
        logger.debug("Removed %r; %d keys remain", key, self._size)
        return True

    def find(self, key: Any) -> Optional[Entry]:
        """
        Looks up the entry for `key`.

        Returns:
            Optional[Entry]: The matching entry, or None if `key` is absent.
        """
        node = self._root
        while node is not None:
            order = self._compare(key, node.entry.key)
            if order == 0:
                return node.entry
            node = node.left if order < 0 else node.right
        return None

    def exists(self, key: Any) -> bool:
        return self.find(key) is not None

    def to_sorted_sequence(self) -> List[Entry]:
        """
        Flattens the tree into a list of entries in ascending key order.

        Returns:
            List[Entry]: Exactly `size()` entries; empty for an empty counter.
        """
        result: List[Optional[Entry]] = [None] * self._size
        cursor = 0
        for entry in self:
            result[cursor] = entry
            cursor += 1
        return result  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Entry]:
        """In-order walk using an explicit stack. Each call starts over."""
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.entry
            node = node.right

    def clear(self) -> None:
        """Unlinks every node, children before parents, then resets the counter."""
        if self._root is not None:
            stack: List[_Node] = [self._root]
            # post-order: a node is popped only once both children are unlinked
            while stack:
                node = stack[-1]
                if node.left is not None:
                    stack.append(node.left)
                    node.left = None
                elif node.right is not None:
                    stack.append(node.right)
                    node.right = None
                else:
                    stack.pop()
        self._root = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.exists(key)
