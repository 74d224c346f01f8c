import logging
import operator
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


def _check_key(value: int) -> int:
    if isinstance(value, bool):
        raise TypeError("AVLTree keys must be integers, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"AVLTree keys must be integers, got {type(value).__name__}") from None


class AVLTree:
    # Not thread-safe. Recursion depth is bounded by the height, < 1.44 * log2(n + 2).
    class Node:
        __slots__ = ('value', 'left', 'right', 'height')

        def __init__(self, value: int) -> None:
            self.value: int = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    def _create_node(self, value: int) -> Node:
        self._size += 1
        return self.Node(value)

    def _release_node(self, node: Node) -> None:
        node.left = None
        node.right = None
        self._size -= 1

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _balance_factor(self, node: Node) -> int:
        return self._get_height(node.right) - self._get_height(node.left)

    def _rotate_right(self, n: Node) -> Node:
        center = n.left
        assert center is not None
        logger.debug("rotate right at %d", n.value)

        n.left = center.right
        center.right = n

        self._update_height(n)
        self._update_height(center)

        return center

    def _rotate_left(self, n: Node) -> Node:
        center = n.right
        assert center is not None
        logger.debug("rotate left at %d", n.value)

        n.right = center.left
        center.left = n

        self._update_height(n)
        self._update_height(center)

        return center

    def _rebalance(self, node: Node) -> Node:
        balance = self._balance_factor(node)

        if balance < -1:
            assert node.left is not None
            # Left child leaning right needs a double rotation.
            if self._balance_factor(node.left) > 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance > 1:
            assert node.right is not None
            if self._balance_factor(node.right) < 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        self._update_height(node)
        return node

    def _insert(self, node: Optional[Node], value: int) -> Node:
        if node is None:
            return self._create_node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)

        return self._rebalance(node)

    def insert(self, value: int) -> None:
        value = _check_key(value)
        self._root = self._insert(self._root, value)

    def _subtree_min_value(self, node: Node) -> int:
        while node.left is not None:
            node = node.left
        return node.value

    def _remove(self, node: Optional[Node], value: int) -> Optional[Node]:
        if node is None:
            logger.debug("remove: %d not found", value)
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
            return self._rebalance(node)
        if value > node.value:
            node.right = self._remove(node.right, value)
            return self._rebalance(node)

        if node.left is not None and node.right is not None:
            # Take over the in-order successor's value, then drop the successor.
            node.value = self._subtree_min_value(node.right)
            node.right = self._remove(node.right, node.value)
            return self._rebalance(node)

        # A single child was already balanced under node.
        child = node.left if node.left is not None else node.right
        self._release_node(node)
        return child

    def remove(self, value: int) -> None:
        value = _check_key(value)
        self._root = self._remove(self._root, value)

    def contains(self, value: int) -> bool:
        value = _check_key(value)
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            if value < node.value:
                node = node.left
            else:
                node = node.right
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        released = 0
        stack: List[AVLTree.Node] = []
        node = self._root
        self._root = None
        last: Optional[AVLTree.Node] = None
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
                continue
            stack.pop()
            self._release_node(top)
            released += 1
            last = top
        logger.debug("clear: released %d nodes", released)

    def height(self) -> int:
        return self._get_height(self._root)

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self._balance_factor(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def dump(self) -> str:
        if self._root is None:
            return "EMPTY\n"
        lines: List[str] = []
        stack = [(self._root, 0)]
        while stack:
            node, level = stack.pop()
            lines.append("  " * level + str(node.value))
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))
        return "\n".join(lines) + "\n"

    def print(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        out.write(self.dump())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool):
            return False
        try:
            key = operator.index(value)
        except TypeError:
            return False
        return self.contains(key)

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"

    __str__ = __repr__


def create() -> AVLTree:
    return AVLTree()


def destroy(tree: AVLTree) -> None:
    assert isinstance(tree, AVLTree), "destroy() needs an AVLTree"
    tree.clear()


def is_empty(tree: AVLTree) -> bool:
    assert isinstance(tree, AVLTree), "is_empty() needs an AVLTree"
    return tree.is_empty()


def insert(value: int, tree: AVLTree) -> None:
    assert isinstance(tree, AVLTree), "insert() needs an AVLTree"
    tree.insert(value)


def remove(value: int, tree: AVLTree) -> None:
    assert isinstance(tree, AVLTree), "remove() needs an AVLTree"
    tree.remove(value)


def contains(value: int, tree: AVLTree) -> bool:
    assert isinstance(tree, AVLTree), "contains() needs an AVLTree"
    return tree.contains(value)


def print_tree(tree: AVLTree, file: Optional[TextIO] = None) -> None:
    assert isinstance(tree, AVLTree), "print_tree() needs an AVLTree"
    tree.print(file)
