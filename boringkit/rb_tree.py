"""A red-black tree ordered by a three-way comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .sorting import Compare, three_way


@dataclass(eq=False)
class RBNode:
    """A node of an :class:`RBTree` holding one value."""

    value: Any
    red: bool = False
    parent: Optional["RBNode"] = field(default=None, repr=False)
    left: Optional["RBNode"] = field(default=None, repr=False)
    right: Optional["RBNode"] = field(default=None, repr=False)
    _tree: Optional["RBTree"] = field(default=None, repr=False)


class RBTree:
    """Balanced binary search tree keyed by ``compare``.

    ``compare(a, b)`` returns ``1`` when ``a`` sorts after ``b``, ``-1`` when
    it sorts before and ``0`` when both have the same key.
    """

    def __init__(self, compare: Compare = three_way) -> None:
        self.compare = compare
        nil = RBNode(None, red=False)
        nil.parent = nil.left = nil.right = nil
        self._nil = nil
        self._root = nil
        self._first = nil
        self._last = nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not self._nil:
            following = self._succ(node)
            yield node.value
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._last
        while node is not self._nil:
            preceding = self._pred(node)
            yield node.value
            node = preceding

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # -- helpers -----------------------------------------------------------

    def _public(self, node: RBNode) -> Optional[RBNode]:
        return None if node is self._nil else node

    def _check(self, node: Optional[RBNode]) -> None:
        if node is None or node._tree is not self:
            raise ValueError("node does not belong to this tree")

    def _minimum(self, node: RBNode) -> RBNode:
        while node is not self._nil and node.left is not self._nil:
            node = node.left
        return node

    def _maximum(self, node: RBNode) -> RBNode:
        while node is not self._nil and node.right is not self._nil:
            node = node.right
        return node

    def _succ(self, node: RBNode) -> RBNode:
        if node.right is not self._nil:
            return self._minimum(node.right)
        up = node.parent
        while up is not self._nil and node is up.right:
            node, up = up, up.parent
        return up

    def _pred(self, node: RBNode) -> RBNode:
        if node.left is not self._nil:
            return self._maximum(node.left)
        up = node.parent
        while up is not self._nil and node is up.left:
            node, up = up, up.parent
        return up

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    def _transplant(self, old: RBNode, new: RBNode) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent.red:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_left(z.parent.parent)
        self._root.red = False

    def _remove_fixup(self, x: RBNode) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                w = x.parent.right
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.right.red:
                        w.left.red = False
                        w.red = True
                        self._rotate_right(w)
                        w = x.parent.right
                    w.red = x.parent.red
                    x.parent.red = False
                    w.right.red = False
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.left.red:
                        w.right.red = False
                        w.red = True
                        self._rotate_left(w)
                        w = x.parent.left
                    w.red = x.parent.red
                    x.parent.red = False
                    w.left.red = False
                    self._rotate_right(x.parent)
                    x = self._root
        x.red = False

    # -- public interface --------------------------------------------------

    def root(self) -> Optional[RBNode]:
        """Return the root node, or None if the tree is empty."""
        return self._public(self._root)

    def first(self) -> Optional[RBNode]:
        """Return the smallest node, or None if the tree is empty."""
        return self._public(self._first)

    def last(self) -> Optional[RBNode]:
        """Return the largest node, or None if the tree is empty."""
        return self._public(self._last)

    def successor(self, node: RBNode) -> Optional[RBNode]:
        """Return the node following ``node`` in order, or None at the end."""
        self._check(node)
        return self._public(self._succ(node))

    def predecessor(self, node: RBNode) -> Optional[RBNode]:
        """Return the node preceding ``node`` in order, or None at the start."""
        self._check(node)
        return self._public(self._pred(node))

    def search(self, key: Any) -> Optional[RBNode]:
        """Return the node whose value compares equal to ``key``, or None."""
        node = self._root
        while node is not self._nil:
            result = self.compare(node.value, key)
            if result == 0:
                return node
            node = node.left if result == 1 else node.right
        return None

    def set(
        self,
        value: Any,
        setup: Optional[Callable[[Any], Any]] = None,
        conflict_fix: Optional[Callable[[Any, Any], Any]] = None,
    ) -> bool:
        """Store ``value``; return True if it was new, False if it replaced one.

        ``setup(value)`` gives what is stored for a new entry.
        ``conflict_fix(existing, value)`` gives what is kept when an equal key
        is already present; without it the new value replaces the old one.
        """
        parent = self._nil
        node = self._root
        while node is not self._nil:
            parent = node
            result = self.compare(value, node.value)
            if result == -1:
                node = node.left
            elif result == 1:
                node = node.right
            else:
                if conflict_fix is not None:
                    node.value = conflict_fix(node.value, value)
                else:
                    node.value = value
                return False

        stored = setup(value) if setup is not None else value
        z = RBNode(
            stored, red=True, parent=parent, left=self._nil, right=self._nil, _tree=self
        )
        if parent is self._nil:
            self._root = z
        elif self.compare(stored, parent.value) == -1:
            parent.left = z
        else:
            parent.right = z
        self._size += 1
        self._insert_fixup(z)

        if self._pred(z) is self._nil:
            self._first = z
        if self._succ(z) is self._nil:
            self._last = z
        return True

    def remove(self, node: RBNode) -> Any:
        """Remove ``node`` from the tree and return its value."""
        self._check(node)
        nil = self._nil
        if self._first is node:
            self._first = self._succ(node)
        if self._last is node:
            self._last = self._pred(node)

        moved = node
        moved_red = moved.red
        if node.left is nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            moved = self._minimum(node.right)
            moved_red = moved.red
            x = moved.right
            if moved.parent is node:
                x.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.red = node.red
        if not moved_red:
            self._remove_fixup(x)

        nil.parent = nil
        self._size -= 1
        node._tree = None
        node.parent = node.left = node.right = None
        return node.value

    def black_height(self) -> int:
        """Return the count of black nodes on every root-to-leaf path.

        Raises ValueError if the red-black or ordering invariants are broken.
        """
        nil = self._nil
        if self._root.red:
            raise ValueError("root is red")

        def walk(node: RBNode) -> int:
            if node is nil:
                return 0
            for child in (node.left, node.right):
                if child is not nil:
                    if child.parent is not node:
                        raise ValueError("broken parent link")
                    if node.red and child.red:
                        raise ValueError("red node has a red child")
            if node.left is not nil and self.compare(node.left.value, node.value) != -1:
                raise ValueError("left child does not sort before its parent")
            if node.right is not nil and self.compare(node.right.value, node.value) != 1:
                raise ValueError("right child does not sort after its parent")
            left = walk(node.left)
            right = walk(node.right)
            if left != right:
                raise ValueError("unequal black heights")
            return left + (0 if node.red else 1)

        return walk(self._root)