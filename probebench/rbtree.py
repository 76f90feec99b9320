"""A red-black tree keyed by strings, each node carrying a stock count."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A tree node: a key, its stock, a colour and links to its neighbours."""

    __slots__ = ("key", "stock", "red", "left", "right", "parent")

    def __init__(self, key: str, stock: int = 0) -> None:
        self.key = key
        self.stock = stock
        self.red = True
        self.left: Node | None = None
        self.right: Node | None = None
        self.parent: Node | None = None

    def __repr__(self) -> str:
        colour = "red" if self.red else "black"
        return f"Node(key={self.key!r}, stock={self.stock}, {colour})"


class RedBlackTree:
    """A balanced binary search tree that holds each key at most once."""

    def __init__(self) -> None:
        nil = Node("")
        nil.red = False
        nil.left = nil.right = nil.parent = nil
        self._nil = nil
        self._root = nil
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def __iter__(self) -> Iterator[str]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def is_empty(self) -> bool:
        return self._count == 0

    def search(self, key: str) -> Node | None:
        """Return the node holding ``key``, or None if it is absent."""
        node = self._root
        while node is not self._nil:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: str, stock: int = 0) -> bool:
        """Add ``key``; return False and change nothing if it is already present."""
        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return False

        node = Node(key, stock)
        node.left = node.right = self._nil
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

        self._count += 1
        self._fix_insert(node)
        return True

    def delete(self, key: str) -> bool:
        """Remove ``key``; return False if it was not present."""
        z = self.search(key)
        if z is None:
            return False

        y = z
        y_was_red = y.red
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            y_was_red = y.red
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.red = z.red

        self._count -= 1
        if not y_was_red:
            self._fix_delete(x)
        return True

    def _left_rotate(self, x: Node) -> None:
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

    def _right_rotate(self, y: Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    def _fix_insert(self, k: Node) -> None:
        while k.parent.red:
            grandparent = k.parent.parent
            if k.parent is grandparent.right:
                uncle = grandparent.left
                if uncle.red:
                    uncle.red = False
                    k.parent.red = False
                    grandparent.red = True
                    k = grandparent
                else:
                    if k is k.parent.left:
                        k = k.parent
                        self._right_rotate(k)
                    k.parent.red = False
                    k.parent.parent.red = True
                    self._left_rotate(k.parent.parent)
            else:
                uncle = grandparent.right
                if uncle.red:
                    uncle.red = False
                    k.parent.red = False
                    grandparent.red = True
                    k = grandparent
                else:
                    if k is k.parent.right:
                        k = k.parent
                        self._left_rotate(k)
                    k.parent.red = False
                    k.parent.parent.red = True
                    self._right_rotate(k.parent.parent)
            if k is self._root:
                break
        self._root.red = False

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _minimum(self, node: Node) -> Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _fix_delete(self, x: Node) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                s = x.parent.right
                if s.red:
                    s.red = False
                    x.parent.red = True
                    self._left_rotate(x.parent)
                    s = x.parent.right
                if not s.left.red and not s.right.red:
                    s.red = True
                    x = x.parent
                else:
                    if not s.right.red:
                        s.left.red = False
                        s.red = True
                        self._right_rotate(s)
                        s = x.parent.right
                    s.red = x.parent.red
                    x.parent.red = False
                    s.right.red = False
                    self._left_rotate(x.parent)
                    x = self._root
            else:
                s = x.parent.left
                if s.red:
                    s.red = False
                    x.parent.red = True
                    self._right_rotate(x.parent)
                    s = x.parent.left
                if not s.left.red and not s.right.red:
                    s.red = True
                    x = x.parent
                else:
                    if not s.left.red:
                        s.right.red = False
                        s.red = True
                        self._left_rotate(s)
                        s = x.parent.left
                    s.red = x.parent.red
                    x.parent.red = False
                    s.left.red = False
                    self._right_rotate(x.parent)
                    x = self._root
        x.red = False