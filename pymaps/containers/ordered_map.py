from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from pymaps.containers.absent import ABSENT, AbsentType
from pymaps.containers.errors import NullKeyError


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...  # noqa: ANN401


KeyType = TypeVar("KeyType", bound=Comparable)
ValueType = TypeVar("ValueType")


@dataclass(slots=True, eq=False)
class _Node(Generic[KeyType, ValueType]):
    key: KeyType
    value: ValueType
    left: _Node[KeyType, ValueType] | None = None
    right: _Node[KeyType, ValueType] | None = None


class OrderedMap(Generic[KeyType, ValueType]):
    """Unbalanced binary search tree keyed by ``<`` comparison.

    The shape depends only on insertion order, so sorted input degrades into a
    linked list. Every walk below is iterative, so tree depth is not bounded by
    the recursion limit.
    """

    def __init__(self) -> None:
        self._root: _Node[KeyType, ValueType] | None = None
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: KeyType) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[KeyType]:
        return self.iterate()

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{items}}})"

    def _find(self, key: KeyType) -> _Node[KeyType, ValueType] | None:
        if key is None:
            raise NullKeyError()
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def get(self, key: KeyType) -> ValueType | AbsentType:
        node = self._find(key)
        if node is None:
            return ABSENT
        return node.value

    def put(self, key: KeyType, value: ValueType) -> None:
        if key is None:
            raise NullKeyError()

        parent: _Node[KeyType, ValueType] | None = None
        node = self._root
        while node is not None:
            parent = node
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                node.value = value
                return

        new_node = _Node(key, value)
        if parent is None:
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

    def _replace_child(
        self,
        parent: _Node[KeyType, ValueType] | None,
        node: _Node[KeyType, ValueType],
        child: _Node[KeyType, ValueType] | None,
    ) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, key: KeyType) -> None:
        if key is None:
            raise NullKeyError()

        parent: _Node[KeyType, ValueType] | None = None
        node = self._root
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif node.key < key:
                parent, node = node, node.right
            else:
                break

        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.key = successor.key
            node.value = successor.value
            # the successor never has a left child
            self._replace_child(successor_parent, successor, successor.right)
        else:
            self._replace_child(parent, node, node.left if node.left is not None else node.right)

        self._size -= 1

    def _iterate_nodes(self) -> Iterator[_Node[KeyType, ValueType]]:
        stack: list[_Node[KeyType, ValueType]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def iterate(self) -> Iterator[KeyType]:
        """Yield keys in ascending order, starting from the current root.

        Mutating the map while a traversal is in progress gives undefined
        results.
        """
        for node in self._iterate_nodes():
            yield node.key

    def items(self) -> Iterator[tuple[KeyType, ValueType]]:
        for node in self._iterate_nodes():
            yield node.key, node.value

    @property
    def height(self) -> int:
        if self._root is None:
            return 0

        height = 0
        level = [self._root]
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height
