"""A singly linked list with head and tail pointers."""

from typing import Any, Iterable, Iterator, Optional

__all__ = ["LinkedList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting pushes and pops at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def show(self) -> None:
        """Print the elements, each followed by a space, then a newline."""
        print("".join(f"{value} " for value in self))

    def push_front(self, value: Any) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element; do nothing on an empty list."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element; do nothing on an empty list."""
        if self._head is None:
            return None
        tail = self._tail
        if self._head is tail:
            self._head = self._tail = None
        else:
            current = self._head
            while current.next is not tail:
                current = current.next
            current.next = None
            self._tail = current
        self._size -= 1
        return tail.value

    def middle(self) -> Any:
        """Return the middle element (the second of the two for even lengths).

        Raises ``IndexError`` on an empty list.
        """
        if self._head is None:
            raise IndexError("cannot get middle element from empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value