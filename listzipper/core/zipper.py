from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar


T = TypeVar("T")
U = TypeVar("U")

# Linked side of a zipper: ``(element, rest)`` pairs ending in ``None``, nearest
# element first. Steps share the untouched tail with the zipper they came from.
Side = Optional[Tuple[Any, Any]]


def _link(nearest_last: Iterable[T]) -> Side:
    cell: Side = None
    for item in nearest_last:
        cell = (item, cell)
    return cell


def _walk(cell: Side) -> Iterator[Any]:
    while cell is not None:
        item, cell = cell
        yield item


def _same_side(a: Side, b: Side) -> bool:
    while a is not None and b is not None:
        if a is b:
            return True
        if a[0] != b[0]:
            return False
        a, b = a[1], b[1]
    return a is b


@dataclass(frozen=True, eq=False, repr=False)
class Zipper(Generic[T]):
    """Non-empty immutable sequence with one focused element.

    ``prev()`` holds the elements left of the focus with the nearest one last,
    ``next()`` holds the elements right of the focus with the nearest one first,
    so the logical sequence is always ``prev() + (focus,) + next()``.

    Both sides are stored nearest-first as linked cells, so moving the focus by
    one position is a constant-time step that shares the rest of each side.
    """

    _left: Side
    focus: T
    _right: Side
    _nleft: int
    _nright: int

    def __init__(self, before: Iterable[T], focus: T, after: Iterable[T] = ()) -> None:
        left = list(before)
        right = list(after)
        right.reverse()
        self._set(_link(left), focus, _link(right), len(left), len(right))

    def _set(self, left: Side, focus: T, right: Side, nleft: int, nright: int) -> None:
        object.__setattr__(self, "_left", left)
        object.__setattr__(self, "focus", focus)
        object.__setattr__(self, "_right", right)
        object.__setattr__(self, "_nleft", nleft)
        object.__setattr__(self, "_nright", nright)

    @classmethod
    def _from_sides(cls, left: Side, focus: U, right: Side, nleft: int, nright: int) -> "Zipper[U]":
        z = cls.__new__(cls)
        z._set(left, focus, right, nleft, nright)
        return z

    @classmethod
    def from_list(cls, values: Sequence[T], index: int = 0) -> "Zipper[T]":
        """Split ``values`` at ``index`` (negative counts from the end)."""
        items = list(values)
        if not items:
            raise ValueError("cannot build a zipper from an empty sequence")
        size = len(items)
        pos = index + size if index < 0 else index
        if not 0 <= pos < size:
            raise ValueError(f"focus index {index} out of range for {size} elements")
        return cls(items[:pos], items[pos], items[pos + 1:])

    @property
    def before(self) -> Tuple[T, ...]:
        return self.prev()

    @property
    def after(self) -> Tuple[T, ...]:
        return self.next()

    def __len__(self) -> int:
        return self._nleft + 1 + self._nright

    def __iter__(self) -> Iterator[T]:
        yield from self.prev()
        yield self.focus
        yield from _walk(self._right)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Zipper):
            return NotImplemented
        return (
            self._nleft == other._nleft
            and self._nright == other._nright
            and self.focus == other.focus
            and _same_side(self._left, other._left)
            and _same_side(self._right, other._right)
        )

    def __hash__(self) -> int:
        return hash((self.prev(), self.focus, self.next()))

    def __repr__(self) -> str:
        return f"Zipper({list(self.prev())!r}, {self.focus!r}, {list(self.next())!r})"

    # Navigation

    def prev(self) -> Tuple[T, ...]:
        items = list(_walk(self._left))
        items.reverse()
        return tuple(items)

    def next(self) -> Tuple[T, ...]:
        return tuple(_walk(self._right))

    def lefts(self, limit: Optional[int] = None) -> Iterator[T]:
        """Elements left of the focus, nearest first, at most ``limit`` of them."""
        return islice(_walk(self._left), limit)

    def rights(self, limit: Optional[int] = None) -> Iterator[T]:
        """Elements right of the focus, nearest first, at most ``limit`` of them."""
        return islice(_walk(self._right), limit)

    def left_may(self) -> Optional["Zipper[T]"]:
        if self._left is None:
            return None
        item, rest = self._left
        return Zipper._from_sides(
            rest, item, (self.focus, self._right), self._nleft - 1, self._nright + 1
        )

    def right_may(self) -> Optional["Zipper[T]"]:
        if self._right is None:
            return None
        item, rest = self._right
        return Zipper._from_sides(
            (self.focus, self._left), item, rest, self._nleft + 1, self._nright - 1
        )

    def left(self) -> "Zipper[T]":
        moved = self.left_may()
        return self if moved is None else moved

    def right(self) -> "Zipper[T]":
        moved = self.right_may()
        return self if moved is None else moved

    # Functor / comonad

    def map(self, func: Callable[[T], U]) -> "Zipper[U]":
        left = [func(x) for x in _walk(self._left)]
        right = [func(x) for x in _walk(self._right)]
        left.reverse()
        right.reverse()
        return Zipper._from_sides(
            _link(left), func(self.focus), _link(right), self._nleft, self._nright
        )

    def extract(self) -> T:
        return self.focus

    def duplicate(self) -> "Zipper[Zipper[T]]":
        """Zipper of every focus position, centered on ``self``.

        Each neighbour is one constant-time step from the previous view, so the
        whole walk is linear in the length.
        """
        lefts: List[Zipper[T]] = []
        cursor = self.left_may()
        while cursor is not None:
            lefts.append(cursor)
            cursor = cursor.left_may()

        rights: List[Zipper[T]] = []
        cursor = self.right_may()
        while cursor is not None:
            rights.append(cursor)
            cursor = cursor.right_may()

        lefts.reverse()
        rights.reverse()
        return Zipper._from_sides(_link(lefts), self, _link(rights), len(lefts), len(rights))

    def extend(self, func: Callable[["Zipper[T]"], U]) -> "Zipper[U]":
        return self.duplicate().map(func)

    # Structural helpers

    def to_list(self) -> List[T]:
        return list(self)

    def append(self, xs: Iterable[T]) -> "Zipper[T]":
        return Zipper(self.prev(), self.focus, self.next() + tuple(xs))

    def prepend(self, xs: Iterable[T]) -> "Zipper[T]":
        extra = list(xs)
        cell = self._left
        if extra:
            # The far end of the left side is rebuilt; nothing else changes.
            cell = _link(extra + list(self.prev()))
        return Zipper._from_sides(cell, self.focus, self._right, self._nleft + len(extra), self._nright)
