from __future__ import annotations

from collections.abc import Sequence
from operator import index as op_index
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import SupportsIndex

T = TypeVar("T")


class SparseIndexedListError(Exception):
    """Base class for errors raised by SparseIndexedList."""


class InvalidLengthError(SparseIndexedListError, ValueError):
    """Raised when a SparseIndexedList is created with a non-positive size."""


class IndexOutOfBoundsError(SparseIndexedListError, IndexError):
    """Raised when an index falls outside ``[0, length)``."""


class NoMoreElementsError(SparseIndexedListError, StopIteration):
    """Raised when an iterator is advanced past its last element."""


class SparseIndexedList(Sequence[T], Generic[T]):
    """A fixed-length list where only positions differing from a default are stored.

    Every slot starts out holding ``default``. Assigning a value stores an
    override for that index; assigning the default back removes it again, so
    storage only grows with the number of non-default positions.
    """

    _overrides: dict[int, T]
    _size: int
    _default: T

    def __init__(self, size: SupportsIndex, default: T = None) -> None:  # type: ignore[assignment]
        """Initialize a SparseIndexedList of ``size`` slots, all set to ``default``.

        Args:
            size: Fixed logical length, must be positive
            default: Value held by every slot without an override (default: None)

        Raises:
            TypeError: If size doesn't support __index__
            InvalidLengthError: If size is zero or negative
        """
        try:
            size = op_index(size)
        except TypeError:
            raise TypeError("size must support __index__") from None

        if size <= 0:
            raise InvalidLengthError("size must be positive")

        self._size = size
        self._default = default
        self._overrides = {}

    @property
    def default(self) -> T:
        """The value held by every position without an override."""
        return self._default

    @property
    def override_count(self) -> int:
        """Number of positions currently holding a non-default value."""
        return len(self._overrides)

    def length(self) -> int:
        """Return the fixed logical length."""
        return self._size

    def __len__(self) -> int:
        """Return the fixed logical length."""
        return self._size

    def _check_index(self, index: SupportsIndex, message: str) -> int:
        """Convert index to an int and validate it against the bounds.

        Negative indices are rejected rather than counted from the end.
        """
        try:
            idx = op_index(index)
        except TypeError:
            raise TypeError(f"indices must be integers, not {type(index).__name__}") from None

        if not 0 <= idx < self._size:
            raise IndexOutOfBoundsError(message)
        return idx

    def _is_default(self, value: object) -> bool:
        # Identity first so a default that isn't equal to itself (nan) still matches
        return value is self._default or value == self._default

    def _find(self, idx: int) -> tuple[bool, T]:
        """Look up the override record for a validated index.

        Returns:
            ``(True, value)`` if a record exists, ``(False, default)`` otherwise
        """
        if idx in self._overrides:
            return True, self._overrides[idx]
        return False, self._default

    def _delete(self, idx: int) -> None:
        """Remove the override record for a validated index."""
        del self._overrides[idx]

    def get(self, index: SupportsIndex) -> T:
        """Return the value at index.

        Args:
            index: Position in ``[0, length)``

        Returns:
            The override stored at index, or the default if there is none

        Raises:
            TypeError: If index doesn't support __index__
            IndexOutOfBoundsError: If index is out of range
        """
        idx = self._check_index(index, "list index out of range")
        return self._find(idx)[1]

    def put(self, index: SupportsIndex, value: T) -> None:
        """Store value at index.

        Storing the default removes any override for index; any other value
        replaces an existing override or adds a new one.

        Args:
            index: Position in ``[0, length)``
            value: Value to store

        Raises:
            TypeError: If index doesn't support __index__
            IndexOutOfBoundsError: If index is out of range
        """
        idx = self._check_index(index, "list assignment index out of range")
        found, _ = self._find(idx)

        if self._is_default(value):
            if found:
                self._delete(idx)
            return

        # Updating an existing key keeps its insertion position; new keys go last
        self._overrides[idx] = value

    def unset(self, index: SupportsIndex) -> T:
        """Reset the value at index to the default.

        Args:
            index: Position in ``[0, length)``

        Returns:
            The value that was at index before unsetting

        Raises:
            IndexOutOfBoundsError: If index is out of range
        """
        idx = self._check_index(index, "list index out of range")
        found, old_value = self._find(idx)
        if found:
            self._delete(idx)
        return old_value

    def __getitem__(self, index: SupportsIndex) -> T:  # type: ignore[override]
        """Return the value at index. Slices are not supported."""
        if isinstance(index, slice):
            raise TypeError("SparseIndexedList does not support slicing")
        return self.get(index)

    def __setitem__(self, index: SupportsIndex, value: T) -> None:
        """Store value at index. Slices are not supported."""
        if isinstance(index, slice):
            raise TypeError("SparseIndexedList does not support slice assignment")
        self.put(index, value)

    def iterator(self) -> SparseIndexedListIterator[T]:
        """Return a new iterator over all positions, starting at index 0."""
        return SparseIndexedListIterator(self)

    def __iter__(self) -> SparseIndexedListIterator[T]:
        return self.iterator()

    def overrides(self) -> Iterator[tuple[int, T]]:
        """Iterate over the stored ``(index, value)`` pairs in insertion order."""
        return iter(list(self._overrides.items()))

    def __contains__(self, value: object) -> bool:
        """Check if value is held by any position.

        Args:
            value: Value to search for

        Returns:
            True if value is found (override or implicit default), False otherwise
        """
        if self._is_default(value) and len(self._overrides) < self._size:
            return True
        return any(v is value or v == value for v in self._overrides.values())

    def count(self, value: object) -> int:
        """Return number of positions holding value.

        Args:
            value: Value to count

        Returns:
            Number of times value appears across all positions
        """
        override_count = sum(1 for v in self._overrides.values() if v is value or v == value)

        if self._is_default(value):
            return override_count + self._size - len(self._overrides)
        return override_count

    def __eq__(self, other: object) -> bool:
        """Return True if other holds the same values in the same order.

        Supports comparison with another SparseIndexedList, a list or a tuple.
        """
        if self is other:
            return True

        if isinstance(other, SparseIndexedList):
            if self._size != other._size:
                return False
            all_keys = set(self._overrides) | set(other._overrides)
            for key in all_keys:
                if self._find(key)[1] != other._find(key)[1]:
                    return False
            # With no override somewhere, the defaults themselves are compared
            if len(all_keys) < self._size:
                return bool(self._default == other._default)
            return True

        if not isinstance(other, (list, tuple)):
            return NotImplemented

        if self._size != len(other):
            return False
        return all(self._find(i)[1] == other_val for i, other_val in enumerate(other))

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> SparseIndexedList[T]:
        """Return a shallow copy with the same length, default and overrides."""
        new = SparseIndexedList(self._size, self._default)
        new._overrides = self._overrides.copy()
        return new

    def copy(self) -> SparseIndexedList[T]:
        """Return a shallow copy of the SparseIndexedList."""
        return self.__copy__()

    def __repr__(self) -> str:
        """Return a string representation of the SparseIndexedList.

        Format: *SparseIndexedList<size/default>[idx: val, ..., idx: val]*

        - Overrides are listed in index order
        - ``...`` marks a run of one or more default positions
        """
        header = f"{type(self).__name__}<{self._size}/{self._default!r}>"
        if not self._overrides:
            return f"{header}[...]"

        def parts_gen() -> Iterator[str]:
            sorted_keys = sorted(self._overrides)

            if sorted_keys[0] > 0:
                yield "..."

            for i, key in enumerate(sorted_keys):
                yield f"{key}: {self._overrides[key]!r}"
                if i < len(sorted_keys) - 1 and sorted_keys[i + 1] > key + 1:
                    yield "..."

            if sorted_keys[-1] < self._size - 1:
                yield "..."

        return f"{header}[{', '.join(parts_gen())}]"


class SparseIndexedListIterator(Generic[T]):
    """Forward-only iterator over every position of a SparseIndexedList.

    Values are read when requested, so changes made to positions not yet
    reached are visible. An exhausted iterator stays exhausted.
    """

    def __init__(self, container: SparseIndexedList[T]) -> None:
        self._container = container
        self._next_index = 0

    def has_next(self) -> bool:
        """Return True if another element remains."""
        return self._next_index < self._container.length()

    def __iter__(self) -> SparseIndexedListIterator[T]:
        return self

    def __next__(self) -> T:
        """Return the next element.

        Raises:
            NoMoreElementsError: If every position has been returned
        """
        if not self.has_next():
            raise NoMoreElementsError
        value = self._container.get(self._next_index)
        self._next_index += 1
        return value


def create(size: SupportsIndex, default: T) -> SparseIndexedList[T]:
    """Create a SparseIndexedList of ``size`` slots, all holding ``default``.

    Raises:
        InvalidLengthError: If size is zero or negative
    """
    return SparseIndexedList(size, default)
