"""A fixed-length list that stores only positions differing from a default.

See README.md for complete documentation and usage examples.
"""

from sparseindexed.sparseindexed import (
    IndexOutOfBoundsError,
    InvalidLengthError,
    NoMoreElementsError,
    SparseIndexedList,
    SparseIndexedListError,
    SparseIndexedListIterator,
    create,
)

__all__ = [
    "IndexOutOfBoundsError",
    "InvalidLengthError",
    "NoMoreElementsError",
    "SparseIndexedList",
    "SparseIndexedListError",
    "SparseIndexedListIterator",
    "create",
]
