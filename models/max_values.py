"""Bounded top-N container backed by a fixed-capacity min-heap."""

from typing import Any, Iterable, Iterator, List, Optional, Tuple


class MaxValues:
    """
    Keep the N largest values pushed so far using a min-heap.

    The smallest retained value sits at the root, so a new value only has to be
    compared against the root once the container is full. Insertion is
    O(log N) and the backing list never grows past ``capacity``.

    Values are exposed read-only (tuple snapshot or iteration) or handed over
    through ``to_values``; mutating a stored element in place would break the
    heap ordering.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty container.

        Args:
            capacity: Maximum number of values to retain

        Raises:
            ValueError: If capacity is negative or not an integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._capacity = capacity
        self._data: List[Any] = []

    @classmethod
    def from_iterable(cls, values: Iterable[Any], capacity: int) -> "MaxValues":
        """
        Build a container by pushing every value of ``values`` in order.

        Args:
            values: Any iterable of mutually comparable values
            capacity: Maximum number of values to retain

        Returns:
            Container holding the ``capacity`` largest values
        """
        container = cls(capacity)
        container.extend(values)
        return container

    @property
    def capacity(self) -> int:
        """Maximum number of values retained."""
        return self._capacity

    def extend(self, values: Iterable[Any]) -> None:
        """Push every value of ``values`` in order."""
        for value in values:
            self.push(value)

    def push(self, value: Any) -> bool:
        """
        Offer a value to the container.

        While the container has room the value is always stored. Once full,
        the value replaces the current minimum only if it is strictly greater.

        Args:
            value: Value comparable with the ones already stored

        Returns:
            True if the value was retained, False if it was discarded
        """
        if self._capacity == 0:
            return False

        if len(self._data) < self._capacity:
            self._push_back(value)
            return True
        return self._push_forward(value)

    def _push_back(self, value: Any) -> None:
        # Append as a leaf, then sift up towards the root
        data = self._data
        data.append(value)
        pos = len(data) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if data[parent] > data[pos]:
                data[parent], data[pos] = data[pos], data[parent]
                pos = parent
            else:
                break

    def _push_forward(self, value: Any) -> bool:
        # Replace the root, then sift down towards the leaves
        data = self._data
        if value <= data[0]:
            return False

        data[0] = value
        n = len(data)
        pos = 0
        while True:
            left = 2 * pos + 1
            if left >= n:
                break
            right = left + 1
            child = right if right < n and data[right] < data[left] else left
            if data[pos] > data[child]:
                data[pos], data[child] = data[child], data[pos]
                pos = child
            else:
                break
        return True

    def is_full(self) -> bool:
        """
        Check if the container holds ``capacity`` values.

        Returns:
            True if further pushes go through the replacement path
        """
        return len(self._data) >= self._capacity

    def min_value(self) -> Optional[Any]:
        """
        Get the smallest retained value.

        Returns:
            The heap root, or None if nothing is stored
        """
        if not self._data:
            return None
        return self._data[0]

    def as_values(self) -> Tuple[Any, ...]:
        """
        Get a read-only snapshot of the retained values in heap order.

        May contain fewer than ``capacity`` values if fewer were pushed.
        """
        return tuple(self._data)

    def to_values(self) -> List[Any]:
        """
        Hand over the retained values, leaving the container empty.

        Returns:
            List of retained values in heap order (not sorted)
        """
        data, self._data = self._data, []
        return data

    def into_iter(self) -> Iterator[Any]:
        """Consume the container and iterate over its values."""
        return iter(self.to_values())

    def copy(self) -> "MaxValues":
        """Return an independent container with the same values."""
        clone = type(self)(self._capacity)
        clone._data = list(self._data)
        return clone

    __copy__ = copy

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._data))

    def __len__(self) -> int:
        """Return number of values currently retained."""
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, values={self._data!r})"
