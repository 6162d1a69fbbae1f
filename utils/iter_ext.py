"""Iterator helpers built on MaxValues."""

from typing import Any, Callable, Iterable, Iterator

from models.max_values import MaxValues
from models.ranked import RankedItem


def max_values(values: Iterable[Any], n: int) -> Iterator[Any]:
    """
    Iterate over the n largest values of an iterable.

    Args:
        values: Any iterable of mutually comparable values
        n: Number of values to keep

    Returns:
        Iterator over the retained values, in no particular order

    Example:
        >>> sorted(max_values([1, 5, 2, 4, 7, 10, 0, 15, 3], 3))
        [7, 10, 15]
    """
    return MaxValues.from_iterable(values, n).into_iter()


def max_values_by(
    items: Iterable[Any], n: int, key: Callable[[Any], float]
) -> Iterator[Any]:
    """
    Iterate over the n items with the largest ``key(item)``.

    Args:
        items: Any iterable, items need not be comparable
        n: Number of items to keep
        key: Scoring function

    Returns:
        Iterator over the retained items, in no particular order
    """
    ranked = (RankedItem(score=key(item), item=item) for item in items)
    return (entry.item for entry in max_values(ranked, n))
