"""
Insertion-ordered frequency table.

The single counting abstraction behind mode, top values and type inference.
Ranking is stable: values with equal counts keep the order in which they
were first seen, so "first encountered wins" holds everywhere ties occur.

Booleans are counted apart from the numbers they compare equal to, so
True and 1 are two distinct values. Equal numbers of different types
(1 and 1.0) still share a bucket.
"""

from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple


def value_key(value: Any) -> Tuple[bool, Any]:
    """Hashable identity of a cell value; keeps True/False apart from 1/0."""
    return (type(value) is bool, value)


class FrequencyTable:
    """
    Count occurrences of hashable values, remembering first-seen order.

    Example:
        >>> table = FrequencyTable(["b", "a", "b", "a", "c"])
        >>> table.most_common(2)
        [('b', 2), ('a', 2)]
        >>> table.mode()
        ('b', 2)
        >>> len(FrequencyTable([True, 1]))
        2
    """

    def __init__(self, values: Iterable[Any] = ()):
        # key -> [first value seen, count]
        self._counts: Dict[Hashable, List[Any]] = {}
        self._total = 0
        self.update(values)

    def add(self, value: Any) -> None:
        """Count one occurrence of ``value``."""
        entry = self._counts.setdefault(value_key(value), [value, 0])
        entry[1] += 1
        self._total += 1

    def update(self, values: Iterable[Any]) -> None:
        for value in values:
            self.add(value)

    def count(self, value: Any) -> int:
        entry = self._counts.get(value_key(value))
        return entry[1] if entry else 0

    @property
    def total(self) -> int:
        """Number of values counted, including repeats."""
        return self._total

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[Any]:
        return (value for value, _ in self._counts.values())

    def items(self) -> Iterator[Tuple[Any, int]]:
        """Yield (value, count) pairs in first-seen order."""
        return ((value, count) for value, count in self._counts.values())

    def most_common(self, n: Optional[int] = None) -> List[Tuple[Any, int]]:
        """
        Rank values by descending count.

        Args:
            n: Maximum number of entries to return (all when None)

        Returns:
            List of (value, count) pairs; ties keep first-seen order
        """
        # sorted() is stable, so equal counts stay in insertion order
        ranked = sorted(self.items(), key=lambda item: item[1], reverse=True)
        return ranked if n is None else ranked[:n]

    def mode(self) -> Optional[Tuple[Any, int]]:
        """Return the (value, count) with the highest count, or None if empty."""
        best: Optional[Tuple[Any, int]] = None
        for value, count in self.items():
            if best is None or count > best[1]:
                best = (value, count)
        return best
