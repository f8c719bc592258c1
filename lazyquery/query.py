"""Lazy, re-iterable query pipelines over arbitrary iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any

IterateFn = Callable[[], Iterator[Any]]


class Query:
    """A lazily evaluated sequence.

    A query holds a factory that produces a fresh iterator each time the
    query is iterated, so a query can be consumed any number of times.
    Every operator returns a new query and does no work until iterated.
    """

    def __init__(self, iterate: IterateFn) -> None:
        self._iterate = iterate

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> "Query":
        """Build a query over ``iterable``; strings yield their characters."""
        return cls(lambda: iter(iterable))

    def __iter__(self) -> Iterator[Any]:
        return self._iterate()

    def results(self) -> list[Any]:
        """Evaluate the query and return its elements as a list."""
        return list(self)

    # Projection -----------------------------------------------------------

    def select_many(self, selector: Callable[[Any], Iterable[Any]]) -> "Query":
        """Project each element to a sequence and flatten the results."""

        def iterate() -> Iterator[Any]:
            for outer in self:
                yield from selector(outer)

        return Query(iterate)

    def select_many_indexed(
        self, selector: Callable[[int, Any], Iterable[Any]]
    ) -> "Query":
        """Like :meth:`select_many`; the selector also gets the element's index."""

        def iterate() -> Iterator[Any]:
            for index, outer in enumerate(self):
                yield from selector(index, outer)

        return Query(iterate)

    def select_many_by(
        self,
        selector: Callable[[Any], Iterable[Any]],
        result_selector: Callable[[Any, Any], Any],
    ) -> "Query":
        """Flatten projected sequences, mapping each ``(item, outer)`` pair."""

        def iterate() -> Iterator[Any]:
            for outer in self:
                for item in selector(outer):
                    yield result_selector(item, outer)

        return Query(iterate)

    def select_many_by_indexed(
        self,
        selector: Callable[[int, Any], Iterable[Any]],
        result_selector: Callable[[Any, Any], Any],
    ) -> "Query":
        """Like :meth:`select_many_by`; the selector also gets the outer index."""

        def iterate() -> Iterator[Any]:
            for index, outer in enumerate(self):
                for item in selector(index, outer):
                    yield result_selector(item, outer)

        return Query(iterate)

    # Partitioning ---------------------------------------------------------

    def skip(self, count: int) -> "Query":
        """Bypass the first ``count`` elements and yield the rest."""
        return Query(lambda: islice(self, max(count, 0), None))

    def skip_while(self, predicate: Callable[[Any], bool]) -> "Query":
        """Skip elements while ``predicate`` holds, then yield the remainder.

        The predicate is not called again once it has returned false.
        """

        def iterate() -> Iterator[Any]:
            it = iter(self)
            for item in it:
                if not predicate(item):
                    yield item
                    break
            yield from it

        return Query(iterate)

    def skip_while_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`skip_while`; the predicate also gets the element's index."""

        def iterate() -> Iterator[Any]:
            it = iter(self)
            for index, item in enumerate(it):
                if not predicate(index, item):
                    yield item
                    break
            yield from it

        return Query(iterate)

    def take(self, count: int) -> "Query":
        """Yield at most the first ``count`` elements."""
        return Query(lambda: islice(self, max(count, 0)))

    def take_while(self, predicate: Callable[[Any], bool]) -> "Query":
        """Yield elements while ``predicate`` holds, then stop."""

        def iterate() -> Iterator[Any]:
            for item in self:
                if not predicate(item):
                    return
                yield item

        return Query(iterate)

    def take_while_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`take_while`; the predicate also gets the element's index."""

        def iterate() -> Iterator[Any]:
            for index, item in enumerate(self):
                if not predicate(index, item):
                    return
                yield item

        return Query(iterate)

    # Sets -----------------------------------------------------------------

    def union(self, other: "Query") -> "Query":
        """Yield the distinct elements of this query followed by those of ``other``.

        Elements must be hashable.
        """

        def iterate() -> Iterator[Any]:
            seen: set[Any] = set()
            for source in (self, other):
                for item in source:
                    if item not in seen:
                        seen.add(item)
                        yield item

        return Query(iterate)

    # Filtering ------------------------------------------------------------

    def where(self, predicate: Callable[[Any], bool]) -> "Query":
        """Yield only the elements for which ``predicate`` holds."""
        return Query(lambda: (item for item in self if predicate(item)))

    def where_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`where`; the predicate also gets the element's index."""
        return Query(
            lambda: (item for index, item in enumerate(self) if predicate(index, item))
        )

    # Combining ------------------------------------------------------------

    def zip(self, other: "Query", result_selector: Callable[[Any, Any], Any]) -> "Query":
        """Combine corresponding elements; stops at the end of the shorter query."""
        return Query(lambda: (result_selector(a, b) for a, b in zip(self, other)))