# lazyquery

Lazy, chainable query operators over any Python iterable.

`lazyquery.query.Query` wraps a source of items. Its operators build new
queries without doing any work; items are produced only when the query is
iterated. Each iteration asks the source for a fresh iterator. A query built
over a list, tuple, string or other re-iterable container can therefore be
consumed more than once. A query built over a one-shot iterator, such as a
generator, can be consumed only once.

## Installation

```
pip install lazyquery
```

## Usage

```python
from lazyquery.query import Query

fruits = ["apple", "passionfruit", "banana", "mango",
          "orange", "blueberry", "grape", "strawberry"]

long_names = Query.from_iterable(fruits).where(lambda f: len(f) > 6)
print(long_names.results())
# ['passionfruit', 'blueberry', 'strawberry']
```

### Building and reading queries

- `Query.from_iterable(iterable)` builds a query over any iterable. A
  string yields its characters.
- `Query(iterate)` builds a query from a function that takes no arguments
  and returns a new iterator each time it is called.
- A query is iterable. `results()` evaluates it and returns a list.

### Operators

- `where(predicate)` and `where_indexed(predicate)` keep the items for which
  the predicate is true. The indexed form calls `predicate(index, item)`.
- `skip(count)` bypasses the first `count` items. A count of zero or less
  skips nothing.
- `skip_while(predicate)` and `skip_while_indexed(predicate)` bypass items
  while the predicate holds. Once it returns false, that item and all later
  items are yielded, and the predicate is not called again.
- `take(count)` yields at most the first `count` items. A count of zero or
  less yields nothing.
- `take_while(predicate)` and `take_while_indexed(predicate)` yield items
  while the predicate holds and stop at the first item for which it is
  false.
- `select_many(selector)` and `select_many_indexed(selector)` map each item
  to an iterable, which may be another `Query`, and flatten the results. The
  indexed form calls `selector(index, item)`.
- `select_many_by(selector, result_selector)` and
  `select_many_by_indexed(selector, result_selector)` do the same, then call
  `result_selector(inner_item, outer_item)` on each flattened item.
- `union(other)` yields the items of this query and then those of `other`.
  Duplicates are dropped and the first occurrence is kept. Items must be
  hashable.
- `zip(other, result_selector)` calls `result_selector(a, b)` on items taken
  pairwise from the two queries. It stops at the end of the shorter one.

```python
nested = Query.from_iterable([[1, 2, 3], [4, 5, 6, 7]])
print(nested.select_many(Query.from_iterable).results())
# [1, 2, 3, 4, 5, 6, 7]

a = Query.from_iterable([1, 2, 3])
b = Query.from_iterable([2, 4, 5, 1])
print(a.union(b).results())                      # [1, 2, 3, 4, 5]
print(a.zip(b, lambda x, y: x + y).results())    # [3, 6, 8]

grades = Query.from_iterable([98, 92, 85, 82, 70, 59, 56])
print(grades.skip_while(lambda g: g >= 80).results())   # [70, 59, 56]
print(grades.take(3).results())                          # [98, 92, 85]
```

## What it does not do

The package provides only the filtering, partitioning, flattening, union
and zip operators listed above. It has no operators for projecting single
items, ordering, grouping, joining, aggregating, distinct or intersection
sets, or element lookup such as first, last or single. For those, use the
standard library, for example `map`, `sorted`, `itertools` or `functools`,
on a query or on its `results()`.